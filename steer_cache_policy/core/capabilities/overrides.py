"""Registry override loading for provider cache baselines."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import ValidationError

from ...config.constants import (
    OVERRIDES_DEFAULT_FILENAME,
    OVERRIDES_ENABLED_ENV_VAR,
    OVERRIDES_FILE_ENV_VAR,
    OVERRIDES_JSON_ENV_VAR,
)
from ...models.provider_config import CacheConfig, PromptOrderConfig
from .registry import ProviderRegistry

logger = logging.getLogger(__name__)

_SECTIONS = {"cache", "promptOrder"}


def load_registry_overrides() -> Dict[str, Dict[str, Any]]:
    """
    Load provider baseline overrides from environment variable or file.

    Requires STEER_CACHE_POLICY_OVERRIDES_ENABLED=true to activate.

    Priority order:
    1. STEER_CACHE_POLICY_OVERRIDES_JSON environment variable (JSON string)
    2. STEER_CACHE_POLICY_OVERRIDES_FILE environment variable (path to JSON file)
    3. ~/.steer/cache_policy_overrides.json (if exists)

    Returns:
        Dict mapping provider IDs to raw config overrides
    """
    load_dotenv()

    if os.getenv(OVERRIDES_ENABLED_ENV_VAR, "false").lower() != "true":
        return {}

    json_str = os.getenv(OVERRIDES_JSON_ENV_VAR)
    if json_str:
        try:
            overrides = json.loads(json_str)
            logger.info(f"Loaded cache policy overrides for {len(overrides)} providers from environment")
            return overrides
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse {OVERRIDES_JSON_ENV_VAR}: {e}")

    file_path = os.getenv(OVERRIDES_FILE_ENV_VAR)
    if file_path:
        try:
            with open(file_path, 'r') as f:
                overrides = json.load(f)
            logger.info(f"Loaded cache policy overrides for {len(overrides)} providers from {file_path}")
            return overrides
        except (FileNotFoundError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load cache policy overrides from {file_path}: {e}")

    default_path = Path.home() / ".steer" / OVERRIDES_DEFAULT_FILENAME
    if default_path.exists():
        try:
            with open(default_path, 'r') as f:
                overrides = json.load(f)
            logger.info(f"Loaded cache policy overrides for {len(overrides)} providers from {default_path}")
            return overrides
        except json.JSONDecodeError as e:
            logger.error(f"Failed to load cache policy overrides from {default_path}: {e}")

    return {}


def validate_registry_override(override: Any, complete: bool = False) -> bool:
    """
    Validate a single provider override.

    Args:
        override: Raw override for one provider
        complete: Whether the override must be a full config (new provider)

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(override, dict) or not override:
        return False

    unknown = set(override) - _SECTIONS
    if unknown:
        logger.warning(f"Unknown sections in cache policy override: {sorted(unknown)}")
        return False

    for section in override.values():
        if not isinstance(section, dict):
            logger.warning("Cache policy override sections must be objects")
            return False

    if not complete:
        return True

    try:
        CacheConfig.model_validate(override.get("cache", {}))
        PromptOrderConfig.model_validate(override.get("promptOrder", {}))
    except ValidationError as e:
        logger.warning(f"Incomplete cache policy override: {e.error_count()} errors")
        return False
    return True


def apply_registry_overrides(registry: ProviderRegistry) -> ProviderRegistry:
    """
    Return a registry with the loaded overrides applied.

    Invalid entries are skipped with a warning. The passed registry is not
    modified; when nothing applies it is returned as is.
    """
    overrides = load_registry_overrides()
    if not overrides:
        return registry

    if not isinstance(overrides, dict):
        logger.error("Cache policy overrides must be a JSON object keyed by provider id")
        return registry

    accepted: Dict[str, Dict[str, Any]] = {}
    for provider_id, override in overrides.items():
        if not validate_registry_override(override, complete=provider_id not in registry):
            logger.warning(f"Skipping invalid cache policy override for provider: {provider_id}")
            continue

        try:
            registry.with_overrides({provider_id: override})
        except (ValidationError, ValueError) as e:
            logger.warning(f"Skipping cache policy override for {provider_id}: {e}")
            continue

        accepted[provider_id] = override
        logger.debug(f"Applied cache policy overrides for {provider_id}")

    if not accepted:
        return registry
    return registry.with_overrides(accepted)
