"""
Module-level cache policy functions bound to the default registry.

The default registry is built from ``PROVIDER_DEFAULTS`` (plus any
environment overrides) on import. ``reload_default_registry`` and
``set_default_registry`` swap the whole table atomically.
"""

from typing import Any, Dict, List, Optional, Union

from ..config.defaults import PROVIDER_DEFAULTS
from ..core.capabilities.overrides import apply_registry_overrides
from ..core.capabilities.policy import CachePolicy
from ..core.capabilities.registry import ProviderRegistry, RegistryHolder
from ..models.model_info import ModelInfo
from ..models.provider_config import CacheTTL, PromptSection, ProviderConfig, UserConfig


def build_default_registry() -> ProviderRegistry:
    """Build the baseline registry with environment overrides applied."""
    return apply_registry_overrides(ProviderRegistry.from_dict(PROVIDER_DEFAULTS))


_default_holder = RegistryHolder(build_default_registry())
_default_policy = CachePolicy(_default_holder)


def get_default_policy() -> CachePolicy:
    """Get the process-wide CachePolicy."""
    return _default_policy


def get_default_registry() -> ProviderRegistry:
    return _default_holder.current()


def set_default_registry(registry: ProviderRegistry) -> ProviderRegistry:
    """Replace the default registry, returning the previous one."""
    return _default_holder.swap(registry)


def reload_default_registry() -> ProviderRegistry:
    """Rebuild the default registry (re-reading overrides) and swap it in."""
    return _default_holder.swap(build_default_registry())


def get_config(
    provider_id: str,
    model: Optional[ModelInfo] = None,
    agent_id: Optional[str] = None,
    user_provider_config: Optional[UserConfig] = None,
    user_agent_config: Optional[UserConfig] = None
) -> ProviderConfig:
    """Resolve the effective config for a provider. See ``CachePolicy.get_config``."""
    return _default_policy.get_config(provider_id, model, agent_id, user_provider_config, user_agent_config)


def get_effective_config(
    model: ModelInfo,
    agent_id: Optional[str] = None,
    user_provider_config: Optional[UserConfig] = None,
    user_agent_config: Optional[UserConfig] = None
) -> ProviderConfig:
    return _default_policy.get_effective_config(model, agent_id, user_provider_config, user_agent_config)


def get_prompt_ordering(
    model: ModelInfo,
    agent_id: Optional[str] = None,
    user_config: Optional[UserConfig] = None
) -> List[PromptSection]:
    return _default_policy.get_prompt_ordering(model, agent_id, user_config)


def supports_explicit_caching(provider_id: str) -> bool:
    return _default_policy.supports_explicit_caching(provider_id)


def get_cache_property(provider_id: str) -> Optional[str]:
    return _default_policy.get_cache_property(provider_id)


def is_caching_enabled(
    provider_id: str,
    model: Optional[ModelInfo] = None,
    user_config: Optional[UserConfig] = None
) -> bool:
    return _default_policy.is_caching_enabled(provider_id, model, user_config)


def get_provider_options_key(npm: str, provider_id: str) -> str:
    return _default_policy.get_provider_options_key(npm, provider_id)


def build_cache_control(
    provider_id: str,
    ttl: Union[CacheTTL, str] = CacheTTL.FIVE_MINUTES
) -> Dict[str, Any]:
    return _default_policy.build_cache_control(provider_id, ttl)
