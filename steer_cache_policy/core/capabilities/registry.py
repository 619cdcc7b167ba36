"""
Provider registry.

Holds the immutable baseline ``ProviderConfig`` for every known provider.
A registry is never mutated after construction; ``with_overrides`` and
``RegistryHolder.swap`` replace whole tables instead.
"""

import copy
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional

from ...config.constants import DEFAULT_PROVIDER_KEY
from ...errors import UnknownProviderError
from ...models.provider_config import ProviderConfig
from ...observability.logging import PolicyLogger

policy_logger = PolicyLogger("registry")


class ProviderRegistry(Mapping):
    """Read-only mapping of provider id to baseline ``ProviderConfig``."""

    def __init__(self, configs: Mapping):
        if DEFAULT_PROVIDER_KEY not in configs:
            raise ValueError(f"Provider registry requires a '{DEFAULT_PROVIDER_KEY}' entry")

        entries: Dict[str, ProviderConfig] = {}
        for provider_id, config in configs.items():
            if not isinstance(config, ProviderConfig):
                config = ProviderConfig.model_validate(config)
            entries[provider_id] = config

        self._configs = MappingProxyType(entries)

    @classmethod
    def from_dict(cls, raw: Mapping) -> "ProviderRegistry":
        """Validate raw nested dicts (camelCase or snake_case keys) into a registry."""
        return cls({provider_id: ProviderConfig.model_validate(config) for provider_id, config in raw.items()})

    def __getitem__(self, provider_id: str) -> ProviderConfig:
        return self._configs[provider_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"ProviderRegistry({sorted(self._configs)})"

    @property
    def default(self) -> ProviderConfig:
        return self._configs[DEFAULT_PROVIDER_KEY]

    def lookup(self, provider_id: Optional[str]) -> ProviderConfig:
        """Return the provider's baseline, or the default entry for unknown ids."""
        config = self._configs.get(provider_id) if provider_id is not None else None
        if config is None:
            policy_logger.debug("Unknown provider, using default config", provider=provider_id)
            return self.default
        return config

    def get_strict(self, provider_id: str) -> ProviderConfig:
        """Return the provider's baseline, raising for unknown ids."""
        try:
            return self._configs[provider_id]
        except KeyError:
            raise UnknownProviderError(provider_id) from None

    def with_overrides(self, overrides: Mapping) -> "ProviderRegistry":
        """
        Return a new registry with raw overrides deep-merged onto the baselines.

        Args:
            overrides: ``{provider_id: raw_config}`` with camelCase keys; unknown
                providers are added as new entries and must then be complete
                configs.

        Returns:
            A new ProviderRegistry; this registry is left untouched.
        """
        entries: Dict[str, Any] = dict(self._configs)
        for provider_id, raw in overrides.items():
            base = self._configs.get(provider_id)
            if base is None:
                entries[provider_id] = ProviderConfig.model_validate(raw)
                continue
            merged = _deep_merge(base.model_dump(by_alias=True, mode="json"), raw)
            entries[provider_id] = ProviderConfig.model_validate(merged)
        return ProviderRegistry(entries)


def _deep_merge(base: Dict[str, Any], override: Mapping) -> Dict[str, Any]:
    """Merge override into a copy of base; nested dicts merge, everything else replaces."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), dict) and key != "minTokens":
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class RegistryHolder:
    """
    Single reference to the current registry.

    Readers call ``current()`` without locking; writers replace the whole
    table through ``swap()`` so no reader ever sees a partially updated entry.
    """

    def __init__(self, registry: ProviderRegistry):
        self._registry = registry
        self._write_lock = threading.Lock()

    def current(self) -> ProviderRegistry:
        return self._registry

    def swap(self, registry: ProviderRegistry) -> ProviderRegistry:
        """Install a new registry and return the previous one."""
        if not isinstance(registry, ProviderRegistry):
            raise TypeError(f"Expected ProviderRegistry, got {type(registry).__name__}")

        with self._write_lock:
            previous = self._registry
            self._registry = registry

        policy_logger.info("Provider registry replaced", providers=len(registry))
        return previous
