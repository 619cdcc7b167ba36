"""
Cache policy resolution.

``CachePolicy`` answers the per-request questions the request pipeline asks:
the effective config for a provider/model/agent, whether explicit cache
markers are used, which marker to emit, which provider options key to write
under and how prompt sections should be ordered.

Configuration hierarchy (highest priority last):
    Registry baseline -> user provider config -> user agent config

All methods are pure functions of their arguments and the current registry.
"""

from typing import Any, Dict, List, Optional, Union

from ...config.constants import EPHEMERAL_CACHE_CONTROL, PROVIDER_OPTIONS_KEYS
from ...models.model_info import ModelInfo
from ...models.provider_config import (
    CacheTTL,
    CacheType,
    PromptSection,
    ProviderConfig,
    UserConfig,
)
from ...observability.logging import PolicyLogger
from .detection import detect_effective_provider
from .merge import merge_config
from .patterns import resolve_min_tokens
from .registry import ProviderRegistry, RegistryHolder

policy_logger = PolicyLogger("policy")

# Cache types that take explicit markers in the request payload
EXPLICIT_CACHE_TYPES = frozenset({CacheType.EXPLICIT_BREAKPOINT, CacheType.PASSTHROUGH})


class CachePolicy:
    """Capability dispatcher bound to a provider registry."""

    def __init__(self, registry: Union[ProviderRegistry, RegistryHolder]):
        """
        Args:
            registry: A fixed registry, or a holder whose current registry is
                read on every call (for hot reload)
        """
        if isinstance(registry, ProviderRegistry):
            registry = RegistryHolder(registry)
        self._holder = registry

    @property
    def registry(self) -> ProviderRegistry:
        return self._holder.current()

    def get_config(
        self,
        provider_id: str,
        model: Optional[ModelInfo] = None,
        agent_id: Optional[str] = None,
        user_provider_config: Optional[UserConfig] = None,
        user_agent_config: Optional[UserConfig] = None
    ) -> ProviderConfig:
        """
        Resolve the effective config for a provider.

        Args:
            provider_id: Provider identifier; unknown ids use the default entry
            model: Optional model used to resolve a model-keyed minTokens table
            agent_id: Optional agent identifier; the agent layer applies only with it
            user_provider_config: Optional provider-level override
            user_agent_config: Optional agent-level override

        Returns:
            ProviderConfig with min_tokens collapsed to an int when a model is
            given; otherwise a pattern table is returned as is
        """
        config = self.registry.lookup(provider_id)

        config = merge_config(config, user_provider_config)

        if agent_id and user_agent_config is not None:
            config = merge_config(config, user_agent_config)

        min_tokens = config.cache.min_tokens
        if model is not None and not isinstance(min_tokens, int):
            resolved = resolve_min_tokens(min_tokens, model)
            config = config.model_copy(update={
                "cache": config.cache.model_copy(update={"min_tokens": resolved})
            })

        if policy_logger.is_debug_enabled():
            policy_logger.debug(
                "Resolved provider config",
                provider=provider_id,
                model=model.id if model is not None else None,
                agent=agent_id,
                provider_override=user_provider_config is not None,
                agent_override=bool(agent_id) and user_agent_config is not None,
                cache_type=config.cache.type.value,
                min_tokens=config.cache.min_tokens if isinstance(config.cache.min_tokens, int) else "table",
            )

        return config

    def get_effective_config(
        self,
        model: ModelInfo,
        agent_id: Optional[str] = None,
        user_provider_config: Optional[UserConfig] = None,
        user_agent_config: Optional[UserConfig] = None
    ) -> ProviderConfig:
        """Resolve the config of the provider that actually serves ``model``."""
        return self.get_config(
            detect_effective_provider(model),
            model,
            agent_id,
            user_provider_config,
            user_agent_config,
        )

    def get_prompt_ordering(
        self,
        model: ModelInfo,
        agent_id: Optional[str] = None,
        user_config: Optional[UserConfig] = None
    ) -> List[PromptSection]:
        """
        Get the prompt section ordering for a model's provider.

        Without ``agent_id`` the ``user_config`` is applied as a provider-level
        override; with ``agent_id`` it is applied as the agent-level override.
        """
        provider_config = None if agent_id else user_config
        agent_config = user_config if agent_id else None
        config = self.get_config(model.provider_id, model, agent_id, provider_config, agent_config)
        return list(config.prompt_order.ordering)

    def supports_explicit_caching(self, provider_id: str) -> bool:
        """Check if a provider takes explicit cache markers (explicit-breakpoint or passthrough)."""
        return self.registry.lookup(provider_id).cache.type in EXPLICIT_CACHE_TYPES

    def get_cache_property(self, provider_id: str) -> Optional[str]:
        """Get the payload property name used for cache markers, if any."""
        return self.registry.lookup(provider_id).cache.property

    def is_caching_enabled(
        self,
        provider_id: str,
        model: Optional[ModelInfo] = None,
        user_config: Optional[UserConfig] = None
    ) -> bool:
        """Check if caching is enabled, applying ``user_config`` as a provider-level override."""
        return self.get_config(provider_id, model, None, user_config).cache.enabled

    def get_provider_options_key(self, npm: str, provider_id: str) -> str:
        """Get the provider options namespace for a client library, falling back to ``provider_id``."""
        return PROVIDER_OPTIONS_KEYS.get(npm, provider_id)

    def build_cache_control(
        self,
        provider_id: str,
        ttl: Union[CacheTTL, str] = CacheTTL.FIVE_MINUTES
    ) -> Dict[str, Any]:
        """
        Build the cache control marker for a provider.

        Args:
            provider_id: Provider identifier
            ttl: Requested TTL. Accepted but does not change the marker; only
                ephemeral markers are emitted.

        Returns:
            ``{"type": "ephemeral"}`` for providers with a marker property and an
            explicit-breakpoint or passthrough cache type, otherwise ``{}``
        """
        cache = self.registry.lookup(provider_id).cache

        if not cache.property:
            return {}

        if cache.type in EXPLICIT_CACHE_TYPES:
            return dict(EPHEMERAL_CACHE_CONTROL)

        return {}
