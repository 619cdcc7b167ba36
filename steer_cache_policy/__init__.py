"""
Steer Cache Policy - per-request prompt caching and ordering policy for LLM providers.

Resolves, for a provider (and optionally a model and agent), the effective
caching strategy and prompt section ordering:
- Explicit breakpoint providers (Anthropic, Bedrock, Vertex Anthropic)
- Automatic prefix providers (OpenAI, Azure, GitHub Copilot, DeepSeek)
- Implicit caching providers (Gemini)
- Passthrough providers (OpenRouter, Vercel)

Configuration hierarchy (highest priority last):
    Provider defaults -> user provider config -> user agent config
"""

__version__ = "0.1.0"

from .api import (
    build_cache_control,
    get_cache_property,
    get_config,
    get_default_policy,
    get_default_registry,
    get_effective_config,
    get_prompt_ordering,
    get_provider_options_key,
    is_caching_enabled,
    reload_default_registry,
    set_default_registry,
    supports_explicit_caching,
)
from .core.capabilities import (
    CachePolicy,
    ProviderRegistry,
    RegistryHolder,
    detect_effective_provider,
    from_user_provider_config,
    merge_config,
    resolve_min_tokens,
)
from .errors import CachePolicyError, InvalidProviderConfigError, UnknownProviderError
from .models import (
    CacheConfig,
    CacheTTL,
    CacheType,
    MinTokensByModel,
    ModelInfo,
    PromptOrderConfig,
    PromptSection,
    ProviderConfig,
    SystemPromptMode,
    UserCacheConfig,
    UserConfig,
    UserPromptOrderConfig,
)

__all__ = [
    # Policy
    "CachePolicy",
    "ProviderRegistry",
    "RegistryHolder",

    # Default registry functions
    "get_config",
    "get_effective_config",
    "get_prompt_ordering",
    "supports_explicit_caching",
    "get_cache_property",
    "is_caching_enabled",
    "get_provider_options_key",
    "build_cache_control",
    "get_default_policy",
    "get_default_registry",
    "set_default_registry",
    "reload_default_registry",

    # Resolution primitives
    "merge_config",
    "resolve_min_tokens",
    "detect_effective_provider",
    "from_user_provider_config",

    # Models
    "CacheConfig",
    "CacheTTL",
    "CacheType",
    "MinTokensByModel",
    "ModelInfo",
    "PromptOrderConfig",
    "PromptSection",
    "ProviderConfig",
    "SystemPromptMode",
    "UserCacheConfig",
    "UserConfig",
    "UserPromptOrderConfig",

    # Errors
    "CachePolicyError",
    "InvalidProviderConfigError",
    "UnknownProviderError",
]
