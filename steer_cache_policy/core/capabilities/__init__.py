"""Capability registry and cache policy layer.

This layer handles:
- Provider baseline registry and atomic replacement
- Layered user/agent override merging
- Model-pattern minTokens resolution
- Routing provider detection
- Cache marker and provider options dispatch
"""

from .adapters import from_user_provider_config
from .detection import detect_effective_provider
from .merge import merge_config
from .overrides import apply_registry_overrides, load_registry_overrides, validate_registry_override
from .patterns import match_min_tokens_pattern, resolve_min_tokens
from .policy import EXPLICIT_CACHE_TYPES, CachePolicy
from .registry import ProviderRegistry, RegistryHolder

__all__ = [
    "CachePolicy",
    "EXPLICIT_CACHE_TYPES",
    "ProviderRegistry",
    "RegistryHolder",
    "apply_registry_overrides",
    "detect_effective_provider",
    "from_user_provider_config",
    "load_registry_overrides",
    "match_min_tokens_pattern",
    "merge_config",
    "resolve_min_tokens",
    "validate_registry_override",
]
