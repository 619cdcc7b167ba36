"""
Public API Layer

Module-level functions bound to the process-wide provider registry.
"""

from .resolver import (
    build_cache_control,
    build_default_registry,
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

__all__ = [
    "build_cache_control",
    "build_default_registry",
    "get_cache_property",
    "get_config",
    "get_default_policy",
    "get_default_registry",
    "get_effective_config",
    "get_prompt_ordering",
    "get_provider_options_key",
    "is_caching_enabled",
    "reload_default_registry",
    "set_default_registry",
    "supports_explicit_caching",
]
