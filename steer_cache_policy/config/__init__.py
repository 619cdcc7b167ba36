"""Configuration module for the cache policy registry."""

from .cache_families import CACHE_FAMILIES, create_provider_config
from .defaults import PROVIDER_DEFAULTS

# Import all constants
from .constants import *

__all__ = [
    "CACHE_FAMILIES",
    "PROVIDER_DEFAULTS",
    "create_provider_config",
]
