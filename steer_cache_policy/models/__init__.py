"""Data models for provider cache policy resolution."""

from .model_info import ModelInfo
from .provider_config import (
    REQUIRED_SECTIONS,
    CacheConfig,
    CacheTTL,
    CacheType,
    MinTokens,
    MinTokensByModel,
    MinTokensPattern,
    PromptOrderConfig,
    PromptSection,
    ProviderConfig,
    SystemPromptMode,
    UserCacheConfig,
    UserConfig,
    UserPromptOrderConfig,
)

__all__ = [
    "ModelInfo",
    "REQUIRED_SECTIONS",
    "CacheConfig",
    "CacheTTL",
    "CacheType",
    "MinTokens",
    "MinTokensByModel",
    "MinTokensPattern",
    "PromptOrderConfig",
    "PromptSection",
    "ProviderConfig",
    "SystemPromptMode",
    "UserCacheConfig",
    "UserConfig",
    "UserPromptOrderConfig",
]
