"""
Provider cache and prompt-ordering models.

Defines the resolved per-provider configuration (``ProviderConfig``) and the
partial user overrides (``UserConfig``) that are layered on top of it.
Overridable fields are tracked by presence: a field counts as an override
only when it was explicitly set to a non-None value.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CacheType(str, Enum):
    """How a provider applies prompt caching."""
    EXPLICIT_BREAKPOINT = "explicit-breakpoint"
    AUTOMATIC_PREFIX = "automatic-prefix"
    IMPLICIT = "implicit"
    PASSTHROUGH = "passthrough"
    NONE = "none"


class CacheTTL(str, Enum):
    """Cache time-to-live values supported by providers."""
    FIVE_MINUTES = "5m"
    ONE_HOUR = "1h"
    AUTO = "auto"


class PromptSection(str, Enum):
    """Named regions of a request payload."""
    TOOLS = "tools"
    INSTRUCTIONS = "instructions"
    ENVIRONMENT = "environment"
    SYSTEM = "system"
    MESSAGES = "messages"


class SystemPromptMode(str, Enum):
    """
    How system prompts are passed to the provider.

    - role: system role in the messages array (OpenAI, Mistral)
    - parameter: top-level system parameter (Anthropic, Bedrock)
    - systemInstruction: systemInstruction field (Gemini)
    """
    ROLE = "role"
    PARAMETER = "parameter"
    SYSTEM_INSTRUCTION = "systemInstruction"


# Every ordering must place these sections somewhere
REQUIRED_SECTIONS: Tuple[PromptSection, ...] = (
    PromptSection.SYSTEM,
    PromptSection.MESSAGES,
    PromptSection.TOOLS,
)


class MinTokensPattern(BaseModel):
    """A single (substring pattern -> minimum tokens) entry."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: str = Field(..., min_length=1, description="Lowercase substring matched against model id/family")
    tokens: int = Field(..., ge=0, description="Minimum cacheable prompt size in tokens")

    @field_validator("pattern")
    @classmethod
    def lowercase_pattern(cls, v: str) -> str:
        return v.lower()


class MinTokensByModel(BaseModel):
    """
    Model-keyed minimum token table.

    Entries are checked in declaration order and the first match wins, so more
    specific patterns must be listed before generic ones. ``default`` applies
    when no model is known or no pattern matches.

    Accepts either the explicit ``{"patterns": [...], "default": n}`` shape or
    a flat insertion-ordered mapping such as
    ``{"claude-opus-4": 4096, "default": 1024}``.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    patterns: Tuple[MinTokensPattern, ...] = Field(default=(), description="Ordered pattern entries")
    default: int = Field(..., ge=0, description="Fallback minimum tokens")

    @model_validator(mode="before")
    @classmethod
    def from_flat_mapping(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "patterns" in data:
            return data
        if "default" not in data:
            raise ValueError("minTokens table requires a 'default' entry")
        return {
            "patterns": [
                {"pattern": pattern, "tokens": tokens}
                for pattern, tokens in data.items()
                if pattern != "default"
            ],
            "default": data["default"],
        }

    @classmethod
    def from_mapping(cls, mapping: Dict[str, int]) -> "MinTokensByModel":
        """Build a table from a flat mapping, keeping its key order."""
        return cls.model_validate(dict(mapping))

    def to_mapping(self) -> Dict[str, int]:
        """Flat mapping form, default last."""
        result = {entry.pattern: entry.tokens for entry in self.patterns}
        result["default"] = self.default
        return result


MinTokens = Union[int, MinTokensByModel]


class CacheConfig(BaseModel):
    """Cache configuration for a provider."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    enabled: bool = Field(..., description="Whether caching is enabled")
    type: CacheType = Field(..., description="Caching mechanism")
    property: Optional[str] = Field(
        None,
        description="Payload property marking a cache boundary (cacheControl, cachePoint, cache_control)"
    )
    hierarchy: Tuple[PromptSection, ...] = Field(
        default=(),
        description="Priority order for spending the breakpoint budget"
    )
    ttl: CacheTTL = Field(..., description="Time-to-live for cached content")
    min_tokens: MinTokens = Field(..., alias="minTokens", description="Minimum tokens required for caching")
    max_breakpoints: int = Field(0, ge=0, alias="maxBreakpoints", description="Maximum cache breakpoints")


class PromptOrderConfig(BaseModel):
    """Prompt ordering configuration for a provider."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    ordering: Tuple[PromptSection, ...] = Field(..., description="Order of prompt sections")
    cache_breakpoints: Tuple[PromptSection, ...] = Field(
        default=(),
        alias="cacheBreakpoints",
        description="Sections that receive cache breakpoints"
    )
    combine_system_messages: bool = Field(True, alias="combineSystemMessages")
    system_prompt_mode: SystemPromptMode = Field(SystemPromptMode.ROLE, alias="systemPromptMode")
    tool_caching: bool = Field(False, alias="toolCaching")
    requires_alternating_roles: bool = Field(False, alias="requiresAlternatingRoles")
    sort_tools: bool = Field(False, alias="sortTools")

    @model_validator(mode="after")
    def check_sections(self) -> "PromptOrderConfig":
        missing = [s.value for s in REQUIRED_SECTIONS if s not in self.ordering]
        if missing:
            raise ValueError(f"ordering is missing required sections: {', '.join(missing)}")

        stray = [s.value for s in self.cache_breakpoints if s not in self.ordering]
        if stray:
            raise ValueError(f"cacheBreakpoints not present in ordering: {', '.join(stray)}")
        return self


class ProviderConfig(BaseModel):
    """Complete, resolved provider configuration."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    cache: CacheConfig
    prompt_order: PromptOrderConfig = Field(..., alias="promptOrder")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase wire names."""
        return self.model_dump(by_alias=True, mode="json")


class _PartialOverride(BaseModel):
    """Base for user overrides where only explicitly set fields apply."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    def is_set(self, name: str) -> bool:
        return name in self.model_fields_set and getattr(self, name) is not None

    def set_fields(self) -> Dict[str, Any]:
        """Fields that carry an override value, keyed by field name."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if self.is_set(name)
        }


class UserCacheConfig(_PartialOverride):
    """User-configurable cache overrides."""
    enabled: Optional[bool] = None
    ttl: Optional[CacheTTL] = None
    min_tokens: Optional[MinTokens] = Field(None, alias="minTokens")
    max_breakpoints: Optional[int] = Field(None, ge=0, alias="maxBreakpoints")


class UserPromptOrderConfig(_PartialOverride):
    """User-configurable prompt ordering overrides (replaced wholesale)."""
    ordering: Optional[Tuple[PromptSection, ...]] = None
    cache_breakpoints: Optional[Tuple[PromptSection, ...]] = Field(None, alias="cacheBreakpoints")


class UserConfig(_PartialOverride):
    """Partial override of a ProviderConfig, supplied per provider or per agent."""
    cache: Optional[UserCacheConfig] = None
    prompt_order: Optional[UserPromptOrderConfig] = Field(None, alias="promptOrder")

    def is_empty(self) -> bool:
        cache_empty = self.cache is None or not self.cache.set_fields()
        order_empty = self.prompt_order is None or not self.prompt_order.set_fields()
        return cache_empty and order_empty
