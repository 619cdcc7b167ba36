# Cache family base configurations
import copy
from typing import Any, Dict

# minTokens for Claude models. First match wins, so longer ids go first where
# the values differ.
# https://docs.anthropic.com/en/docs/build-with-claude/prompt-caching#requirements
CLAUDE_MIN_TOKENS = {
    # Claude 4.x family
    "claude-opus-4": 4096,
    "claude-opus-4-5": 4096,
    "claude-opus-4.5": 4096,
    "claude-sonnet-4": 2048,
    "claude-sonnet-4-5": 2048,
    "claude-sonnet-4.5": 2048,
    "claude-haiku-4": 2048,
    "claude-haiku-4-5": 2048,
    "claude-haiku-4.5": 2048,
    # Claude 3.x family
    "claude-3-opus": 2048,
    "claude-3-5-opus": 2048,
    "claude-3-sonnet": 1024,
    "claude-3-5-sonnet": 2048,
    "claude-3-haiku": 1024,
    "claude-3-5-haiku": 2048,
    "default": 1024,
}

# https://docs.aws.amazon.com/bedrock/latest/userguide/prompt-caching.html
NOVA_MIN_TOKENS = {
    "nova-micro": 1000,
    "nova-lite": 1000,
    "nova-pro": 1000,
    "nova-premier": 1000,
}

# https://ai.google.dev/gemini-api/docs/caching
GEMINI_MIN_TOKENS = {
    "gemini-2.5-pro": 4096,
    "gemini-2.5-flash": 2048,
    "gemini-2.0-flash": 2048,
    "gemini-2.0-pro": 4096,
    "gemini-3": 2048,
    "default": 2048,
}

# Base configurations for cache families
CACHE_FAMILIES = {
    # Explicit cache markers on tools/system/messages (Anthropic style)
    "explicit-breakpoint": {
        "cache": {
            "enabled": True,
            "type": "explicit-breakpoint",
            "property": "cacheControl",
            "hierarchy": ["tools", "system", "messages"],
            "ttl": "5m",  # not configurable via the API
            "minTokens": CLAUDE_MIN_TOKENS,
            "maxBreakpoints": 4,
        },
        "promptOrder": {
            "ordering": ["tools", "instructions", "environment", "system", "messages"],
            "cacheBreakpoints": ["tools", "system", "messages"],
            "combineSystemMessages": False,  # multiple system blocks carry breakpoints
            "systemPromptMode": "parameter",
            "toolCaching": True,
            "requiresAlternatingRoles": True,
            "sortTools": True,
        },
    },
    # Automatic prefix matching, no markers (OpenAI style)
    "automatic-prefix": {
        "cache": {
            "enabled": True,
            "type": "automatic-prefix",
            "property": None,
            "hierarchy": [],
            "ttl": "auto",  # managed by the provider, 5-60 min
            "minTokens": 1024,
            "maxBreakpoints": 0,
        },
        "promptOrder": {
            # Static content first for prefix hits
            "ordering": ["instructions", "tools", "environment", "system", "messages"],
            "cacheBreakpoints": [],
            "combineSystemMessages": True,
            "systemPromptMode": "role",
            "toolCaching": False,
            "requiresAlternatingRoles": False,
            "sortTools": True,
        },
    },
    # Content-hash caching handled by the provider (Gemini 2.5+)
    "implicit": {
        "cache": {
            "enabled": True,
            "type": "implicit",
            "property": None,
            "hierarchy": [],
            "ttl": "auto",
            "minTokens": GEMINI_MIN_TOKENS,
            "maxBreakpoints": 0,
        },
        "promptOrder": {
            "ordering": ["system", "instructions", "environment", "tools", "messages"],
            "cacheBreakpoints": [],
            "combineSystemMessages": True,
            "systemPromptMode": "systemInstruction",
            "toolCaching": False,
            "requiresAlternatingRoles": True,  # user/model turns must alternate
            "sortTools": False,
        },
    },
    # Gateways forwarding to an underlying provider
    "passthrough": {
        "cache": {
            "enabled": True,
            "type": "passthrough",
            "property": None,
            "hierarchy": [],
            "ttl": "auto",
            "minTokens": 1024,
            "maxBreakpoints": 0,
        },
        "promptOrder": {
            "ordering": ["system", "instructions", "environment", "tools", "messages"],
            "cacheBreakpoints": [],
            "combineSystemMessages": True,
            "systemPromptMode": "role",
            "toolCaching": False,
            "requiresAlternatingRoles": False,
            "sortTools": True,
        },
    },
    # No prompt caching
    "none": {
        "cache": {
            "enabled": False,
            "type": "none",
            "property": None,
            "hierarchy": [],
            "ttl": "auto",
            "minTokens": 0,
            "maxBreakpoints": 0,
        },
        "promptOrder": {
            "ordering": ["system", "instructions", "environment", "tools", "messages"],
            "cacheBreakpoints": [],
            "combineSystemMessages": True,
            "systemPromptMode": "role",
            "toolCaching": False,
            "requiresAlternatingRoles": False,
            "sortTools": False,
        },
    },
}


def create_provider_config(family: str, overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Create a raw provider config by layering section overrides on a cache family."""
    if family not in CACHE_FAMILIES:
        raise ValueError(f"Unknown cache family: {family}")

    base = copy.deepcopy(CACHE_FAMILIES[family])
    for section in ("cache", "promptOrder"):
        if section in overrides:
            base[section].update(copy.deepcopy(overrides[section]))

    return base
