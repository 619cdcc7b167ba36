# Provider baseline configurations using cache family inheritance
from .cache_families import CLAUDE_MIN_TOKENS, NOVA_MIN_TOKENS, create_provider_config

PROVIDER_DEFAULTS = {
    # Explicit breakpoint providers
    "anthropic": create_provider_config("explicit-breakpoint", {}),

    "amazon-bedrock": create_provider_config("explicit-breakpoint", {
        "cache": {
            "property": "cachePoint",
            "hierarchy": ["system", "messages", "tools"],
            # Nova ids never contain "claude", so order between the groups is free
            "minTokens": {**NOVA_MIN_TOKENS, **CLAUDE_MIN_TOKENS},
        },
        "promptOrder": {
            # System first, tools at the end
            "ordering": ["system", "instructions", "environment", "messages", "tools"],
            "cacheBreakpoints": ["system", "messages", "tools"],
        },
    }),

    "google-vertex-anthropic": create_provider_config("explicit-breakpoint", {}),

    # Automatic prefix providers
    "openai": create_provider_config("automatic-prefix", {}),
    "azure": create_provider_config("automatic-prefix", {}),
    "azure-cognitive-services": create_provider_config("automatic-prefix", {}),
    "github-copilot": create_provider_config("automatic-prefix", {}),
    "github-copilot-enterprise": create_provider_config("automatic-prefix", {}),
    "opencode": create_provider_config("automatic-prefix", {}),
    "deepseek": create_provider_config("automatic-prefix", {
        "cache": {"minTokens": 0},  # no minimum
    }),

    # Implicit caching providers
    "google": create_provider_config("implicit", {}),
    "google-vertex": create_provider_config("implicit", {}),

    # Passthrough providers
    "openrouter": create_provider_config("passthrough", {
        # Anthropic-style markers; most OpenRouter traffic is Claude
        "cache": {
            "property": "cache_control",
            "hierarchy": ["tools", "system", "messages"],
            "ttl": "5m",
            "maxBreakpoints": 4,
        },
        "promptOrder": {
            "ordering": ["tools", "instructions", "environment", "system", "messages"],
            "cacheBreakpoints": ["tools", "system"],
            "combineSystemMessages": False,
            "systemPromptMode": "parameter",
            "toolCaching": True,
            "requiresAlternatingRoles": True,
        },
    }),
    "vercel": create_provider_config("passthrough", {}),
    "zenmux": create_provider_config("passthrough", {}),

    # No caching providers
    "mistral": create_provider_config("none", {}),
    "qwen": create_provider_config("none", {}),
    "cerebras": create_provider_config("none", {}),
    "sap-ai-core": create_provider_config("none", {}),
    "baseten": create_provider_config("none", {}),

    # Fallback for unregistered providers
    "default": create_provider_config("none", {}),
}
