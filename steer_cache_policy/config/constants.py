"""
Cache Policy Constants

Identifiers, lookup tables and environment variable names shared by the
registry, the resolver and the override loader.

Baseline values are hardcoded because the model catalog carries no caching
metadata. Sources are listed in CACHING_SOURCE_URLS.
"""

# Registry key used when a provider id is not registered
DEFAULT_PROVIDER_KEY = "default"

# Provider that forwards requests to a dynamically detected underlying provider
ROUTING_PROVIDER_ID = "openrouter"

# Underlying provider detection for the routing provider, checked in order.
# Each rule is (provider id, substrings of the lowercased API model id).
UNDERLYING_PROVIDER_RULES = (
    ("anthropic", ("anthropic/", "claude")),
    ("openai", ("openai/", "gpt")),
    ("google", ("google/", "gemini")),
    ("deepseek", ("deepseek/",)),
    ("mistral", ("mistral/",)),
)

# Client library identifier -> provider options namespace key
PROVIDER_OPTIONS_KEYS = {
    "@ai-sdk/anthropic": "anthropic",
    "@ai-sdk/amazon-bedrock": "bedrock",
    "@openrouter/ai-sdk-provider": "openrouter",
    "@ai-sdk/openai-compatible": "openaiCompatible",
}

# Marker emitted for explicit-breakpoint and passthrough providers
EPHEMERAL_CACHE_CONTROL = {"type": "ephemeral"}

# Official caching documentation sources
CACHING_SOURCE_URLS = (
    "https://docs.anthropic.com/en/docs/build-with-claude/prompt-caching",
    "https://platform.openai.com/docs/guides/prompt-caching",
    "https://ai.google.dev/gemini-api/docs/caching",
    "https://docs.aws.amazon.com/bedrock/latest/userguide/prompt-caching.html",
)

# Environment variables for registry overrides
OVERRIDES_ENABLED_ENV_VAR = "STEER_CACHE_POLICY_OVERRIDES_ENABLED"
OVERRIDES_JSON_ENV_VAR = "STEER_CACHE_POLICY_OVERRIDES_JSON"
OVERRIDES_FILE_ENV_VAR = "STEER_CACHE_POLICY_OVERRIDES_FILE"
OVERRIDES_DEFAULT_FILENAME = "cache_policy_overrides.json"

# Example override format
REGISTRY_OVERRIDE_EXAMPLE = """
{
  "anthropic": {
    "cache": {"ttl": "1h", "minTokens": {"claude-opus-4": 4096, "default": 2048}}
  },
  "my-gateway": {
    "cache": {"enabled": true, "type": "automatic-prefix", "ttl": "auto", "minTokens": 1024},
    "promptOrder": {"ordering": ["instructions", "tools", "environment", "system", "messages"]}
  }
}
"""
