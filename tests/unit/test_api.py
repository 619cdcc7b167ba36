"""Unit tests for the module-level functions bound to the default registry."""

import pytest

import steer_cache_policy
from steer_cache_policy import (
    UserCacheConfig,
    UserConfig,
    build_cache_control,
    detect_effective_provider,
    from_user_provider_config,
    get_cache_property,
    get_config,
    get_default_registry,
    get_prompt_ordering,
    get_provider_options_key,
    is_caching_enabled,
    reload_default_registry,
    resolve_min_tokens,
    set_default_registry,
    supports_explicit_caching,
)
from tests.helpers.model_factory import create_mock_model


@pytest.fixture
def restore_default_registry():
    original = get_default_registry()
    yield original
    set_default_registry(original)


class TestDefaultRegistryFunctions:
    """Public surface wired to the process-wide registry."""

    def test_unknown_provider_equals_default(self):
        assert get_config("not-a-provider") == get_config("default")

    def test_layer_precedence(self):
        provider = UserConfig(cache=UserCacheConfig(ttl="1h"))
        agent = UserConfig(cache=UserCacheConfig(ttl="auto"))
        assert get_config("anthropic", None, "build", provider, agent).cache.ttl == "auto"

    def test_min_tokens_example(self):
        model = create_mock_model("anthropic", "claude-opus-4-20250514")
        assert resolve_min_tokens({"claude-opus-4": 4096, "default": 1024}, model) == 4096
        assert resolve_min_tokens(1024, model) == 1024
        assert resolve_min_tokens(1024) == 1024

    def test_detects_routed_provider(self):
        assert detect_effective_provider(create_mock_model("openrouter", "anthropic/claude-3.5-sonnet")) == "anthropic"
        assert detect_effective_provider(create_mock_model("openrouter", "unknown/some-model")) == "openrouter"

    def test_cache_control_markers(self):
        assert build_cache_control("anthropic") == {"type": "ephemeral"}
        assert build_cache_control("openai") == {}

    def test_provider_options_key(self):
        assert get_provider_options_key("@ai-sdk/amazon-bedrock", "amazon-bedrock") == "bedrock"
        assert get_provider_options_key("some-client", "acme") == "acme"

    def test_capability_helpers(self):
        assert supports_explicit_caching("anthropic") is True
        assert get_cache_property("amazon-bedrock") == "cachePoint"
        assert is_caching_enabled("mistral") is False

    def test_prompt_ordering(self):
        model = create_mock_model("google", "gemini-2.5-pro")
        assert get_prompt_ordering(model) == ["system", "instructions", "environment", "tools", "messages"]

    def test_from_user_provider_config(self):
        assert from_user_provider_config(None) is None
        assert from_user_provider_config({}) is None
        result = from_user_provider_config({"cache": {"ttl": "1h"}})
        assert result.cache.ttl == "1h"
        assert result.cache.set_fields() == {"ttl": "1h"}


class TestDefaultRegistryReplacement:

    def test_set_default_registry(self, restore_default_registry):
        replacement = restore_default_registry.with_overrides({"openai": {"cache": {"enabled": False}}})

        previous = set_default_registry(replacement)

        assert previous is restore_default_registry
        assert is_caching_enabled("openai") is False
        assert steer_cache_policy.get_default_policy().registry is replacement

    def test_reload_default_registry(self, restore_default_registry, clean_override_env):
        set_default_registry(restore_default_registry.with_overrides({"openai": {"cache": {"enabled": False}}}))

        reload_default_registry()

        assert is_caching_enabled("openai") is True
