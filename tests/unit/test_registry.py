"""Unit tests for the provider registry and baseline data."""

import threading

import pytest
from pydantic import ValidationError

from steer_cache_policy.config.defaults import PROVIDER_DEFAULTS
from steer_cache_policy.core.capabilities import ProviderRegistry, RegistryHolder
from steer_cache_policy.errors import UnknownProviderError
from steer_cache_policy.models import (
    CacheTTL,
    CacheType,
    MinTokensByModel,
    ProviderConfig,
    SystemPromptMode,
)

ALL_PROVIDERS = sorted(PROVIDER_DEFAULTS)


class TestBaselineInvariants:
    """Every registry entry satisfies the section/enum invariants."""

    @pytest.mark.parametrize("provider_id", ALL_PROVIDERS)
    def test_ordering_contains_required_sections(self, registry, provider_id):
        ordering = registry[provider_id].prompt_order.ordering
        assert "system" in ordering
        assert "messages" in ordering
        assert "tools" in ordering

    @pytest.mark.parametrize("provider_id", ALL_PROVIDERS)
    def test_cache_breakpoints_subset_of_ordering(self, registry, provider_id):
        prompt_order = registry[provider_id].prompt_order
        for breakpoint in prompt_order.cache_breakpoints:
            assert breakpoint in prompt_order.ordering

    @pytest.mark.parametrize("provider_id", ALL_PROVIDERS)
    def test_enums_within_closed_sets(self, registry, provider_id):
        config = registry[provider_id]
        assert config.cache.type in set(CacheType)
        assert config.cache.ttl in set(CacheTTL)
        assert config.prompt_order.system_prompt_mode in set(SystemPromptMode)

    @pytest.mark.parametrize("provider_id", ALL_PROVIDERS)
    def test_min_tokens_tables_have_default(self, registry, provider_id):
        min_tokens = registry[provider_id].cache.min_tokens
        if isinstance(min_tokens, MinTokensByModel):
            assert isinstance(min_tokens.default, int)
        else:
            assert isinstance(min_tokens, int)

    def test_tool_caching_implies_explicit_markers(self, registry):
        """Providers caching tools must use explicit-breakpoint or passthrough caching."""
        for provider_id, config in registry.items():
            if config.prompt_order.tool_caching:
                assert config.cache.type in (CacheType.EXPLICIT_BREAKPOINT, CacheType.PASSTHROUGH), provider_id

    def test_sorted_tools_implies_caching_enabled(self, registry):
        for provider_id, config in registry.items():
            if config.prompt_order.sort_tools and provider_id != "default":
                assert config.cache.enabled is True, provider_id


class TestBaselineValues:
    """Spot checks of provider baselines."""

    def test_anthropic(self, registry):
        config = registry["anthropic"]
        assert config.cache.type == CacheType.EXPLICIT_BREAKPOINT
        assert config.cache.property == "cacheControl"
        assert list(config.cache.hierarchy) == ["tools", "system", "messages"]
        assert config.cache.ttl == "5m"
        assert config.cache.max_breakpoints == 4
        assert list(config.prompt_order.ordering) == ["tools", "instructions", "environment", "system", "messages"]
        assert list(config.prompt_order.cache_breakpoints) == ["tools", "system", "messages"]
        assert config.prompt_order.combine_system_messages is False
        assert config.prompt_order.system_prompt_mode == SystemPromptMode.PARAMETER

    def test_bedrock_differs_from_anthropic(self, registry):
        config = registry["amazon-bedrock"]
        assert config.cache.property == "cachePoint"
        assert list(config.cache.hierarchy) == ["system", "messages", "tools"]
        assert config.prompt_order.ordering[0] == "system"
        assert config.prompt_order.ordering[-1] == "tools"

    def test_bedrock_table_lists_nova_models(self, registry):
        table = registry["amazon-bedrock"].cache.min_tokens
        assert table.to_mapping()["nova-pro"] == 1000
        assert table.default == 1024

    def test_openai_automatic_prefix(self, registry):
        config = registry["openai"]
        assert config.cache.type == CacheType.AUTOMATIC_PREFIX
        assert config.cache.property is None
        assert config.cache.hierarchy == ()
        assert config.cache.ttl == "auto"
        assert config.cache.min_tokens == 1024
        assert config.prompt_order.ordering[0] == "instructions"
        assert config.prompt_order.cache_breakpoints == ()
        assert config.prompt_order.combine_system_messages is True

    @pytest.mark.parametrize("provider_id", ["azure", "azure-cognitive-services", "github-copilot", "opencode"])
    def test_openai_compatible_match_openai(self, registry, provider_id):
        assert registry[provider_id] == registry["openai"]

    def test_deepseek_has_no_minimum(self, registry):
        assert registry["deepseek"].cache.min_tokens == 0

    def test_google_implicit(self, registry):
        config = registry["google"]
        assert config.cache.type == CacheType.IMPLICIT
        assert config.prompt_order.system_prompt_mode == SystemPromptMode.SYSTEM_INSTRUCTION
        assert config.prompt_order.requires_alternating_roles is True
        assert config.prompt_order.sort_tools is False

    def test_openrouter_passthrough(self, registry):
        config = registry["openrouter"]
        assert config.cache.type == CacheType.PASSTHROUGH
        assert config.cache.property == "cache_control"
        assert list(config.prompt_order.cache_breakpoints) == ["tools", "system"]
        assert config.prompt_order.tool_caching is True

    @pytest.mark.parametrize("provider_id", ["mistral", "qwen", "cerebras", "sap-ai-core", "baseten", "default"])
    def test_no_caching_providers(self, registry, provider_id):
        config = registry[provider_id]
        assert config.cache.enabled is False
        assert config.cache.type == CacheType.NONE
        assert config.prompt_order.cache_breakpoints == ()


class TestProviderRegistry:
    """Registry construction, lookup and immutability."""

    def test_requires_default_entry(self):
        raw = {k: v for k, v in PROVIDER_DEFAULTS.items() if k != "default"}
        with pytest.raises(ValueError):
            ProviderRegistry.from_dict(raw)

    def test_lookup_falls_back_to_default(self, registry):
        assert registry.lookup("no-such-provider") is registry.default
        assert registry.lookup(None) is registry.default

    def test_get_strict_raises_for_unknown(self, registry):
        with pytest.raises(UnknownProviderError) as exc_info:
            registry.get_strict("no-such-provider")
        assert isinstance(exc_info.value, KeyError)
        assert "no-such-provider" in str(exc_info.value)

    def test_registry_is_read_only(self, registry):
        with pytest.raises(TypeError):
            registry._configs["anthropic"] = registry.default

    def test_entries_are_frozen(self, registry):
        with pytest.raises(ValidationError):
            registry["anthropic"].cache.enabled = False

    def test_accepts_validated_configs(self, registry):
        rebuilt = ProviderRegistry(dict(registry))
        assert rebuilt["anthropic"] is registry["anthropic"]

    def test_with_overrides_returns_new_registry(self, registry):
        updated = registry.with_overrides({"anthropic": {"cache": {"ttl": "1h"}}})

        assert updated["anthropic"].cache.ttl == "1h"
        assert updated["anthropic"].cache.property == "cacheControl"
        assert updated["anthropic"].cache.min_tokens == registry["anthropic"].cache.min_tokens
        assert registry["anthropic"].cache.ttl == "5m"

    def test_with_overrides_replaces_min_tokens_table(self, registry):
        updated = registry.with_overrides({
            "anthropic": {"cache": {"minTokens": {"claude": 512, "default": 256}}}
        })
        assert updated["anthropic"].cache.min_tokens.to_mapping() == {"claude": 512, "default": 256}

    def test_with_overrides_adds_new_provider(self, registry):
        new_provider = {
            "cache": {"enabled": True, "type": "automatic-prefix", "ttl": "auto", "minTokens": 2048},
            "promptOrder": {"ordering": ["system", "tools", "messages"]},
        }
        updated = registry.with_overrides({"my-gateway": new_provider})
        assert isinstance(updated["my-gateway"], ProviderConfig)
        assert "my-gateway" not in registry


class TestRegistryHolder:
    """Whole-table replacement."""

    def test_swap_returns_previous(self, registry):
        holder = RegistryHolder(registry)
        replacement = registry.with_overrides({"openai": {"cache": {"enabled": False}}})

        previous = holder.swap(replacement)

        assert previous is registry
        assert holder.current() is replacement

    def test_swap_rejects_non_registry(self, registry):
        holder = RegistryHolder(registry)
        with pytest.raises(TypeError):
            holder.swap(dict(registry))

    def test_readers_see_whole_tables(self, registry):
        """Concurrent readers observe either the old or the new table, never a mix."""
        holder = RegistryHolder(registry)
        replacement = registry.with_overrides({
            "anthropic": {"cache": {"ttl": "1h"}},
            "openai": {"cache": {"enabled": False}},
        })
        seen = []

        def reader():
            for _ in range(200):
                current = holder.current()
                seen.append((current["anthropic"].cache.ttl, current["openai"].cache.enabled))

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        holder.swap(replacement)
        for thread in threads:
            thread.join()

        assert set(seen) <= {("5m", True), ("1h", False)}
