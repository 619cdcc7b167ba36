"""Shared pytest fixtures for Steer cache policy tests."""

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file for tests
load_dotenv()

from steer_cache_policy.config.defaults import PROVIDER_DEFAULTS
from steer_cache_policy.core.capabilities import CachePolicy, ProviderRegistry
from steer_cache_policy.models import UserCacheConfig, UserConfig, UserPromptOrderConfig
from tests.helpers.model_factory import create_mock_model


@pytest.fixture
def registry():
    """Baseline registry without environment overrides."""
    return ProviderRegistry.from_dict(PROVIDER_DEFAULTS)


@pytest.fixture
def policy(registry):
    """CachePolicy bound to the baseline registry."""
    return CachePolicy(registry)


@pytest.fixture
def claude_opus_model():
    return create_mock_model("anthropic", "claude-opus-4-20250514")


@pytest.fixture
def gpt_model():
    return create_mock_model("openai", "gpt-4o")


@pytest.fixture
def ttl_override():
    """Provider-level override touching only the TTL."""
    return UserConfig(cache=UserCacheConfig(ttl="1h"))


@pytest.fixture
def custom_ordering_override():
    """Override replacing ordering and breakpoints."""
    return UserConfig(prompt_order=UserPromptOrderConfig(
        ordering=["system", "tools", "instructions", "environment", "messages"],
        cache_breakpoints=["system"],
    ))


@pytest.fixture
def clean_override_env(monkeypatch):
    """Remove any cache policy override settings from the environment."""
    for key in (
        "STEER_CACHE_POLICY_OVERRIDES_ENABLED",
        "STEER_CACHE_POLICY_OVERRIDES_JSON",
        "STEER_CACHE_POLICY_OVERRIDES_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", "/nonexistent-steer-home")
