"""
Adapter from the user-facing provider/agent config shape to ``UserConfig``.

The raw shape comes from the application's config loader, e.g.::

    {"cache": {"enabled": False, "ttl": "1h"},
     "promptOrder": {"ordering": ["instructions", "system", "tools", "messages"]}}

Only fields explicitly present in the raw config are copied, so an unset
field never turns into an override.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from ...models.provider_config import UserConfig

# Raw key -> UserCacheConfig field
_CACHE_KEYS = {
    "enabled": "enabled",
    "ttl": "ttl",
    "minTokens": "min_tokens",
    "min_tokens": "min_tokens",
    "maxBreakpoints": "max_breakpoints",
    "max_breakpoints": "max_breakpoints",
}

# Raw key -> UserPromptOrderConfig field
_PROMPT_ORDER_KEYS = {
    "ordering": "ordering",
    "cacheBreakpoints": "cache_breakpoints",
    "cache_breakpoints": "cache_breakpoints",
}


def _read(raw: Any, key: str) -> Any:
    """Read a key from a mapping or an attribute from a config object."""
    if isinstance(raw, Mapping):
        return raw.get(key)
    return getattr(raw, key, None)


def _copy_present(raw: Any, keys: Dict[str, str]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for raw_key, field_name in keys.items():
        value = _read(raw, raw_key)
        if value is not None and field_name not in result:
            result[field_name] = value
    return result


def from_user_provider_config(raw: Any = None) -> Optional[UserConfig]:
    """
    Convert a raw provider or agent config into a ``UserConfig``.

    Works for both ``provider[<id>]`` and ``agent[<id>]`` entries of the
    application config; any keys besides ``cache`` and ``promptOrder`` are ignored.

    Args:
        raw: Mapping or object with optional ``cache`` and ``promptOrder`` sections

    Returns:
        None when ``raw`` is missing or has neither section, otherwise a
        UserConfig carrying exactly the fields ``raw`` sets

    Raises:
        pydantic.ValidationError: if a present field has an invalid value
    """
    if raw is None:
        return None

    cache = _read(raw, "cache")
    prompt_order = _read(raw, "promptOrder")
    if prompt_order is None:
        prompt_order = _read(raw, "prompt_order")

    if cache is None and prompt_order is None:
        return None

    data: Dict[str, Any] = {}
    if cache is not None:
        data["cache"] = _copy_present(cache, _CACHE_KEYS)
    if prompt_order is not None:
        data["prompt_order"] = _copy_present(prompt_order, _PROMPT_ORDER_KEYS)

    return UserConfig.model_validate(data)
