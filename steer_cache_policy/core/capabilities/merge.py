"""
Override merging.

Layers a partial ``UserConfig`` over a resolved ``ProviderConfig``. A field
overrides only when it is explicitly set in the override; ``enabled=False``
overrides, an absent ``enabled`` does not. ``ordering`` and
``cache_breakpoints`` are replaced wholesale. Other prompt order fields are
structural and not user-overridable.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ...errors import InvalidProviderConfigError
from ...models.provider_config import (
    CacheConfig,
    PromptOrderConfig,
    ProviderConfig,
    UserConfig,
)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

# Fields a user layer may override
OVERRIDABLE_CACHE_FIELDS = ("enabled", "ttl", "min_tokens", "max_breakpoints")
OVERRIDABLE_PROMPT_ORDER_FIELDS = ("ordering", "cache_breakpoints")


def merge_config(base: ProviderConfig, override: Optional[UserConfig] = None) -> ProviderConfig:
    """
    Merge one override layer onto a config.

    Args:
        base: Config to start from (registry baseline or a previous merge)
        override: Optional partial override

    Returns:
        ``base`` itself when there is nothing to apply, otherwise a new config

    Raises:
        InvalidProviderConfigError: if the merged ordering no longer contains the
            required sections or no longer covers the cache breakpoints
    """
    if override is None:
        return base

    cache_updates = _collect(override.cache, OVERRIDABLE_CACHE_FIELDS)
    order_updates = _collect(override.prompt_order, OVERRIDABLE_PROMPT_ORDER_FIELDS)

    if not cache_updates and not order_updates:
        return base

    cache = base.cache
    if cache_updates:
        cache = _revalidate(CacheConfig, {**base.cache.model_dump(), **cache_updates})

    prompt_order = base.prompt_order
    if order_updates:
        prompt_order = _revalidate(PromptOrderConfig, {**base.prompt_order.model_dump(), **order_updates})

    return ProviderConfig(cache=cache, prompt_order=prompt_order)


def _collect(layer: Optional[BaseModel], fields) -> Dict[str, Any]:
    if layer is None:
        return {}
    return {name: getattr(layer, name) for name in fields if layer.is_set(name)}


def _revalidate(model_cls: Type[_ModelT], data: Dict[str, Any]) -> _ModelT:
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise InvalidProviderConfigError(
            f"override produces an invalid {model_cls.__name__}",
            details={"errors": e.errors(include_url=False)}
        ) from e
