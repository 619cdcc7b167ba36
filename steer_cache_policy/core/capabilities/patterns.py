"""Model-pattern resolution for minimum cacheable token thresholds."""

from collections.abc import Mapping
from typing import Optional, Union

from ...models.model_info import ModelInfo
from ...models.provider_config import MinTokensByModel, MinTokensPattern
from ...observability.logging import PolicyLogger

policy_logger = PolicyLogger("patterns")


def match_min_tokens_pattern(
    table: MinTokensByModel,
    model: ModelInfo
) -> Optional[MinTokensPattern]:
    """
    Find the first table entry whose pattern occurs in the model id or family.

    Matching is case-insensitive substring matching in declaration order. The
    first hit wins even if a later, longer pattern would also match.
    """
    model_id = model.id.lower()
    family = model.family.lower() if model.family else None

    for entry in table.patterns:
        if entry.pattern in model_id or (family and entry.pattern in family):
            return entry
    return None


def resolve_min_tokens(
    min_tokens: Union[int, MinTokensByModel, Mapping],
    model: Optional[ModelInfo] = None
) -> int:
    """
    Collapse a minTokens value to a scalar for the given model.

    Args:
        min_tokens: Plain integer, pattern table, or flat ``{pattern: n, "default": n}`` mapping
        model: Optional concrete model

    Returns:
        The integer itself; otherwise the first matching entry, or the table default
    """
    if isinstance(min_tokens, int):
        return min_tokens

    if isinstance(min_tokens, Mapping):
        min_tokens = MinTokensByModel.from_mapping(min_tokens)

    if model is None:
        return min_tokens.default

    entry = match_min_tokens_pattern(min_tokens, model)
    if entry is None:
        policy_logger.debug("No minTokens pattern matched, using default", model=model.id)
        return min_tokens.default

    policy_logger.debug("Matched minTokens pattern", model=model.id, pattern=entry.pattern, tokens=entry.tokens)
    return entry.tokens
