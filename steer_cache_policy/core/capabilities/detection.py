"""Underlying provider detection for routing providers."""

from typing import Sequence, Tuple

from ...config.constants import ROUTING_PROVIDER_ID, UNDERLYING_PROVIDER_RULES
from ...models.model_info import ModelInfo


def detect_effective_provider(
    model: ModelInfo,
    routing_provider_id: str = ROUTING_PROVIDER_ID,
    rules: Sequence[Tuple[str, Sequence[str]]] = UNDERLYING_PROVIDER_RULES
) -> str:
    """
    Return the provider whose caching policy applies to ``model``.

    Models served by any provider other than the routing provider map to their
    own provider. For the routing provider the lowercased API model id is tested
    against ``rules`` in order; the first rule with a matching substring wins and
    the routing provider id is returned when none match.

    Args:
        model: Model descriptor from the catalog
        routing_provider_id: Provider that forwards to other providers
        rules: Ordered ``(provider_id, substrings)`` pairs

    Returns:
        Effective provider id
    """
    if model.provider_id != routing_provider_id:
        return model.provider_id

    api_id = model.effective_api_id.lower()

    for provider_id, needles in rules:
        if any(needle in api_id for needle in needles):
            return provider_id

    return model.provider_id
