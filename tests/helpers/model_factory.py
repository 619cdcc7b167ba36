"""Factories for catalog model descriptors used in tests."""

from typing import Optional

from steer_cache_policy.models.model_info import ModelInfo


def create_mock_model(
    provider_id: str,
    model_id: str,
    family: Optional[str] = None,
    api_id: Optional[str] = None
) -> ModelInfo:
    """Create a catalog-shaped model, including fields the policy layer ignores."""
    return ModelInfo.model_validate({
        "id": model_id,
        "providerID": provider_id,
        "family": family,
        "name": model_id,
        "api": {
            "id": api_id or model_id,
            "url": f"https://api.{provider_id}.com",
            "npm": f"@ai-sdk/{provider_id}",
        },
        "limit": {"context": 100000, "output": 4096},
        "status": "active",
    })
