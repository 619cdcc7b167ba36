"""Model descriptor supplied by the upstream model catalog."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelInfo(BaseModel):
    """
    Minimal view of a catalog model.

    Only ``id``, ``provider_id``, ``family`` and the API-level identifier are
    read by the cache policy layer; any other catalog fields are kept as extras.
    A nested ``api`` block (``{"id": ..., "npm": ...}``) is flattened into
    ``api_id``/``npm``.
    """
    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    id: str = Field(..., description="Model identifier")
    provider_id: str = Field(..., alias="providerID", description="Provider the model is served by")
    family: Optional[str] = Field(None, description="Model family (e.g. claude-opus-4)")
    api_id: Optional[str] = Field(None, alias="apiID", description="Identifier sent to the provider API")
    npm: Optional[str] = Field(None, description="Client library identifier")

    @model_validator(mode="before")
    @classmethod
    def flatten_api_block(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("api"), dict):
            return data
        data = dict(data)
        api = data.pop("api")
        if "apiID" not in data and "api_id" not in data and api.get("id"):
            data["api_id"] = api["id"]
        if "npm" not in data and api.get("npm"):
            data["npm"] = api["npm"]
        return data

    @property
    def effective_api_id(self) -> str:
        """API identifier, falling back to the catalog id."""
        return self.api_id or self.id
