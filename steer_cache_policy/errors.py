"""Cache policy error definitions."""

from typing import Any, Dict, Optional


class CachePolicyError(Exception):
    """Base exception for cache policy errors."""
    pass


class InvalidProviderConfigError(CachePolicyError, ValueError):
    """Raised when a provider config breaks the ordering/breakpoint invariants."""

    def __init__(
        self,
        message: str,
        provider_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.provider_id = provider_id
        self.details = details or {}

        if provider_id:
            message = f"Invalid config for provider '{provider_id}': {message}"
        super().__init__(message)


class UnknownProviderError(CachePolicyError, KeyError):
    """Raised by strict registry lookups for an unregistered provider."""

    def __init__(self, provider_id: str):
        self.provider_id = provider_id
        super().__init__(provider_id)

    def __str__(self) -> str:
        return f"Unknown provider: {self.provider_id}"
