"""
Structured logging utility for cache policy resolution.

Provides a consistent logging interface for the resolver and registry,
with standard fields like provider, model and agent.
"""

import logging
from typing import Optional


class PolicyLogger:
    """Structured logger for cache policy resolution."""

    def __init__(self, component: str):
        """
        Initialize logger for a policy component.

        Args:
            component: Name of the component (e.g., "policy", "registry")
        """
        self.component = component
        self.logger = logging.getLogger(f"steer_cache_policy.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = []

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        if not fields:
            return message
        return f"[{' '.join(fields)}] {message}"

    def is_debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, provider: Optional[str] = None,
              model: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                self._format_message(message, provider=provider, model=model, **kwargs)
            )

    def info(self, message: str, provider: Optional[str] = None,
             model: Optional[str] = None, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(
            self._format_message(message, provider=provider, model=model, **kwargs)
        )

    def warning(self, message: str, provider: Optional[str] = None,
                model: Optional[str] = None, **kwargs):
        """Log warning message with structured fields."""
        self.logger.warning(
            self._format_message(message, provider=provider, model=model, **kwargs)
        )

    def error(self, message: str, provider: Optional[str] = None,
              model: Optional[str] = None, error: Optional[Exception] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(
            self._format_message(message, provider=provider, model=model, **kwargs)
        )
