"""Logging helpers for cache policy resolution."""

from .logging import PolicyLogger

__all__ = ["PolicyLogger"]
