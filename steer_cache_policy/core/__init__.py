"""Core logic layers for the Steer cache policy package.

- capabilities: provider registry, override merging and cache policy dispatch
"""

__all__ = []
