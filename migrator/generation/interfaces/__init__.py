"""Generation interfaces module."""

from .dialect import Dialect, Renderer

__all__ = [
    "Dialect",
    "Renderer",
]
