"""API routes for SlideCraft."""

from .routes import generate, presentations

__all__ = [
    "generate",
    "presentations",
]
