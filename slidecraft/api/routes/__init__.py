"""Route modules."""

from . import generate, presentations

__all__ = [
    "generate",
    "presentations",
]
