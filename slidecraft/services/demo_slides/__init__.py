"""Deterministic demo deck generation."""

from .service import generate_demo_slides

__all__ = [
    "generate_demo_slides",
]
