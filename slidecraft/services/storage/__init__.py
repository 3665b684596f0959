"""Presentation storage."""

from .repository import (
    PresentationRepository,
    InMemoryPresentationRepository,
    get_presentation_repository,
)

__all__ = [
    "PresentationRepository",
    "InMemoryPresentationRepository",
    "get_presentation_repository",
]
