"""Service layer for SlideCraft."""

from .generation import SlideGenerationService, get_slide_generation_service
from .storage import PresentationRepository, get_presentation_repository

__all__ = [
    "SlideGenerationService",
    "get_slide_generation_service",
    "PresentationRepository",
    "get_presentation_repository",
]
