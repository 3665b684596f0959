"""Slide generation with AI and demo-mode fallback."""

from .llm import ExternalSlideGenerator, SlideResponseError, parse_slides_response
from .service import SlideGenerationService, derive_title, get_slide_generation_service

__all__ = [
    "ExternalSlideGenerator",
    "SlideResponseError",
    "parse_slides_response",
    "SlideGenerationService",
    "derive_title",
    "get_slide_generation_service",
]
