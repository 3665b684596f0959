"""Pydantic models for SlideCraft."""

from .slide import Slide, SlideDeck
from .presentation import UploadedDocument, GenerationRequest, GenerationResult, Presentation
from .viewer import ViewState, ViewerSession

__all__ = [
    "Slide",
    "SlideDeck",
    "UploadedDocument",
    "GenerationRequest",
    "GenerationResult",
    "Presentation",
    "ViewState",
    "ViewerSession",
]
