"""Slide-related Pydantic models."""
from typing import Optional

from pydantic import BaseModel, Field


class Slide(BaseModel):
    """A single slide: a short title and a handful of bullet points."""

    title: str = Field(..., description="Short slide title")
    content: list[str] = Field(..., min_length=1, description="Bullet points, usually 3 to 5")
    notes: Optional[str] = Field(default=None, description="Speaker notes")


SlideDeck = list[Slide]
