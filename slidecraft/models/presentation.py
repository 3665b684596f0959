"""Generation request/result and persisted presentation models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .slide import Slide


class UploadedDocument(BaseModel):
    """Raw bytes of an uploaded file together with its original name."""

    filename: str = Field(..., description="Original file name, used for the declared extension")
    data: bytes = Field(default=b"", description="File contents")


class GenerationRequest(BaseModel):
    """A single slide generation call."""

    raw_prompt: str = Field(default="", description="Prompt typed by the user, possibly empty")
    document: Optional[UploadedDocument] = Field(default=None, description="Optional uploaded document")
    num_slides: int = Field(default=5, ge=1, description="Requested number of slides")


class GenerationResult(BaseModel):
    """Deck plus the metadata derived from the processed content."""

    title: str = Field(..., description="First characters of the content, ellipsized")
    description: str = Field(default="", description="Demo-mode marker or content preview")
    slides: list[Slide] = Field(default_factory=list, description="Generated deck")


class Presentation(GenerationResult):
    """A GenerationResult owned by a user and stored by the repository."""

    id: str = Field(..., description="Unique presentation identifier")
    user_id: str = Field(..., description="Owner identity")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")

    @property
    def slide_count(self) -> int:
        return len(self.slides)
