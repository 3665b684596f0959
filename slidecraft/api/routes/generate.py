"""Slide generation API endpoint."""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from slidecraft.api.deps import get_current_user_id, get_generation_service, get_repository
from slidecraft.core import InternalError, SlideCraftError, ValidationError, get_settings
from slidecraft.models import GenerationRequest, UploadedDocument
from slidecraft.services import PresentationRepository, SlideGenerationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["generate"])


def parse_num_slides(value: Optional[str]) -> int:
    """
    Read the requested slide count from the form.

    Missing, non-numeric or non-positive values mean the default count.
    """
    settings = get_settings()
    try:
        num_slides = int(value) if value is not None else 0
    except ValueError:
        num_slides = 0

    if num_slides < 1:
        return settings.default_num_slides
    if num_slides > settings.max_num_slides:
        raise ValidationError("error.too_many_slides", max_slides=settings.max_num_slides)
    return num_slides


@router.post("/generate")
async def generate_presentation(
    prompt: str = Form(default=""),
    num_slides: Optional[str] = Form(default=None, alias="numSlides"),
    file: Optional[UploadFile] = File(default=None),
    user_id: str = Depends(get_current_user_id),
    service: SlideGenerationService = Depends(get_generation_service),
    repository: PresentationRepository = Depends(get_repository),
) -> dict[str, Any]:
    """
    Generate a slide deck from a prompt and/or an uploaded PDF/DOCX.

    The deck is stored for the current user and returned. Without an AI
    model configured the deck is produced in demo mode.
    """
    try:
        document = None
        if file is not None and file.filename:
            document = UploadedDocument(filename=file.filename, data=await file.read())

        request = GenerationRequest(
            raw_prompt=prompt or "",
            document=document,
            num_slides=parse_num_slides(num_slides),
        )
        result = await service.generate(request)
        presentation = repository.create(user_id, result)
    except SlideCraftError:
        raise
    except Exception as e:
        logger.exception(f"Generation error: {e}")
        raise InternalError("error.generation_failed") from e

    return presentation.model_dump(mode="json")
