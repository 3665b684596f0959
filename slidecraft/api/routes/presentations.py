"""Presentation API endpoints."""
import logging
from typing import Any

from fastapi import APIRouter, Depends

from slidecraft.api.deps import get_current_user_id, get_repository
from slidecraft.core import InternalError, NotFoundError
from slidecraft.services import PresentationRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["presentations"])


@router.get("/presentations")
async def list_presentations(
    user_id: str = Depends(get_current_user_id),
    repository: PresentationRepository = Depends(get_repository),
) -> list[dict[str, Any]]:
    """List the current user's presentations, newest first."""
    try:
        presentations = repository.list_by_user(user_id)
    except Exception as e:
        logger.exception(f"Error fetching presentations: {e}")
        raise InternalError("error.list_failed") from e

    return [p.model_dump(mode="json") for p in presentations]


@router.get("/presentations/{presentation_id}")
async def get_presentation(
    presentation_id: str,
    user_id: str = Depends(get_current_user_id),
    repository: PresentationRepository = Depends(get_repository),
) -> dict[str, Any]:
    """
    Get a single presentation.

    Presentations owned by other users are reported as not found.
    """
    try:
        presentation = repository.get(presentation_id, user_id)
    except Exception as e:
        logger.exception(f"Error fetching presentation {presentation_id}: {e}")
        raise InternalError("error.fetch_failed") from e

    if presentation is None:
        raise NotFoundError("error.presentation_not_found")
    return presentation.model_dump(mode="json")


@router.delete("/presentations/{presentation_id}")
async def delete_presentation(
    presentation_id: str,
    user_id: str = Depends(get_current_user_id),
    repository: PresentationRepository = Depends(get_repository),
) -> dict[str, Any]:
    """Delete a presentation owned by the current user. Deleting twice is not an error."""
    try:
        repository.delete(presentation_id, user_id)
    except Exception as e:
        logger.exception(f"Error deleting presentation {presentation_id}: {e}")
        raise InternalError("error.delete_failed") from e

    return {"success": True}
