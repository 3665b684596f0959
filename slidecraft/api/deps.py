"""Shared FastAPI dependencies."""
from fastapi import Request

from slidecraft.core import UnauthorizedError, get_settings
from slidecraft.services import (
    PresentationRepository,
    SlideGenerationService,
    get_presentation_repository,
    get_slide_generation_service,
)


async def get_current_user_id(request: Request) -> str:
    """
    Resolve the authenticated user id.

    The identity is asserted by the authenticating proxy in front of the
    service through the configured header.
    """
    user_id = request.headers.get(get_settings().auth_user_header, "").strip()
    if not user_id:
        raise UnauthorizedError()
    return user_id


def get_repository() -> PresentationRepository:
    return get_presentation_repository()


def get_generation_service() -> SlideGenerationService:
    return get_slide_generation_service()
