"""Error taxonomy and the FastAPI handlers that render it."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import get_settings
from .messages import translate

logger = logging.getLogger(__name__)


class SlideCraftError(Exception):
    """
    Base class for errors that map to an HTTP response.

    Carries a message key rather than text so the response can be
    rendered in the configured locale.
    """

    status_code = 500
    default_message_key = "error.internal"

    def __init__(self, message_key: str | None = None, **params):
        self.message_key = message_key or self.default_message_key
        self.params = params
        super().__init__(self.message_key)

    def localized_message(self, locale: str) -> str:
        return translate(self.message_key, locale, **self.params)


class UnauthorizedError(SlideCraftError):
    """No authenticated identity on the request."""
    status_code = 401
    default_message_key = "error.unauthorized"


class ValidationError(SlideCraftError):
    """The request carries no usable content or invalid parameters."""
    status_code = 400
    default_message_key = "error.missing_content"


class NotFoundError(SlideCraftError):
    """The resource does not exist or belongs to another user."""
    status_code = 404
    default_message_key = "error.presentation_not_found"


class InternalError(SlideCraftError):
    """Unexpected failure; details are logged, never returned."""
    status_code = 500
    default_message_key = "error.internal"


def register_exception_handlers(app: FastAPI) -> None:
    """Render SlideCraftError and unexpected exceptions as {"error": message}."""

    @app.exception_handler(SlideCraftError)
    async def handle_slidecraft_error(request: Request, exc: SlideCraftError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message_key}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.localized_message(get_settings().locale)},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": translate("error.internal", get_settings().locale)},
        )
