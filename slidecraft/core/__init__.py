"""Core configuration module for SlideCraft."""

from .config import Settings, get_settings
from .errors import (
    SlideCraftError,
    UnauthorizedError,
    ValidationError,
    NotFoundError,
    InternalError,
    register_exception_handlers,
)
from .logging import setup_logging
from .messages import translate
from .tracing import setup_tracing, is_tracing_enabled

__all__ = [
    "Settings",
    "get_settings",
    "SlideCraftError",
    "UnauthorizedError",
    "ValidationError",
    "NotFoundError",
    "InternalError",
    "register_exception_handlers",
    "setup_logging",
    "translate",
    "setup_tracing",
    "is_tracing_enabled",
]
