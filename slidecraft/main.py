"""
SlideCraft - Main Application Entry Point

Generates slide decks from a prompt or an uploaded document, with an
AI model when one is configured and a deterministic demo mode otherwise.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from slidecraft import __version__
from slidecraft.core import (
    get_settings,
    is_tracing_enabled,
    register_exception_handlers,
    setup_logging,
    setup_tracing,
)
from slidecraft.api.routes import generate, presentations

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown."""
    settings = get_settings()

    # Startup
    logger.info(f"🚀 Starting {settings.app_name}...")

    tracing_status = setup_tracing()
    if tracing_status:
        logger.info("📡 OpenTelemetry tracing is active")

    logger.info(f"🤖 LLM Provider: \033[96m{settings.llm_provider}\033[0m")
    logger.info(f"🌐 Locale: \033[93m{settings.locale}\033[0m")
    if settings.llm_provider == "none":
        logger.warning("⚠️  No AI model configured - decks will be generated in demo mode")

    yield

    # Shutdown
    logger.info(f"👋 Shutting down {settings.app_name}...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Slide deck generation from prompts and documents",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(generate.router, tags=["generate"])
    app.include_router(presentations.router, tags=["presentations"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "app_name": settings.app_name,
            "llm_provider": settings.llm_provider,
            "tracing_enabled": is_tracing_enabled(),
        }

    @app.get("/api/config")
    async def get_public_config():
        """Get public configuration."""
        return {
            "app_name": settings.app_name,
            "llm_enabled": settings.llm_provider != "none",
            "locale": settings.locale,
            "default_num_slides": settings.default_num_slides,
            "max_num_slides": settings.max_num_slides,
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "slidecraft.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
