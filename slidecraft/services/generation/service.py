"""
Slide Generation Service

Turns a prompt and/or an uploaded document into a slide deck. Uses the
Azure OpenAI generator when it is configured and falls back to the
deterministic demo deck when it is not, or when the model call fails.
"""
import logging
from typing import Optional

from slidecraft.core import Settings, ValidationError, get_settings, translate
from slidecraft.models import GenerationRequest, GenerationResult, Slide
from slidecraft.services.demo_slides import generate_demo_slides
from slidecraft.services.extraction import document_kind_for, extract_text

from .llm import ExternalSlideGenerator

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


def derive_title(content: str, max_chars: int = 50) -> str:
    """Head of the content, with an ellipsis when something was cut."""
    title = content[:max_chars]
    if len(content) > max_chars:
        title += ELLIPSIS
    return title


class SlideGenerationService:
    """Orchestrates extraction, generation and fallback for one request at a time."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        generator: Optional[ExternalSlideGenerator] = None,
    ):
        self._settings = settings or get_settings()
        self._generator = generator or ExternalSlideGenerator(self._settings)

    @property
    def has_external_generator(self) -> bool:
        return self._generator.is_available

    def _t(self, key: str, **params) -> str:
        return translate(key, self._settings.locale, **params)

    def resolve_content(self, request: GenerationRequest) -> str:
        """
        Pick the text the deck is generated from.

        Document text wins when extraction produced something usable;
        otherwise the prompt, and for a document with no prompt a generic
        placeholder.
        """
        if request.document is None:
            return request.raw_prompt

        kind = document_kind_for(request.document.filename)
        extracted = extract_text(request.document.data, kind)[:self._settings.max_document_chars]

        if len(extracted) < self._settings.min_extracted_chars:
            logger.info(
                f"Extraction from '{request.document.filename}' yielded {len(extracted)} chars, "
                "using the prompt instead"
            )
            return request.raw_prompt or self._t("generation.document_placeholder")
        return extracted

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate a deck for the request.

        Raises:
            ValidationError: if neither the prompt nor the document provides content.
        """
        content = self.resolve_content(request)
        if not content:
            raise ValidationError("error.missing_content")

        title = derive_title(content, self._settings.title_max_chars)

        if not self.has_external_generator:
            return GenerationResult(
                title=title,
                description=self._t("generation.demo_description"),
                slides=self._demo_slides(content, request.num_slides),
            )

        slides = await self._generate_with_fallback(content, request.num_slides)
        return GenerationResult(
            title=title,
            description=content[:self._settings.description_max_chars],
            slides=slides,
        )

    async def _generate_with_fallback(self, content: str, num_slides: int) -> list[Slide]:
        try:
            return await self._generator.generate_slides(content, num_slides)
        except Exception as e:
            logger.warning(f"External slide generation failed, using demo slides: {e}")
            return self._demo_slides(content, num_slides)

    def _demo_slides(self, content: str, num_slides: int) -> list[Slide]:
        return generate_demo_slides(content, num_slides, self._settings.locale)


# Singleton instance
_slide_generation_service: Optional[SlideGenerationService] = None


def get_slide_generation_service() -> SlideGenerationService:
    """Get the singleton Slide Generation service instance."""
    global _slide_generation_service
    if _slide_generation_service is None:
        _slide_generation_service = SlideGenerationService()
    return _slide_generation_service
