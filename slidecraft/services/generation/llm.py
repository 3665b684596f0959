"""
External slide generation through Azure OpenAI.

Uses Microsoft Agent Framework to run a short-lived agent whose instructions
carry the requested slide count. The reply is expected to be a bare JSON
array of slides; anything else is an error for the caller to handle.
"""
import json
import logging
import re
from typing import Optional

from agent_framework import ChatMessage, Role
from agent_framework.azure import AzureOpenAIChatClient
from azure.identity import DefaultAzureCredential
from pydantic import TypeAdapter

from slidecraft.core import Settings, get_settings
from slidecraft.models import Slide

from .prompts import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)

AGENT_NAME = "SlideGeneratorAgent"

# ```json ... ``` wrapper some models add despite being told not to
CODE_FENCE_PATTERN = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?```$", re.DOTALL)

_deck_adapter = TypeAdapter(list[Slide])


class SlideResponseError(ValueError):
    """The model reply is not a JSON array of slides."""


def parse_slides_response(text: Optional[str]) -> list[Slide]:
    """
    Parse a model reply into slides.

    Raises:
        SlideResponseError: if the text is not JSON, not an array, or an
            item lacks a usable title/content.
    """
    body = (text or "").strip()
    if match := CODE_FENCE_PATTERN.match(body):
        body = match.group(1).strip()

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise SlideResponseError(f"Reply is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise SlideResponseError(f"Expected a JSON array, got {type(data).__name__}")

    try:
        return _deck_adapter.validate_python(data)
    except ValueError as e:
        raise SlideResponseError(f"Reply does not describe slides: {e}") from e


class ExternalSlideGenerator:
    """Generates slides with an Azure OpenAI chat deployment."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._chat_client: Optional[AzureOpenAIChatClient] = None

    @property
    def is_available(self) -> bool:
        return self._settings.has_azure_openai

    def _ensure_client(self) -> None:
        """Create the chat client on first use."""
        if self._chat_client is not None:
            return
        if not self.is_available:
            raise ValueError("Azure OpenAI is not configured")

        auth = (
            {"credential": DefaultAzureCredential()}
            if self._settings.azure_openai_use_managed_identity
            else {"api_key": self._settings.azure_openai_api_key}
        )
        self._chat_client = AzureOpenAIChatClient(
            endpoint=self._settings.azure_openai_endpoint or "",
            deployment_name=self._settings.azure_openai_deployment,
            api_version=self._settings.azure_openai_api_version,
            **auth,
        )
        logger.info(f"Slide generator ready: deployment {self._settings.azure_openai_deployment}")

    async def generate_slides(self, content: str, num_slides: int) -> list[Slide]:
        """
        Ask the model for ``num_slides`` slides about ``content``.

        The model may return a different number of slides; that is accepted.

        Raises:
            SlideResponseError: if the reply cannot be parsed.
            Exception: transport and authentication errors propagate.
        """
        self._ensure_client()
        locale = self._settings.locale

        agent = self._chat_client.create_agent(
            name=AGENT_NAME,
            instructions=build_system_prompt(num_slides, locale),
        )
        response = await agent.run(
            [ChatMessage(
                role=Role.USER,
                text=build_user_prompt(content, locale, self._settings.prompt_preview_chars),
            )],
            temperature=self._settings.generation_temperature,
        )

        return parse_slides_response(response.text)
