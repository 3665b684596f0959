"""
Application settings using Pydantic for validation and type safety.
Security: All sensitive values loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .messages import SUPPORTED_LOCALES


class Settings(BaseSettings):
    """Application configuration with validation and security best practices."""

    # Application
    app_name: str = Field(default="SlideCraft", description="Application name")
    debug: bool = Field(default=False, description="Debug mode flag")
    locale: str = Field(default="it", description="Language for generated decks and error messages")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=7005, ge=1, le=65535, description="Server port")

    # Authentication (identity is asserted by the fronting proxy)
    auth_user_header: str = Field(
        default="X-User-Id",
        description="Request header carrying the authenticated user id"
    )

    # Azure OpenAI Configuration
    azure_openai_api_key: Optional[str] = Field(
        default=None,
        description="Azure OpenAI API key (sensitive)"
    )
    azure_openai_endpoint: Optional[str] = Field(
        default=None,
        description="Azure OpenAI endpoint URL"
    )
    azure_openai_deployment: str = Field(
        default="gpt-4o-mini",
        description="Azure OpenAI deployment name for slide generation"
    )
    azure_openai_api_version: str = Field(
        default="2024-10-21",
        description="Azure OpenAI API version"
    )
    azure_openai_use_managed_identity: bool = Field(
        default=False,
        description="Authenticate with DefaultAzureCredential instead of the API key"
    )

    # Generation Configuration
    generation_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for the slide generation model"
    )
    default_num_slides: int = Field(
        default=5,
        ge=1,
        description="Slide count used when the request does not specify one"
    )
    max_num_slides: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Largest slide count a request may ask for"
    )
    max_document_chars: int = Field(
        default=10000,
        ge=100,
        description="Extracted document text is truncated to this many characters"
    )
    min_extracted_chars: int = Field(
        default=50,
        ge=0,
        description="Extracted text shorter than this is treated as a failed extraction"
    )
    prompt_preview_chars: int = Field(
        default=3000,
        ge=100,
        description="Characters of content embedded in the generation prompt"
    )
    title_max_chars: int = Field(
        default=50,
        ge=1,
        description="Presentation titles are cut to this length"
    )
    description_max_chars: int = Field(
        default=200,
        ge=1,
        description="Presentation descriptions are cut to this length"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # Tracing Configuration (Optional - disabled by default)
    tracing_enabled: bool = Field(
        default=False,
        description="Enable OpenTelemetry tracing for AI services"
    )
    tracing_service_name: str = Field(
        default="slidecraft",
        description="Service name for tracing"
    )
    applicationinsights_connection_string: Optional[str] = Field(
        default=None,
        description="Azure Application Insights connection string for cloud tracing"
    )

    @property
    def has_azure_openai(self) -> bool:
        """Check if Azure OpenAI is fully configured."""
        has_credential = bool(self.azure_openai_api_key) or self.azure_openai_use_managed_identity
        return bool(
            has_credential
            and self.azure_openai_endpoint
            and self.azure_openai_deployment
        )

    @property
    def llm_provider(self) -> str:
        """Get the active LLM provider name."""
        if self.has_azure_openai:
            return "azure"
        return "none"

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Only locales with a message catalogue are accepted."""
        v = v.lower()
        if v not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale '{v}', expected one of {sorted(SUPPORTED_LOCALES)}")
        return v

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = ""
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Using lru_cache ensures settings are loaded once and reused.
    """
    return Settings()
