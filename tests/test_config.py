"""
Unit tests for configuration module.
"""
import os
from unittest.mock import patch

import pytest

from slidecraft.core import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self, clean_environment):
        """Test that default values are set correctly."""
        settings = Settings(_env_file=None)

        assert settings.app_name == "SlideCraft"
        assert settings.host == "0.0.0.0"
        assert settings.port == 7005
        assert settings.debug is False
        assert settings.locale == "it"
        assert settings.default_num_slides == 5
        assert settings.max_document_chars == 10000
        assert settings.min_extracted_chars == 50
        assert settings.prompt_preview_chars == 3000
        assert settings.generation_temperature == 0.7

    def test_port_validation(self):
        """Test that port validation works."""
        with pytest.raises(ValueError):
            Settings(port=0)  # Below minimum

        with pytest.raises(ValueError):
            Settings(port=70000)  # Above maximum

        settings = Settings(port=8080)
        assert settings.port == 8080

    def test_locale_validation(self):
        """Unknown locales are rejected, known ones are normalized."""
        with pytest.raises(ValueError):
            Settings(locale="xx")

        assert Settings(locale="EN").locale == "en"

    @patch.dict(os.environ, {
        "AZURE_OPENAI_API_KEY": "test-key",
        "AZURE_OPENAI_ENDPOINT": "https://test.openai.azure.com/",
        "AZURE_OPENAI_DEPLOYMENT": "gpt-4",
    })
    def test_has_azure_openai(self):
        """Test Azure OpenAI detection."""
        settings = Settings()

        assert settings.has_azure_openai is True
        assert settings.llm_provider == "azure"

    def test_managed_identity_counts_as_credential(self):
        """An endpoint with managed identity needs no API key."""
        settings = Settings(
            azure_openai_api_key=None,
            azure_openai_endpoint="https://test.openai.azure.com/",
            azure_openai_use_managed_identity=True,
        )

        assert settings.has_azure_openai is True

    def test_no_provider(self):
        """Test when no LLM provider is configured."""
        settings = Settings(
            azure_openai_api_key=None,
            azure_openai_endpoint=None,
            azure_openai_use_managed_identity=False,
        )

        assert settings.has_azure_openai is False
        assert settings.llm_provider == "none"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self):
        """Test that get_settings returns a Settings instance."""
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_cached_instance(self):
        """Test that get_settings returns the same cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
