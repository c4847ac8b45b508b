from unittest.mock import MagicMock, patch

import pytest

from invoice_dashboard.config.settings import Settings
from invoice_dashboard.llm.example_client_adapter import ExampleClientAdapter
from invoice_dashboard.llm.factory import ModelClientFactory
from invoice_dashboard.llm.gemini_client_adapter import GeminiClientAdapter
from invoice_dashboard.llm.openai_client_adapter import OpenAIClientAdapter


def _settings(**overrides: object) -> Settings:
    return Settings(model_api_key="k", **overrides)


class TestModelClientFactory:
    def test_creates_example_adapter(self) -> None:
        client = ModelClientFactory.create(_settings(model_provider="example"))
        assert isinstance(client, ExampleClientAdapter)
        assert client.supports_attachments is True

    @patch("invoice_dashboard.llm.gemini_client_adapter.genai.Client")
    def test_creates_gemini_adapter(self, mock_client: MagicMock) -> None:
        client = ModelClientFactory.create(_settings(model_provider="Gemini"))
        assert isinstance(client, GeminiClientAdapter)
        assert client.supports_attachments is True

    @patch("invoice_dashboard.llm.openai_client_adapter.openai.OpenAI")
    def test_creates_openai_adapter(self, mock_openai: MagicMock) -> None:
        client = ModelClientFactory.create(_settings(model_provider="openai"))
        assert isinstance(client, OpenAIClientAdapter)
        assert mock_openai.call_args.kwargs["base_url"] is None
        assert client.supports_attachments is True

    @patch("invoice_dashboard.llm.openai_client_adapter.openai.OpenAI")
    def test_known_compatible_provider_uses_default_url(self, mock_openai: MagicMock) -> None:
        client = ModelClientFactory.create(_settings(model_provider="openrouter"))
        assert mock_openai.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"
        assert client.supports_attachments is False

    @patch("invoice_dashboard.llm.openai_client_adapter.openai.OpenAI")
    def test_base_url_override(self, mock_openai: MagicMock) -> None:
        ModelClientFactory.create(
            _settings(model_provider="groq", model_base_url="https://gw.example.com/v1")
        )
        assert mock_openai.call_args.kwargs["base_url"] == "https://gw.example.com/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="model_base_url is required"):
            ModelClientFactory.create(_settings(model_provider="openai_compatible"))

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown model provider"):
            ModelClientFactory.create(_settings(model_provider="nope"))

    @patch("invoice_dashboard.llm.openai_client_adapter.openai.OpenAI")
    def test_attachment_override(self, mock_openai: MagicMock) -> None:
        client = ModelClientFactory.create(
            _settings(
                model_provider="openai_compatible",
                model_base_url="http://localhost:8080/v1",
                model_supports_attachments=True,
            )
        )
        assert client.supports_attachments is True

    def test_attachment_override_disables(self) -> None:
        client = ModelClientFactory.create(
            _settings(model_provider="example", model_supports_attachments=False)
        )
        assert client.supports_attachments is False
