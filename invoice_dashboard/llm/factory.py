from typing import ClassVar

from invoice_dashboard.config.settings import Settings
from invoice_dashboard.llm.client_base import BaseModelClient
from invoice_dashboard.llm.example_client_adapter import ExampleClientAdapter
from invoice_dashboard.llm.gemini_client_adapter import GeminiClientAdapter
from invoice_dashboard.llm.openai_client_adapter import OpenAIClientAdapter


class ModelClientFactory:
    """Creates the configured model client adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }
    # Providers known to accept inline images and PDFs.
    MULTIMODAL_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"example", "gemini", "openai"})

    @classmethod
    def create(cls, settings: Settings) -> BaseModelClient:
        provider = settings.model_provider.lower()
        supports_attachments = cls._resolve_supports_attachments(provider, settings)
        if provider == "example":
            return ExampleClientAdapter(supports_attachments=supports_attachments)
        if provider == "gemini":
            return GeminiClientAdapter(
                api_key=settings.model_api_key,
                timeout_seconds=settings.model_timeout_seconds,
                supports_attachments=supports_attachments,
            )
        return OpenAIClientAdapter(
            api_key=settings.model_api_key,
            timeout_seconds=settings.model_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            supports_attachments=supports_attachments,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.model_base_url or None
        if provider == "openai_compatible":
            url = (settings.model_base_url or "").strip()
            if not url:
                raise ValueError(
                    "model_base_url is required for model_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.model_base_url or default_base_url
        supported = [
            "example",
            "gemini",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown model provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_supports_attachments(cls, provider: str, settings: Settings) -> bool:
        if settings.model_supports_attachments is not None:
            return settings.model_supports_attachments
        return provider in cls.MULTIMODAL_PROVIDERS
