from typing import ClassVar

from app.config.settings import Settings
from app.extraction.base import BaseExtractor
from app.extraction.example_client_adapter import ExampleClientAdapter
from app.extraction.extractor import Extractor
from app.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractorFactory:
    """Creates the configured extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "ollama": "http://localhost:11434/v1",
    }

    DEFAULT_MODEL_NAMES: ClassVar[dict[str, str]] = {
        "gemini": "gemini-3-pro-preview",
        "openai": "gpt-4o-mini",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return Extractor(
                client=ExampleClientAdapter(),
                model="example",
                max_html_chars=settings.max_html_chars,
            )
        client = OpenAIClientAdapter(
            api_key=settings.api_key,
            timeout_seconds=settings.extraction_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Extractor(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.extraction_temperature,
            max_html_chars=settings.max_html_chars,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.extraction_base_url.strip()
            if not url:
                raise ValueError(
                    "extraction_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        return settings.extraction_model_name or cls.DEFAULT_MODEL_NAMES.get(provider, "")
