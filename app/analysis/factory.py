from typing import ClassVar

from app.analysis.analyzer import PlantAnalyzer
from app.analysis.client_base import BaseAnalysisClient
from app.analysis.example_client_adapter import ExampleClientAdapter
from app.analysis.gemini_client_adapter import GeminiClientAdapter
from app.analysis.openai_client_adapter import OpenAIClientAdapter
from app.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured plant analyzer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> PlantAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analysis_provider.lower()
        client, model = cls._create_client(provider, settings)
        return PlantAnalyzer(client=client, model=model)

    @classmethod
    def supported_providers(cls) -> list[str]:
        return [
            "example",
            "gemini",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]

    @classmethod
    def _create_client(
        cls, provider: str, settings: Settings
    ) -> tuple[BaseAnalysisClient, str]:
        if provider == "example":
            return ExampleClientAdapter(), "example"
        if provider == "gemini":
            client: BaseAnalysisClient = GeminiClientAdapter(
                api_key=settings.gemini_api_key,
                timeout_seconds=settings.gemini_timeout_seconds,
            )
            return client, settings.gemini_model_name
        client = OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return client, settings.openai_model_name

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.openai_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "openai_base_url is required for analysis_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {cls.supported_providers()}"
        )
