from pathlib import Path

from app.analysis.analyzer import Analyzer
from app.analysis.base import BaseAnalyzer
from app.analysis.client_base import BaseAnalysisClient
from app.analysis.example_client_adapter import ExampleClientAdapter
from app.analysis.gemini_client_adapter import GeminiClientAdapter
from app.analysis.openai_client_adapter import OpenAIClientAdapter
from app.analysis.prompt_loader import load_prompt
from app.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer adapter."""

    PROVIDERS: tuple[str, ...] = ("example", "gemini", "openai")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings."""
        prompt_path = (
            Path(settings.analysis_prompt_path) if settings.analysis_prompt_path else None
        )
        return Analyzer(
            client=cls._create_client(settings),
            prompt=load_prompt(prompt_path),
        )

    @classmethod
    def _create_client(cls, settings: Settings) -> BaseAnalysisClient:
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            if not settings.gemini_api_key:
                raise ValueError("gemini_api_key is required for analysis_provider=gemini")
            return GeminiClientAdapter(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model_name,
                base_url=settings.gemini_base_url,
                timeout_seconds=settings.analysis_timeout_seconds,
            )
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.analysis_timeout_seconds,
                base_url=settings.openai_base_url,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
