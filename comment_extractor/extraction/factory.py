from typing import ClassVar

from comment_extractor.config.settings import Settings
from comment_extractor.extraction.client_base import BaseVisionClient
from comment_extractor.extraction.example_client_adapter import ExampleClientAdapter
from comment_extractor.extraction.gemini_client_adapter import GeminiClientAdapter
from comment_extractor.extraction.invoker import ModelInvoker
from comment_extractor.extraction.openai_client_adapter import OpenAIClientAdapter


class InvokerFactory:
    """Creates a model invoker for the configured vision provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    DEFAULT_MODEL_NAMES: ClassVar[dict[str, str]] = {
        "example": "example",
        "gemini": "gemini-2.5-flash",
        "openai": "gpt-4o-mini",
    }

    @classmethod
    def create(cls, settings: Settings, api_key: str = "") -> ModelInvoker:
        """Create an invoker; the request's API key is used for the provider call."""
        provider = settings.vision_provider.lower()
        client = cls._create_client(provider, settings, api_key)
        return ModelInvoker(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.vision_temperature,
        )

    @classmethod
    def _create_client(
        cls, provider: str, settings: Settings, api_key: str
    ) -> BaseVisionClient:
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            return GeminiClientAdapter(
                api_key=api_key,
                timeout_seconds=settings.vision_timeout_seconds,
            )
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.vision_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.vision_base_url.strip()
            if not url:
                raise ValueError(
                    "vision_base_url is required for vision_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "gemini",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown vision provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        configured = settings.vision_model_name.strip()
        if configured:
            return configured
        model = cls.DEFAULT_MODEL_NAMES.get(provider, "")
        if not model:
            raise ValueError(f"vision_model_name is required for vision_provider={provider}")
        return model
