"""Translation provider clients."""

from color_translator.core.config import AppSettings
from color_translator.integrations.base import TranslationClient, TranslationProviderError


def build_translation_client(settings: AppSettings) -> TranslationClient:
    """Instantiate the provider selected by ``TRANSLATION_PROVIDER``."""
    provider = settings.translation_provider.lower()
    if provider == "google":
        from color_translator.integrations.google import GoogleTranslateClient

        return GoogleTranslateClient()
    if provider == "openai":
        from color_translator.integrations.llm import LLMTranslationClient

        return LLMTranslationClient(settings)
    raise ValueError(f"Unsupported translation provider: {settings.translation_provider}")


__all__ = [
    "TranslationClient",
    "TranslationProviderError",
    "build_translation_client",
]
