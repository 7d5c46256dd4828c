from __future__ import annotations

from openai import AsyncAzureOpenAI, AsyncOpenAI

from color_translator.core.config import AppSettings
from color_translator.integrations.base import TranslationProviderError


class LLMTranslationClient:
    """Translation provider backed by Azure OpenAI or OpenAI chat completions."""

    def __init__(self, settings: AppSettings):
        self._settings = settings
        self._azure_client: AsyncAzureOpenAI | None = None
        self._openai_client: AsyncOpenAI | None = None

        if settings.azure_openai_api_key and settings.azure_openai_endpoint and settings.azure_openai_deployment:
            self._azure_client = AsyncAzureOpenAI(
                api_key=settings.azure_openai_api_key.get_secret_value(),
                azure_endpoint=settings.azure_openai_endpoint,
                api_version=settings.azure_openai_api_version or "2024-02-15-preview",
            )
        elif settings.openai_api_key:
            self._openai_client = AsyncOpenAI(api_key=settings.openai_api_key.get_secret_value())

    @property
    def is_configured(self) -> bool:
        return self._azure_client is not None or self._openai_client is not None

    async def translate(
        self,
        text: str,
        *,
        source_locale: str = "auto",
        target_locale: str,
        max_tokens: int = 320,
    ) -> str:
        """Translate free-form text to the specified locale."""
        if not self.is_configured:
            raise TranslationProviderError("No OpenAI credentials configured for translation.")

        messages = self._build_translation_messages(
            text,
            target_locale=target_locale,
            source_locale=source_locale,
        )
        if self._azure_client:
            client = self._azure_client
            model = self._settings.azure_openai_deployment
        else:
            client = self._openai_client
            model = self._settings.openai_model

        try:
            response = await client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=0.1,
                max_tokens=max_tokens,
            )
        except Exception as exc:  # pragma: no cover - network failure path
            raise TranslationProviderError(f"OpenAI translation request failed: {exc}") from exc

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise TranslationProviderError("OpenAI translation returned an empty completion.")
        return content.strip()

    def _build_translation_messages(
        self,
        text: str,
        *,
        target_locale: str,
        source_locale: str | None,
    ) -> list[dict[str, str]]:
        if source_locale and source_locale != "auto":
            source_hint = f"from {source_locale} "
        else:
            source_hint = ""
        system_prompt = (
            f"You are a professional translator. Translate the user's text {source_hint}"
            f"into the language identified by the tag '{target_locale}'. "
            "Keep every ', ' separator exactly where it appears and do not merge or split items. "
            "Reply with the translation only, without quotes or commentary."
        )
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": text},
        ]
