from __future__ import annotations

import asyncio

from deep_translator import GoogleTranslator

from color_translator.integrations.base import TranslationProviderError


class GoogleTranslateClient:
    """Google Translate web client backed by deep-translator."""

    def __init__(self, translator_factory=GoogleTranslator) -> None:
        self._translator_factory = translator_factory

    async def translate(
        self,
        text: str,
        *,
        source_locale: str = "auto",
        target_locale: str,
    ) -> str:
        # deep-translator is blocking; keep the event loop free while it runs.
        return await asyncio.to_thread(
            self._translate_sync,
            text,
            source_locale,
            target_locale,
        )

    def _translate_sync(self, text: str, source_locale: str, target_locale: str) -> str:
        try:
            translator = self._translator_factory(
                source=self._normalize_locale(source_locale) or "auto",
                target=self._normalize_locale(target_locale),
            )
            translated = translator.translate(text)
        except Exception as exc:
            raise TranslationProviderError(
                f"Google translation to '{target_locale}' failed: {exc}"
            ) from exc

        if not isinstance(translated, str) or not translated:
            raise TranslationProviderError(
                f"Google translation to '{target_locale}' returned no text."
            )
        return translated

    @staticmethod
    def _normalize_locale(value: str) -> str:
        if not value:
            return ""
        normalized = value.replace("_", "-")
        # Google expects region-qualified Chinese codes.
        if normalized.lower() == "zh":
            return "zh-CN"
        return normalized
