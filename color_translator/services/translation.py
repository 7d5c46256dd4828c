from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Sequence

from color_translator.integrations.base import TranslationClient
from color_translator.schemas.translation import Color

logger = logging.getLogger(__name__)

NAME_DELIMITER = ", "
AUTO_SOURCE_LOCALE = "auto"


class TranslationGate:
    """Serializes every provider call made through it.

    One gate is shared by all in-flight requests, so at most one call to the
    underlying translation client is running at any moment.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def translate(
        self,
        client: TranslationClient,
        text: str,
        *,
        source_locale: str,
        target_locale: str,
    ) -> str:
        async with self._lock:
            call = asyncio.ensure_future(
                client.translate(
                    text,
                    source_locale=source_locale,
                    target_locale=target_locale,
                )
            )
            try:
                return await asyncio.shield(call)
            except asyncio.CancelledError:
                # A cancelled caller still owns the gate until the provider call ends.
                await self._drain(call)
                raise

    @staticmethod
    async def _drain(call: asyncio.Future) -> None:
        while not call.done():
            try:
                await asyncio.wait({call})
            except asyncio.CancelledError:
                continue
        if not call.cancelled() and call.exception() is not None:
            logger.debug("Discarded provider failure after cancellation: %s", type(call.exception()).__name__)


class BatchTranslator:
    """Translates many short names with a single provider round trip."""

    def __init__(
        self,
        client: TranslationClient,
        gate: TranslationGate,
        *,
        source_locale: str = AUTO_SOURCE_LOCALE,
    ) -> None:
        self._client = client
        self._gate = gate
        self._source_locale = source_locale or AUTO_SOURCE_LOCALE

    async def translate_text(self, text: str, *, target_locale: str) -> str:
        """Translate a single string, returning it unchanged if the provider fails."""
        if not text:
            return text
        try:
            return await self._gate.translate(
                self._client,
                text,
                source_locale=self._source_locale,
                target_locale=target_locale,
            )
        except Exception as exc:
            logger.warning(
                "Text translation failed; keeping original (target=%s, error=%s)",
                target_locale,
                type(exc).__name__,
            )
            return text

    async def translate_names(self, names: Sequence[str], *, target_locale: str) -> list[str]:
        """Return translated names, always the same length and order as ``names``."""
        originals = list(names)
        if not originals:
            return []

        batch = NAME_DELIMITER.join(originals)
        try:
            translated = await self._gate.translate(
                self._client,
                batch,
                source_locale=self._source_locale,
                target_locale=target_locale,
            )
        except Exception as exc:
            logger.warning(
                "Name batch translation failed; keeping originals (target=%s, items=%d, error=%s)",
                target_locale,
                len(originals),
                type(exc).__name__,
            )
            return originals

        return self.align(originals, translated)

    @staticmethod
    def align(originals: Sequence[str], translated_batch: str) -> list[str]:
        """Pair split pieces with ``originals`` by position.

        Missing or blank pieces keep the original name; surplus pieces are dropped.
        """
        pieces = [piece.strip() for piece in translated_batch.split(NAME_DELIMITER)]
        if len(pieces) != len(originals):
            logger.info(
                "Provider returned %d pieces for %d names; aligning by position.",
                len(pieces),
                len(originals),
            )
        aligned: list[str] = []
        for index, original in enumerate(originals):
            piece = pieces[index] if index < len(pieces) else ""
            aligned.append(piece or original)
        return aligned


@dataclass(slots=True)
class ColorTranslation:
    """Translated colors plus the translated display text."""

    colors: list[Color]
    render_text: str


class ColorTranslationService:
    """Translate color names and the accompanying display text for one request."""

    def __init__(
        self,
        client: TranslationClient,
        *,
        gate: TranslationGate | None = None,
        source_locale: str = AUTO_SOURCE_LOCALE,
    ) -> None:
        self._gate = gate or TranslationGate()
        self._batch = BatchTranslator(client, self._gate, source_locale=source_locale)

    @property
    def gate(self) -> TranslationGate:
        return self._gate

    async def translate_colors(
        self,
        colors: Sequence[Color],
        *,
        target_locale: str,
        render_text: str = "",
    ) -> ColorTranslation:
        if not colors:
            raise ValueError("No colors to translate")

        translated_render_text = await self._batch.translate_text(
            render_text,
            target_locale=target_locale,
        )
        translated_names = await self._batch.translate_names(
            [color.name for color in colors],
            target_locale=target_locale,
        )

        translated_colors = [
            Color(name=name, code=color.code)
            for name, color in zip(translated_names, colors)
        ]
        return ColorTranslation(colors=translated_colors, render_text=translated_render_text)
