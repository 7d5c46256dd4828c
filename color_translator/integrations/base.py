from __future__ import annotations

from typing import Protocol


class TranslationProviderError(RuntimeError):
    """Raised when an upstream translation provider cannot return a translation."""


class TranslationClient(Protocol):
    """Single-text translation provider contract.

    Implementations are not assumed to be safe for concurrent use; callers
    serialize access through :class:`~color_translator.services.translation.TranslationGate`.
    """

    async def translate(
        self,
        text: str,
        *,
        source_locale: str = "auto",
        target_locale: str,
    ) -> str:
        ...
