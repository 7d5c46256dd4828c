from color_translator.core.config import get_settings
from color_translator.integrations import build_translation_client
from color_translator.services.translation import ColorTranslationService

_translation_service: ColorTranslationService | None = None


async def get_translation_service() -> ColorTranslationService:
    """Provide the process-wide ColorTranslationService singleton."""
    global _translation_service
    if _translation_service is None:
        settings = get_settings()
        _translation_service = ColorTranslationService(
            build_translation_client(settings),
            source_locale=settings.translation_source_locale,
        )
    return _translation_service
