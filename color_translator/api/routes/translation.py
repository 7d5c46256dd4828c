from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from color_translator.api.deps import get_translation_service
from color_translator.api.responses import error_response
from color_translator.schemas.translation import TranslateRequest, TranslateResponse
from color_translator.services.translation import ColorTranslationService

router = APIRouter()


@router.post(
    "/translate",
    response_model=TranslateResponse,
    status_code=status.HTTP_200_OK,
    summary="Translate color names and display text into the requested language.",
    responses={status.HTTP_400_BAD_REQUEST: {"model": TranslateResponse}},
)
async def translate_colors(
    request: Request,
    payload: Optional[TranslateRequest] = Body(default=None),
    translator: ColorTranslationService = Depends(get_translation_service),
) -> TranslateResponse | JSONResponse:
    """Return translated names paired with the original color codes."""
    if payload is None:
        # A JSON `null` body is an empty request; an absent body is not JSON at all.
        if not (await request.body()).strip():
            return error_response("Invalid request payload", status.HTTP_400_BAD_REQUEST)
        payload = TranslateRequest()

    try:
        result = await translator.translate_colors(
            payload.colors,
            target_locale=payload.to,
            render_text=payload.render_text,
        )
    except ValueError as exc:
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    return TranslateResponse(
        colors=result.colors,
        render_text=result.render_text,
        status=True,
        message="Translations completed",
    )
