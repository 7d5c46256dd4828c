from __future__ import annotations

from fastapi.responses import JSONResponse

from color_translator.schemas.translation import TranslateResponse


def error_response(message: str, status_code: int) -> JSONResponse:
    """Render a failed TranslateResponse envelope with the given HTTP status."""
    payload = TranslateResponse(status=False, message=message)
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json", by_alias=True),
    )
