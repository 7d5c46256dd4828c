from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from color_translator.core.config import AppSettings, get_settings

router = APIRouter()


@router.get("/healthz")
async def healthcheck(settings: AppSettings = Depends(get_settings)) -> dict[str, str]:
    """Report liveness together with the service identity and active provider."""
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.app_env,
        "provider": settings.translation_provider,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
