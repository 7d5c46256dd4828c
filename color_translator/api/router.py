from fastapi import APIRouter

from color_translator.api.routes import health, translation

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(translation.router, tags=["translation"])
