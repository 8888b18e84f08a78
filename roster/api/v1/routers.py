from fastapi import APIRouter

from roster.api.v1.endpoints import characters, health

api_router = APIRouter()
api_router.include_router(characters.router)

health_router = APIRouter()
health_router.include_router(health.router)

__all__ = ["api_router", "health_router"]
