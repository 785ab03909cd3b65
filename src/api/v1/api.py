from fastapi import APIRouter

from .ai import router as ai_router
from .destinations import router as destinations_router
from .health import router as health_router


# Every route is public; callers are not authenticated.
api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(ai_router)
api_router.include_router(destinations_router)
