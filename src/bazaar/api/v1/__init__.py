from fastapi import APIRouter

from . import health, users

api_router = APIRouter()
api_router.include_router(users.router, prefix="/api/users", tags=["Users"])
api_router.include_router(health.router, prefix="/health", tags=["Health"])

__all__ = ["api_router"]
