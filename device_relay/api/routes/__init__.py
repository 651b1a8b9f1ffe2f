"""
API routes for the relay service.

Includes device ingestion, operator reads, auth, user management and the
command relay. Mounted under the configured API prefix (default /api).
"""
from fastapi import APIRouter

from .health import router as health_router
from .logs import router as logs_router
from .auth import router as auth_router
from .users import router as users_router
from .commands import router as commands_router

# Main API router that includes all sub-routers
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(logs_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(commands_router)

__all__ = [
    "api_router",
    "health_router",
    "logs_router",
    "auth_router",
    "users_router",
    "commands_router",
]
