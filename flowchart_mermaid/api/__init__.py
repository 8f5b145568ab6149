"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    ai_edit_router,
    export_router,
    generate_router,
    health_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(generate_router)
api_router.include_router(ai_edit_router)
api_router.include_router(export_router)

__all__ = ["api_router"]
