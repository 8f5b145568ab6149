"""API routers."""

from .ai_edit import router as ai_edit_router
from .export import router as export_router
from .generate import router as generate_router
from .health import router as health_router

__all__ = [
    "ai_edit_router",
    "export_router",
    "generate_router",
    "health_router",
]
