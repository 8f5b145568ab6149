"""FastAPI dependency providers."""

from .dependencies import (
    get_conversion_service,
    get_edit_service,
    get_export_service,
    get_http_client,
    get_settings_dependency,
)

__all__ = [
    "get_conversion_service",
    "get_edit_service",
    "get_export_service",
    "get_http_client",
    "get_settings_dependency",
]
