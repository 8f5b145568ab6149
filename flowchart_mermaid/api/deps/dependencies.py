"""
Dependency injection container.

Factory functions for FastAPI dependencies. Services are cheap, stateless
wrappers built per request around the shared settings and HTTP client.

Dependencies: flowchart_mermaid.configs, flowchart_mermaid.application
System role: DI container for service injection
"""

import httpx
from fastapi import Depends, Request

from flowchart_mermaid.application.services import (
    ConversionService,
    EditService,
    ExportService,
)
from flowchart_mermaid.configs import Settings, get_settings
from flowchart_mermaid.core.exceptions import ConfigurationError


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client created during application lifespan.

    Raises:
        ConfigurationError: If the application was started without lifespan
    """
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        raise ConfigurationError("HTTP client is not initialized.")
    return client


def get_conversion_service(
    settings: Settings = Depends(get_settings_dependency),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> ConversionService:
    """
    Get conversion service instance.

    Args:
        settings: Application settings (injected via Depends)
        http_client: Shared HTTP client (injected via Depends)

    Returns:
        ConversionService: Service for image conversion
    """
    return ConversionService(settings=settings, http_client=http_client)


def get_edit_service(
    settings: Settings = Depends(get_settings_dependency),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> EditService:
    """Get AI edit service instance."""
    return EditService(settings=settings, http_client=http_client)


def get_export_service(
    settings: Settings = Depends(get_settings_dependency),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> ExportService:
    """Get export service instance."""
    return ExportService(settings=settings, http_client=http_client)
