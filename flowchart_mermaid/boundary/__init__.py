"""Boundary layer: outbound HTTP client."""

from flowchart_mermaid.boundary.http_client import build_async_client

__all__ = ["build_async_client"]
