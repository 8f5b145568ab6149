"""
Shared outbound HTTP client.

Builds the httpx.AsyncClient used for every upstream call so timeouts and
headers are uniform. One client (one connection pool) is created per
application lifespan.

Dependencies: httpx, flowchart_mermaid.configs
System role: Outbound HTTP transport
"""

import httpx

from flowchart_mermaid import __version__
from flowchart_mermaid.configs import Settings, get_settings


def build_async_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an httpx.AsyncClient with the configured request timeout.

    Args:
        settings: Application settings (defaults to the cached singleton)
        transport: Optional transport override (e.g. httpx.MockTransport in tests)

    Returns:
        httpx.AsyncClient: Configured client; the caller owns closing it
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.conversion.http_timeout_seconds),
        headers={"User-Agent": f"flowchart-mermaid/{__version__}"},
        transport=transport,
    )
