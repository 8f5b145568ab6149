"""
API test fixtures.

Builds the application with settings and the outbound HTTP client
overridden, so endpoint tests never touch the network or the environment.

System role: FastAPI test client factory
"""

from collections.abc import Callable

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from flowchart_mermaid.api.deps import get_http_client, get_settings_dependency
from flowchart_mermaid.configs import Settings
from flowchart_mermaid.main import create_app
from tests.stubs import UpstreamStub


@pytest.fixture
def make_client(settings: Settings) -> Callable[..., TestClient]:
    """Factory for a TestClient wired to an upstream stub."""

    def _make(stub: UpstreamStub | None = None, app_settings: Settings | None = None) -> TestClient:
        app: FastAPI = create_app(app_settings or settings)
        http_client = stub.client() if stub is not None else httpx.AsyncClient()
        app.dependency_overrides[get_settings_dependency] = lambda: app_settings or settings
        app.dependency_overrides[get_http_client] = lambda: http_client
        return TestClient(app)

    return _make
