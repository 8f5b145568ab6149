"""
Test suite for POST /ai-edit.

System role: Verification of the AI edit HTTP contract
"""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from flowchart_mermaid.configs import Settings
from tests.stubs import UpstreamStub, openai_completion, upstream_error

CURRENT = "flowchart TD\nA-->B"


class TestAIEditEndpoint:
    """Test suite for the /ai-edit route."""

    def test_should_return_updated_code(self, make_client: Callable[..., TestClient]) -> None:
        """Test successful edit returns updatedCode."""
        # Arrange
        stub = UpstreamStub([openai_completion("```mermaid\nflowchart TD\nA-->B\nB-->C\n```")])
        client = make_client(stub)

        # Act
        response = client.post("/api/ai-edit", json={"prompt": "add C", "currentCode": CURRENT})

        # Assert
        assert response.status_code == 200
        assert response.json() == {"updatedCode": "flowchart TD\nA-->B\nB-->C"}

    @pytest.mark.parametrize("body", [{"prompt": "add C"}, {"currentCode": CURRENT}, {}])
    def test_should_reject_missing_fields(
        self, make_client: Callable[..., TestClient], body: dict
    ) -> None:
        stub = UpstreamStub([openai_completion(CURRENT)])

        response = make_client(stub).post("/api/ai-edit", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing prompt or currentCode."}
        assert stub.call_count == 0

    def test_should_report_unconfigured_server(
        self,
        make_client: Callable[..., TestClient],
        make_settings: Callable[..., Settings],
    ) -> None:
        """Test 500 when the server has no OpenAI key."""
        client = make_client(app_settings=make_settings(openai_key=None))

        response = client.post("/api/ai-edit", json={"prompt": "add C", "currentCode": CURRENT})

        assert response.status_code == 500
        assert response.json() == {"error": "AI editing is not configured on this server."}

    def test_should_relay_upstream_error(self, make_client: Callable[..., TestClient]) -> None:
        stub = UpstreamStub([upstream_error(500, "The server had an error")])

        response = make_client(stub).post("/api/ai-edit", json={"prompt": "add C", "currentCode": CURRENT})

        assert response.status_code == 500
        assert response.json() == {"error": "The server had an error"}
