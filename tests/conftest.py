"""
Shared test fixtures and configuration for entire test suite.

Provides: explicit settings, a recording backoff sleep, and sample payloads.
Dependencies: pytest, flowchart_mermaid.configs
System role: Test infrastructure and fixture management
"""

from collections.abc import Callable

import pytest

from flowchart_mermaid.configs import Settings
from flowchart_mermaid.configs.conversion import ConversionSettings
from flowchart_mermaid.configs.providers import GeminiSettings, OpenAISettings
from flowchart_mermaid.configs.renderer import RendererSettings
from tests.stubs import SleepRecorder

SERVER_OPENAI_KEY = "sk-server-openai-key"
SERVER_GEMINI_KEY = "AIza-server-gemini-key"
SERVER_PROMPT = "You convert flowcharts to Mermaid."


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory for Settings with explicit values (environment is ignored)."""

    def _make(
        openai_key: str | None = SERVER_OPENAI_KEY,
        gemini_key: str | None = SERVER_GEMINI_KEY,
        prompt_text: str | None = SERVER_PROMPT,
        allow_caller_credentials: bool = True,
        enforce_credential_shape: bool = True,
    ) -> Settings:
        return Settings(
            openai=OpenAISettings(api_key=openai_key),
            gemini=GeminiSettings(api_key=gemini_key),
            conversion=ConversionSettings(
                prompt_text=prompt_text,
                allow_caller_credentials=allow_caller_credentials,
                enforce_credential_shape=enforce_credential_shape,
            ),
            renderer=RendererSettings(),
        )

    return _make


@pytest.fixture
def settings(make_settings: Callable[..., Settings]) -> Settings:
    """Settings with server-side keys for both providers."""
    return make_settings()


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    """Provide recording sleep for backoff assertions."""
    return SleepRecorder()


@pytest.fixture
def sample_image() -> str:
    """Provide a small base64 PNG payload."""
    return "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="


@pytest.fixture
def fenced_diagram() -> str:
    """Provide typical fenced model output."""
    return "```mermaid\nflowchart TD\nA-->B\n```"
