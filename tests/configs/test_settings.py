"""
Test suite for configuration loading.

System role: Verification of environment-driven settings
"""

import pytest

from flowchart_mermaid.configs import Settings
from flowchart_mermaid.configs.conversion import ConversionSettings
from flowchart_mermaid.configs.providers import GeminiSettings, OpenAISettings
from flowchart_mermaid.configs.renderer import RendererSettings
from flowchart_mermaid.core.providers.gemini_provider import retry_policy_from_settings
from flowchart_mermaid.main import create_app


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run from an empty directory so a local .env cannot leak in."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "OPENAI_API_KEY",
        "GEMINI_API_KEY",
        "PROMPT_TEXT",
        "HTTP_TIMEOUT_SECONDS",
        "ALLOW_CALLER_CREDENTIALS",
        "MERMAID_THEME",
        "MERMAID_INK_URL",
        "GEMINI_MAX_ATTEMPTS",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.openai.api_key is None
        assert settings.gemini.api_key is None
        assert settings.conversion.prompt_text is None
        assert settings.conversion.http_timeout_seconds == 60.0
        assert settings.conversion.openai_model_prefixes == ["gpt-"]
        assert settings.conversion.gemini_model_prefixes == ["gemini"]
        assert settings.renderer.ink_url == "https://mermaid.ink"

    def test_should_read_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("GEMINI_API_KEY", "AIza-env")
        monkeypatch.setenv("PROMPT_TEXT", "Convert it.")
        monkeypatch.setenv("MERMAID_THEME", "forest")

        settings = Settings()

        assert settings.openai.api_key == "sk-env"
        assert settings.gemini.api_key == "AIza-env"
        assert settings.conversion.prompt_text == "Convert it."
        assert settings.renderer.theme == "forest"

    def test_should_parse_boolean_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOW_CALLER_CREDENTIALS", "false")

        assert ConversionSettings().allow_caller_credentials is False

    def test_explicit_sections(self) -> None:
        settings = Settings(
            openai=OpenAISettings(api_key="sk-x"),
            gemini=GeminiSettings(api_key=None),
            conversion=ConversionSettings(http_timeout_seconds=5),
            renderer=RendererSettings(),
        )

        assert settings.openai.api_key == "sk-x"
        assert settings.conversion.http_timeout_seconds == 5


class TestGeminiRetryPolicy:
    """Test suite for the backoff policy derived from settings."""

    def test_default_policy(self) -> None:
        policy = retry_policy_from_settings(GeminiSettings(api_key=None))

        assert policy.enabled
        assert policy.max_attempts == 4
        assert policy.initial_backoff_seconds == 4.0
        assert policy.max_backoff_seconds == 60.0
        assert policy.retry_statuses == frozenset({429, 503})

    def test_single_attempt_disables_retry(self) -> None:
        policy = retry_policy_from_settings(GeminiSettings(api_key=None, max_attempts=1))

        assert not policy.enabled


class TestDotEnv:
    """Test suite for .env loading across every settings section."""

    def test_should_read_every_section_from_dotenv(self, tmp_path) -> None:
        # Arrange
        (tmp_path / ".env").write_text(
            "MERMAID_INK_URL=https://ink.internal\n"
            "MERMAID_THEME=dark\n"
            "GEMINI_MAX_ATTEMPTS=2\n"
            "OPENAI_API_KEY=sk-dotenv\n"
            "PROMPT_TEXT=From dotenv.\n"
            "DEBUG=true\n",
            encoding="utf-8",
        )

        # Act
        settings = Settings()

        # Assert
        assert settings.renderer.ink_url == "https://ink.internal"
        assert settings.renderer.theme == "dark"
        assert settings.gemini.max_attempts == 2
        assert settings.openai.api_key == "sk-dotenv"
        assert settings.conversion.prompt_text == "From dotenv."
        assert settings.debug is True


class TestDebugFlag:
    """Test suite for the debug flag reaching the application."""

    @pytest.mark.parametrize("debug", [True, False])
    def test_create_app_should_apply_debug(self, debug: bool) -> None:
        app = create_app(Settings(debug=debug))

        assert app.debug is debug
