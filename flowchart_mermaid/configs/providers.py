"""
Upstream provider configuration settings.

Credentials, endpoints and generation parameters for the OpenAI and Gemini
APIs. Process-wide API keys act as defaults when a caller supplies none.

Dependencies: pydantic, pydantic_settings
System role: Upstream LLM provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    """OpenAI chat-completions configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPENAI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Process-wide OpenAI API key (used when the caller sends none)",
    )
    base_url: str = Field(
        default="https://api.openai.com/v1",
        description="OpenAI API base URL",
    )
    max_tokens: int = Field(default=2000, gt=0, description="Max tokens for image conversion")
    temperature: float = Field(default=0.0, ge=0.0, le=2.0, description="Conversion temperature")

    edit_model: str = Field(default="gpt-4.1", description="Model used for AI diagram editing")
    edit_temperature: float = Field(default=0.2, ge=0.0, le=2.0, description="Edit temperature")
    edit_max_tokens: int = Field(default=1500, gt=0, description="Max tokens for AI editing")


class GeminiSettings(BaseSettings):
    """Gemini generateContent configuration, including the backoff policy."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Process-wide Gemini API key (used when the caller sends none)",
    )
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini API base URL",
    )
    max_output_tokens: int = Field(default=2000, gt=0, description="Max output tokens")
    temperature: float = Field(default=0.0, ge=0.0, le=2.0, description="Conversion temperature")

    # Retry policy
    max_attempts: int = Field(default=4, ge=1, le=10, description="Total attempts per request")
    initial_backoff_seconds: float = Field(
        default=4.0,
        ge=0.0,
        description="Delay before the first retry; doubles after each retry",
    )
    max_backoff_seconds: float = Field(
        default=60.0,
        ge=0.0,
        description="Upper bound for a single backoff delay",
    )
    retry_statuses: list[int] = Field(
        default=[429, 503],
        description="Upstream HTTP statuses treated as transient",
    )
