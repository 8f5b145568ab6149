"""
Conversion configuration settings.

Process-wide prompt text, HTTP timeout, model-id prefixes and the caller
credential policy. Variables are read without a prefix (e.g. PROMPT_TEXT).

Dependencies: pydantic, pydantic_settings
System role: Request proxy behaviour configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConversionSettings(BaseSettings):
    """Settings shared by the conversion and edit proxies."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    prompt_text: str | None = Field(
        default=None,
        description="Default system instruction for image conversion",
    )
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout applied to every upstream HTTP request (seconds)",
    )
    default_image_mime_type: str = Field(
        default="image/jpeg",
        description="MIME type assumed when the image is raw base64",
    )
    openai_model_prefixes: list[str] = Field(
        default=["gpt-"],
        description="Model-id prefixes routed to OpenAI",
    )
    gemini_model_prefixes: list[str] = Field(
        default=["gemini"],
        description="Model-id prefixes routed to Gemini",
    )
    allow_caller_credentials: bool = Field(
        default=True,
        description="Accept API keys supplied in the request body",
    )
    enforce_credential_shape: bool = Field(
        default=True,
        description="Reject caller keys whose prefix belongs to the other provider (advisory)",
    )
