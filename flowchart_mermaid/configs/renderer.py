"""
Renderer configuration settings.

Hosted Mermaid services used for export: mermaid.ink renders SVG/PNG,
mermaid.live opens a diagram in the browser editor.

Dependencies: pydantic_settings
System role: Export and share-link configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RendererSettings(BaseSettings):
    """Hosted renderer and live editor endpoints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MERMAID_",
        case_sensitive=False,
        extra="ignore",
    )

    ink_url: str = Field(default="https://mermaid.ink", description="mermaid.ink base URL")
    live_url: str = Field(default="https://mermaid.live", description="Mermaid Live Editor base URL")
    theme: str = Field(default="default", description="Default Mermaid theme for links and renders")
