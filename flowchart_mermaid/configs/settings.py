"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from flowchart_mermaid.configs.base import BaseSettings
from flowchart_mermaid.configs.conversion import ConversionSettings
from flowchart_mermaid.configs.providers import GeminiSettings, OpenAISettings
from flowchart_mermaid.configs.renderer import RendererSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    conversion: ConversionSettings = Field(default_factory=ConversionSettings)
    renderer: RendererSettings = Field(default_factory=RendererSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from flowchart_mermaid.configs import get_settings
        settings = get_settings()
    """
    return Settings()
