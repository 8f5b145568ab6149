"""
AI edit service.

Applies a natural-language instruction to existing Mermaid source through
the OpenAI chat-completions endpoint, using only the process-wide key.

Dependencies: flowchart_mermaid.core.providers, flowchart_mermaid.configs, httpx
System role: Diagram edit proxy orchestration layer
"""

import logging

import httpx

from flowchart_mermaid.configs import Settings
from flowchart_mermaid.core.exceptions import ConfigurationError, UpstreamError, ValidationError
from flowchart_mermaid.core.providers import OpenAIProvider
from flowchart_mermaid.core.redaction import redact_secrets
from flowchart_mermaid.core.schemas import ConversionResult

logger = logging.getLogger(__name__)


class EditService:
    """Natural-language editing of diagram source."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient) -> None:
        self.settings = settings
        self.http_client = http_client

    async def edit(self, prompt: str | None, current_code: str | None) -> ConversionResult:
        """
        Edit diagram source per instruction.

        Args:
            prompt: Natural-language change request
            current_code: Current Mermaid source

        Returns:
            ConversionResult: Updated, fence-free diagram source

        Raises:
            ValidationError: Blank prompt or code
            ConfigurationError: OPENAI_API_KEY not configured
            UpstreamError: Provider failure
        """
        prompt = (prompt or "").strip()
        current_code = (current_code or "").strip()
        if not prompt or not current_code:
            raise ValidationError(
                "Missing prompt or currentCode.",
                field="currentCode" if prompt else "prompt",
            )

        credential = self.settings.openai.api_key
        if not credential:
            logger.error(f"{__name__}:edit - OPENAI_API_KEY is not configured")
            raise ConfigurationError("AI editing is not configured on this server.")

        provider = OpenAIProvider(self.http_client, self.settings.openai)
        logger.info(f"{__name__}:edit - START model={self.settings.openai.edit_model}")
        try:
            updated = await provider.edit(prompt, current_code, credential)
        except UpstreamError as e:
            e.message = redact_secrets(e.message, credential)
            logger.warning(f"{__name__}:edit - {type(e).__name__} status={e.upstream_status}")
            raise

        return ConversionResult(diagram_source=updated)
