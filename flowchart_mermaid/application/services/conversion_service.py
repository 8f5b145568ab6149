"""
Conversion service for image to Mermaid requests.

Orchestrates the full proxy flow: input validation, provider selection,
credential and prompt resolution, upstream call, and error sanitization.
Validation failures are raised before any network I/O.

Dependencies: flowchart_mermaid.core, flowchart_mermaid.configs, httpx
System role: Upstream request proxy orchestration layer
"""

import asyncio
import logging

import httpx

from flowchart_mermaid.configs import Settings
from flowchart_mermaid.core.credentials import resolve_credential
from flowchart_mermaid.core.exceptions import UpstreamError, ValidationError
from flowchart_mermaid.core.prompts import DEFAULT_CONVERSION_PROMPT
from flowchart_mermaid.core.providers import (
    GeminiProvider,
    OpenAIProvider,
    Provider,
    UpstreamProvider,
    select_provider,
)
from flowchart_mermaid.core.providers.base import SleepFunc
from flowchart_mermaid.core.redaction import redact_secrets
from flowchart_mermaid.core.schemas import ConversionRequest, ConversionResult
from flowchart_mermaid.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ConversionService:
    """
    Image to diagram-source conversion proxy.

    Stateless apart from the injected settings and HTTP client; every call
    builds its own provider, so concurrent conversions never share state.
    """

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """
        Initialize conversion service.

        Args:
            settings: Application settings
            http_client: Shared async HTTP client
            sleep: Backoff sleep (injectable for tests)
        """
        self.settings = settings
        self.http_client = http_client
        self._sleep = sleep

    def _build_provider(self, provider: Provider) -> UpstreamProvider:
        mime_type = self.settings.conversion.default_image_mime_type
        if provider is Provider.OPENAI:
            return OpenAIProvider(
                self.http_client,
                self.settings.openai,
                default_mime_type=mime_type,
                sleep=self._sleep,
            )
        return GeminiProvider(
            self.http_client,
            self.settings.gemini,
            default_mime_type=mime_type,
            sleep=self._sleep,
        )

    def _default_credential(self, provider: Provider) -> str | None:
        if provider is Provider.OPENAI:
            return self.settings.openai.api_key
        return self.settings.gemini.api_key

    def _instruction(self, request: ConversionRequest) -> str:
        if request.prompt and request.prompt.strip():
            return request.prompt.strip()
        return self.settings.conversion.prompt_text or DEFAULT_CONVERSION_PROMPT

    async def convert(self, request: ConversionRequest) -> ConversionResult:
        """
        Convert a flowchart image into Mermaid source.

        Flow:
        1. Validate image and model are present
        2. Select provider by model-id prefix
        3. Resolve credential (caller key first, then process default)
        4. Call provider (with its retry policy) and strip code fences

        Args:
            request: Conversion request from the caller

        Returns:
            ConversionResult: Diagram source

        Raises:
            ValidationError: Missing input, unsupported model, bad credential
            UpstreamError: Provider failure (message redacted)
        """
        image = (request.image_data or "").strip()
        model_id = (request.model_id or "").strip()
        if not image or not model_id:
            raise ValidationError(
                "Missing image or model.",
                field="model" if image else "image",
            )

        conversion = self.settings.conversion
        provider = select_provider(
            model_id,
            openai_prefixes=conversion.openai_model_prefixes,
            gemini_prefixes=conversion.gemini_model_prefixes,
        )
        credential = resolve_credential(
            provider,
            caller_credential=request.credential,
            default_credential=self._default_credential(provider),
            allow_caller_credentials=conversion.allow_caller_credentials,
            enforce_shape=conversion.enforce_credential_shape,
        )

        normalized = ConversionRequest(
            image_data=image,
            model_id=model_id,
            credential=request.credential,
            prompt=request.prompt,
        )
        upstream = self._build_provider(provider)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:convert - START provider={provider.value} model={model_id}",
            provider=provider.value,
            model=model_id,
            caller_key=bool((request.credential or "").strip()),
        )

        try:
            source = await upstream.convert(normalized, self._instruction(request), credential)
        except UpstreamError as e:
            e.message = redact_secrets(e.message, credential)
            logger.warning(
                f"{__name__}:convert - {type(e).__name__} provider={provider.value} "
                f"status={e.upstream_status}"
            )
            raise

        logger.info(
            f"{__name__}:convert - COMPLETE provider={provider.value} chars={len(source)}"
        )
        return ConversionResult(diagram_source=source)
