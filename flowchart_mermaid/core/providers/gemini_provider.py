"""
Gemini generateContent provider.

Single-turn request with the image as inline data and the API key in the
query string. Rate-limit (429) and overload (503) responses are retried with
exponential backoff: 4s, 8s, 16s... capped at 60s, at most 4 attempts.

Dependencies: httpx, flowchart_mermaid.configs
System role: Gemini upstream integration
"""

import asyncio
from typing import Any

import httpx

from flowchart_mermaid.configs.providers import GeminiSettings
from flowchart_mermaid.core.image_payload import parse_image_payload
from flowchart_mermaid.core.prompts import CONVERSION_INSTRUCTION
from flowchart_mermaid.core.providers.base import (
    Provider,
    RetryPolicy,
    SleepFunc,
    UpstreamCall,
    UpstreamProvider,
)
from flowchart_mermaid.core.schemas import ConversionRequest


def retry_policy_from_settings(settings: GeminiSettings) -> RetryPolicy:
    """Build the backoff policy from GEMINI_* settings."""
    return RetryPolicy(
        max_attempts=settings.max_attempts,
        initial_backoff_seconds=settings.initial_backoff_seconds,
        max_backoff_seconds=settings.max_backoff_seconds,
        retry_statuses=frozenset(settings.retry_statuses),
    )


class GeminiProvider(UpstreamProvider):
    """Gemini generateContent integration with bounded backoff."""

    provider = Provider.GEMINI
    display_name = "Gemini"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: GeminiSettings,
        default_mime_type: str = "image/jpeg",
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        super().__init__(
            http_client,
            retry_policy=retry_policy_from_settings(settings),
            sleep=sleep,
        )
        self._settings = settings
        self._default_mime_type = default_mime_type

    def build_request(
        self,
        request: ConversionRequest,
        instruction: str,
        credential: str,
    ) -> UpstreamCall:
        image = parse_image_payload(request.image_data or "", self._default_mime_type)
        url = f"{self._settings.base_url.rstrip('/')}/models/{request.model_id}:generateContent"
        payload = {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": f"{instruction}\n\n{CONVERSION_INSTRUCTION}"},
                        {"inlineData": {"mimeType": image.mime_type, "data": image.data}},
                    ],
                }
            ],
            "generationConfig": {
                "temperature": self._settings.temperature,
                "maxOutputTokens": self._settings.max_output_tokens,
            },
        }
        return UpstreamCall(
            url=url,
            json=payload,
            headers={"Content-Type": "application/json"},
            params={"key": credential},
        )

    def parse_response(self, payload: dict[str, Any]) -> str:
        return payload["candidates"][0]["content"]["parts"][0]["text"]
