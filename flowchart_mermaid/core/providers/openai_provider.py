"""
OpenAI chat-completions provider.

Handles both image conversion (vision request with the image inlined as a
data URL) and text-only AI editing. Bearer-token auth, no retry.

Dependencies: httpx, flowchart_mermaid.configs
System role: OpenAI upstream integration
"""

import asyncio
from typing import Any

import httpx

from flowchart_mermaid.configs.providers import OpenAISettings
from flowchart_mermaid.core.image_payload import parse_image_payload
from flowchart_mermaid.core.prompts import (
    CONVERSION_INSTRUCTION,
    EDIT_SYSTEM_PROMPT,
    build_edit_user_message,
)
from flowchart_mermaid.core.providers.base import (
    NO_RETRY,
    Provider,
    SleepFunc,
    UpstreamCall,
    UpstreamProvider,
)
from flowchart_mermaid.core.schemas import ConversionRequest


class OpenAIProvider(UpstreamProvider):
    """OpenAI chat-completions integration."""

    provider = Provider.OPENAI
    display_name = "OpenAI"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: OpenAISettings,
        default_mime_type: str = "image/jpeg",
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        super().__init__(http_client, retry_policy=NO_RETRY, sleep=sleep)
        self._settings = settings
        self._default_mime_type = default_mime_type

    @property
    def completions_url(self) -> str:
        return f"{self._settings.base_url.rstrip('/')}/chat/completions"

    def _headers(self, credential: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json",
        }

    def build_request(
        self,
        request: ConversionRequest,
        instruction: str,
        credential: str,
    ) -> UpstreamCall:
        image = parse_image_payload(request.image_data or "", self._default_mime_type)
        messages = [
            {"role": "system", "content": instruction},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": CONVERSION_INSTRUCTION},
                    {"type": "image_url", "image_url": {"url": image.data_url}},
                ],
            },
        ]
        return UpstreamCall(
            url=self.completions_url,
            headers=self._headers(credential),
            json={
                "model": request.model_id,
                "messages": messages,
                "max_tokens": self._settings.max_tokens,
                "temperature": self._settings.temperature,
            },
        )

    def build_edit_request(self, prompt: str, current_code: str, credential: str) -> UpstreamCall:
        """Build the text-only diagram edit request."""
        messages = [
            {"role": "system", "content": EDIT_SYSTEM_PROMPT},
            {"role": "user", "content": build_edit_user_message(current_code, prompt)},
        ]
        return UpstreamCall(
            url=self.completions_url,
            headers=self._headers(credential),
            json={
                "model": self._settings.edit_model,
                "messages": messages,
                "temperature": self._settings.edit_temperature,
                "max_tokens": self._settings.edit_max_tokens,
            },
        )

    async def edit(self, prompt: str, current_code: str, credential: str) -> str:
        """
        Apply a natural-language edit to existing diagram source.

        Returns:
            str: Updated, fence-free diagram source
        """
        call = self.build_edit_request(prompt, current_code, credential)
        payload = await self.send(call)
        return self._finalize(payload)

    def parse_response(self, payload: dict[str, Any]) -> str:
        return payload["choices"][0]["message"]["content"]
