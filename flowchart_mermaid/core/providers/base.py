"""
Provider abstraction and the shared upstream call loop.

Every provider exposes the same capability: build_request() produces an
UpstreamCall, parse_response() extracts the diagram text, and retry_policy
says which upstream statuses are transient. UpstreamProvider.send() runs the
call once, or under a tenacity backoff loop when the policy allows retries.

Dependencies: httpx, tenacity, flowchart_mermaid.core.exceptions
System role: Uniform upstream HTTP execution for all providers
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from flowchart_mermaid.core.exceptions import (
    RetriesExhaustedError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamRateLimitError,
)
from flowchart_mermaid.core.fences import strip_code_fences
from flowchart_mermaid.core.schemas import ConversionRequest

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]

_AUTH_STATUSES = frozenset({401, 403})


class Provider(str, Enum):
    """Supported upstream provider families."""

    OPENAI = "openai"
    GEMINI = "gemini"


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded exponential backoff on transient upstream statuses."""

    max_attempts: int = 1
    initial_backoff_seconds: float = 0.0
    max_backoff_seconds: float = 0.0
    retry_statuses: frozenset[int] = frozenset()

    @property
    def enabled(self) -> bool:
        return self.max_attempts > 1 and bool(self.retry_statuses)


NO_RETRY = RetryPolicy()


@dataclass(frozen=True)
class UpstreamCall:
    """A fully built provider request."""

    url: str
    json: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)


class UpstreamProvider(ABC):
    """
    Base class for upstream LLM providers.

    Subclasses define the request/response shapes; the HTTP exchange, error
    normalization and retry loop live here so every provider reports failures
    the same way.
    """

    provider: Provider
    display_name: str

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        retry_policy: RetryPolicy = NO_RETRY,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """
        Initialize provider.

        Args:
            http_client: Shared async HTTP client
            retry_policy: Backoff policy for transient statuses
            sleep: Awaitable used between retries (injectable for tests)
        """
        self._http_client = http_client
        self.retry_policy = retry_policy
        self._sleep = sleep

    @abstractmethod
    def build_request(
        self,
        request: ConversionRequest,
        instruction: str,
        credential: str,
    ) -> UpstreamCall:
        """Build the provider-specific image conversion request."""

    @abstractmethod
    def parse_response(self, payload: dict[str, Any]) -> str:
        """Extract the raw model text from a successful response body."""

    async def convert(
        self,
        request: ConversionRequest,
        instruction: str,
        credential: str,
    ) -> str:
        """
        Convert an image into diagram source.

        Args:
            request: Validated conversion request
            instruction: System instruction text
            credential: Resolved API key

        Returns:
            str: Fence-free, trimmed diagram source

        Raises:
            UpstreamError: On any upstream failure or empty output
        """
        call = self.build_request(request, instruction, credential)
        payload = await self.send(call)
        return self._finalize(payload)

    async def send(self, call: UpstreamCall) -> dict[str, Any]:
        """
        Execute the call, retrying transient statuses per retry_policy.

        Raises:
            RetriesExhaustedError: When every attempt hit a transient status
            UpstreamError: On any other upstream failure
        """
        policy = self.retry_policy
        if not policy.enabled:
            return await self._send_once(call)

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(UpstreamRateLimitError),
            stop=stop_after_attempt(policy.max_attempts),
            wait=wait_exponential(
                multiplier=policy.initial_backoff_seconds,
                max=policy.max_backoff_seconds,
            ),
            sleep=self._sleep,
            before_sleep=self._log_retry,
        )
        try:
            return await retrying(self._send_once, call)
        except RetryError as exc:
            last_error = exc.last_attempt.exception()
            logger.error(
                f"{__name__}:send - {self.display_name} gave up after "
                f"{policy.max_attempts} attempts"
            )
            raise RetriesExhaustedError(
                f"{self.display_name} API failed after retries",
                provider=self.provider.value,
                upstream_status=getattr(last_error, "upstream_status", None),
                details={"attempts": policy.max_attempts},
            ) from None

    async def _send_once(self, call: UpstreamCall) -> dict[str, Any]:
        """Single HTTP exchange with status/body normalization."""
        try:
            response = await self._http_client.post(
                call.url,
                json=call.json,
                headers=call.headers,
                params=call.params or None,
            )
        except httpx.TimeoutException:
            # Exception text can include the request URL, which may carry a key
            logger.warning(f"{__name__}:_send_once - {self.display_name} request timed out")
            raise UpstreamError(
                f"{self.display_name} API request timed out",
                provider=self.provider.value,
            ) from None
        except httpx.HTTPError as exc:
            logger.warning(
                f"{__name__}:_send_once - {self.display_name} transport error: {type(exc).__name__}"
            )
            raise UpstreamError(
                f"{self.display_name} API request failed",
                provider=self.provider.value,
                details={"error_type": type(exc).__name__},
            ) from None

        payload = self._decode(response)
        status = response.status_code

        if status in self.retry_policy.retry_statuses:
            raise UpstreamRateLimitError(
                self._error_message(payload),
                provider=self.provider.value,
                upstream_status=status,
            )
        if status in _AUTH_STATUSES:
            raise UpstreamAuthError(
                self._error_message(payload),
                provider=self.provider.value,
                upstream_status=status,
            )
        if response.is_error or "error" in payload:
            logger.warning(f"{__name__}:_send_once - {self.display_name} returned {status}")
            raise UpstreamError(
                self._error_message(payload),
                provider=self.provider.value,
                upstream_status=status,
            )
        return payload

    def _finalize(self, payload: dict[str, Any]) -> str:
        try:
            text = self.parse_response(payload)
        except (KeyError, IndexError, TypeError, AttributeError):
            text = ""
        source = strip_code_fences(text if isinstance(text, str) else "")
        if not source:
            raise UpstreamError(
                f"{self.display_name} API returned no diagram source",
                provider=self.provider.value,
            )
        return source

    def _error_message(self, payload: dict[str, Any]) -> str:
        """Upstream-provided message, or a generic provider message."""
        error = payload.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str) and error["message"]:
            return error["message"]
        if isinstance(error, str) and error:
            return error
        return f"{self.display_name} API error"

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    def _log_retry(self, retry_state: RetryCallState) -> None:
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        status = None
        if retry_state.outcome is not None:
            status = getattr(retry_state.outcome.exception(), "upstream_status", None)
        logger.warning(
            f"{__name__}:send - {self.display_name} returned {status}, retrying in {delay:.0f}s "
            f"(attempt {retry_state.attempt_number}/{self.retry_policy.max_attempts})"
        )
