"""
Exception hierarchy for the Flowchart to Mermaid converter.

Provides layered exception structure for proxy errors. Every exception
carries an error category and the HTTP status it is reported with, so the
API layer can translate any of them into an ``{"error": ...}`` body.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error taxonomy surfaced by the proxy."""

    VALIDATION = "validation"
    UPSTREAM_AUTH = "upstream-auth"
    UPSTREAM_RATE_LIMIT = "upstream-rate-limit"
    UPSTREAM_OTHER = "upstream-other"
    INTERNAL = "internal"


class ConverterException(Exception):
    """Base exception for all converter application errors."""

    category: ErrorCategory = ErrorCategory.INTERNAL
    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message, safe to return to callers
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ConverterException):
    """Raised when caller input is missing or malformed."""

    category = ErrorCategory.VALIDATION
    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnsupportedModelError(ValidationError):
    """Raised when a model id matches no known provider prefix."""

    def __init__(self, model_id: str) -> None:
        super().__init__("Unsupported model selected.", field="model", details={"model": model_id})


class CredentialError(ValidationError):
    """Raised when an API key is missing, disallowed, or has the wrong shape."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        details = {"provider": provider} if provider else None
        super().__init__(message, field="apiKey", details=details)


class UpstreamError(ConverterException):
    """Raised when an upstream provider call fails."""

    category = ErrorCategory.UPSTREAM_OTHER
    status_code = 500

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        upstream_status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Error message (upstream-provided when available)
            provider: Provider name that failed
            upstream_status: HTTP status returned by the provider
            details: Additional context
        """
        details = details or {}
        if provider:
            details["provider"] = provider
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        self.provider = provider
        self.upstream_status = upstream_status
        super().__init__(message, details)


class UpstreamAuthError(UpstreamError):
    """Raised when the provider rejects the credential."""

    category = ErrorCategory.UPSTREAM_AUTH
    status_code = 401


class UpstreamRateLimitError(UpstreamError):
    """Raised on a transient provider status; drives the retry loop only."""

    category = ErrorCategory.UPSTREAM_RATE_LIMIT
    status_code = 500


class RetriesExhaustedError(UpstreamError):
    """Raised when every retry attempt hit a transient status."""

    pass


class RenderError(UpstreamError):
    """Raised when the hosted diagram renderer fails."""

    pass


class ConfigurationError(ConverterException):
    """Raised when a required process-wide setting is missing."""

    category = ErrorCategory.INTERNAL
    status_code = 500


class InternalServerError(ConverterException):
    """Generic wrapper for unexpected failures; never exposes the cause."""

    category = ErrorCategory.INTERNAL
    status_code = 500

    def __init__(self) -> None:
        super().__init__("An unexpected server error occurred.")
