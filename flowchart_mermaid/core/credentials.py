"""
Credential resolution and the advisory key-shape check.

The shape check compares string prefixes only: OpenAI keys start with "sk-",
Gemini keys do not. It catches a key pasted into the wrong model family and
is NOT authentication; the upstream API remains the sole authority on
whether a key is valid.

Dependencies: flowchart_mermaid.core.exceptions
System role: API key selection for the conversion proxy
"""

from flowchart_mermaid.core.exceptions import CredentialError
from flowchart_mermaid.core.providers.base import Provider

OPENAI_KEY_PREFIX = "sk-"


def check_credential_shape(provider: Provider, credential: str) -> None:
    """
    Reject a key whose prefix belongs to the other provider family.

    Raises:
        CredentialError: On a prefix mismatch
    """
    if provider is Provider.OPENAI and not credential.startswith(OPENAI_KEY_PREFIX):
        raise CredentialError(
            "Invalid API key for GPT models (expected 'sk-').",
            provider=provider.value,
        )
    if provider is Provider.GEMINI and credential.startswith(OPENAI_KEY_PREFIX):
        raise CredentialError(
            "Invalid API key for Gemini models (API key should not start with 'sk-').",
            provider=provider.value,
        )


def resolve_credential(
    provider: Provider,
    caller_credential: str | None,
    default_credential: str | None,
    allow_caller_credentials: bool = True,
    enforce_shape: bool = True,
) -> str:
    """
    Pick the API key for a request.

    A caller-supplied key takes precedence over the process-wide default.
    The shape check applies to caller keys only.

    Args:
        provider: Selected provider
        caller_credential: Key from the request body, if any
        default_credential: Process-wide key for the provider, if configured
        allow_caller_credentials: Whether caller keys are accepted at all
        enforce_shape: Whether to run the advisory prefix check

    Returns:
        str: Key to use

    Raises:
        CredentialError: Missing, disallowed, or mismatched key
    """
    caller_credential = (caller_credential or "").strip() or None
    if caller_credential:
        if not allow_caller_credentials:
            raise CredentialError(
                "Caller-supplied API keys are not accepted by this server.",
                provider=provider.value,
            )
        if enforce_shape:
            check_credential_shape(provider, caller_credential)
        return caller_credential
    if default_credential:
        return default_credential
    raise CredentialError("Missing API key.", provider=provider.value)
