"""
Secret redaction for messages leaving the process.

Upstream error messages are relayed to callers, so any credential that was
used for the call is masked first.

Dependencies: None
System role: Keeps API keys out of responses and logs
"""

REDACTED = "***"


def redact_secrets(text: str, *secrets: str | None) -> str:
    """
    Replace every occurrence of the given secrets in ``text``.

    Args:
        text: Message to sanitize
        *secrets: Values to mask; empty values are skipped

    Returns:
        str: Sanitized message
    """
    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED)
    return text
