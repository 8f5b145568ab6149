"""
Model-id to provider resolution.

Dependencies: flowchart_mermaid.core.exceptions
System role: Provider dispatch at the request boundary
"""

import re
from collections.abc import Iterable

from flowchart_mermaid.core.exceptions import UnsupportedModelError
from flowchart_mermaid.core.providers.base import Provider

DEFAULT_OPENAI_PREFIXES = ("gpt-",)
DEFAULT_GEMINI_PREFIXES = ("gemini",)

# Model ids are interpolated into upstream URL paths
_MODEL_ID_RE = re.compile(r"^[A-Za-z0-9][\w.-]*$")


def select_provider(
    model_id: str,
    openai_prefixes: Iterable[str] = DEFAULT_OPENAI_PREFIXES,
    gemini_prefixes: Iterable[str] = DEFAULT_GEMINI_PREFIXES,
) -> Provider:
    """
    Resolve the provider family for a model id by prefix.

    Args:
        model_id: Model identifier sent by the caller (e.g. "gpt-4.1")
        openai_prefixes: Prefixes routed to OpenAI
        gemini_prefixes: Prefixes routed to Gemini

    Returns:
        Provider: Matching provider

    Raises:
        UnsupportedModelError: If no prefix matches or the id has path characters
    """
    if not _MODEL_ID_RE.fullmatch(model_id):
        raise UnsupportedModelError(model_id)
    if model_id.startswith(tuple(openai_prefixes)):
        return Provider.OPENAI
    if model_id.startswith(tuple(gemini_prefixes)):
        return Provider.GEMINI
    raise UnsupportedModelError(model_id)
