"""
Upstream provider integrations.

Each provider builds its own request shape, parses its own response and
declares its own retry policy; selection happens once per request by
model-id prefix.
"""

from flowchart_mermaid.core.providers.base import (
    NO_RETRY,
    Provider,
    RetryPolicy,
    UpstreamCall,
    UpstreamProvider,
)
from flowchart_mermaid.core.providers.gemini_provider import GeminiProvider
from flowchart_mermaid.core.providers.openai_provider import OpenAIProvider
from flowchart_mermaid.core.providers.selector import select_provider

__all__ = [
    "NO_RETRY",
    "GeminiProvider",
    "OpenAIProvider",
    "Provider",
    "RetryPolicy",
    "UpstreamCall",
    "UpstreamProvider",
    "select_provider",
]
