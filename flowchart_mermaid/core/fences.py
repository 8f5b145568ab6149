"""
Markdown code-fence handling for model output.

Models often wrap diagram source in triple-backtick fences, optionally tagged
with a language name. strip_code_fences() removes that markup so the text can
be handed to the renderer as-is.

Dependencies: re (stdlib)
System role: Output normalization for every provider
"""

import re

_FENCED_BLOCK_RE = re.compile(
    r"```[ \t]*[\w+-]*[ \t]*\r?\n(.*?)(?:\r?\n)?[ \t]*```",
    re.DOTALL,
)
_LEADING_FENCE_RE = re.compile(r"^```(?:[ \t]*[\w+-]*[ \t]*(?:\r?\n|$))?")
_TRAILING_FENCE_RE = re.compile(r"(?:^|\r?\n)[ \t]*```[ \t]*$")


def strip_code_fences(text: str | None) -> str:
    """
    Remove surrounding code-fence markup and trim whitespace.

    If the text contains a complete fenced block, its body is returned and any
    chatter around it is dropped. Otherwise unmatched opening or closing
    fences at either end are removed. Already clean text is only trimmed, so
    the function is idempotent.

    Args:
        text: Raw model output

    Returns:
        str: Diagram source without fences
    """
    if not text:
        return ""

    match = _FENCED_BLOCK_RE.search(text)
    if match:
        return match.group(1).strip()

    stripped = text.strip()
    stripped = _LEADING_FENCE_RE.sub("", stripped, count=1)
    stripped = _TRAILING_FENCE_RE.sub("", stripped, count=1)
    return stripped.strip()


def add_code_fences(source: str, language: str = "mermaid") -> str:
    """Wrap diagram source in a fenced block tagged with ``language``."""
    return f"```{language}\n{source}\n```"
