"""
Mermaid Live Editor state encoding.

mermaid.live and mermaid.ink both accept a ``pako:`` state: the JSON editor
state, zlib-deflated and base64 (URL-safe) encoded.

Dependencies: base64, json, zlib (stdlib)
System role: Share links and renderer URLs for exports
"""

import base64
import json
import zlib

PAKO_PREFIX = "pako:"


def encode_pako_state(code: str, theme: str = "default") -> str:
    """
    Encode diagram source as a ``pako:`` editor state.

    Args:
        code: Mermaid diagram source
        theme: Mermaid theme name

    Returns:
        str: ``pako:<base64>`` token
    """
    state = json.dumps({"code": code, "mermaid": {"theme": theme}})
    deflated = zlib.compress(state.encode("utf-8"), 9)
    return PAKO_PREFIX + base64.urlsafe_b64encode(deflated).decode("ascii")


def decode_pako_state(token: str) -> dict:
    """Inverse of encode_pako_state(); returns the editor state dict."""
    if token.startswith(PAKO_PREFIX):
        token = token[len(PAKO_PREFIX):]
    raw = zlib.decompress(base64.urlsafe_b64decode(token.encode("ascii")))
    return json.loads(raw.decode("utf-8"))


def build_live_editor_url(code: str, theme: str = "default", base_url: str = "https://mermaid.live") -> str:
    """Link that opens ``code`` in the Mermaid Live Editor."""
    return f"{base_url.rstrip('/')}/edit#{encode_pako_state(code, theme)}"
