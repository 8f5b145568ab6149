"""
Export service for generated diagrams.

Builds Mermaid Live share links, `.mmd` downloads, and SVG/PNG renders
fetched from the hosted mermaid.ink renderer. Syntax checking and layout stay
with the renderer.

Dependencies: httpx, flowchart_mermaid.core.live_editor, flowchart_mermaid.configs
System role: Diagram export orchestration layer
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

import httpx

from flowchart_mermaid.configs import Settings
from flowchart_mermaid.core.exceptions import RenderError, ValidationError
from flowchart_mermaid.core.live_editor import build_live_editor_url, encode_pako_state

logger = logging.getLogger(__name__)

DEFAULT_FILE_STEM = "diagram"
_UNSAFE_STEM_CHARS = re.compile(r"[^\w.-]+")


class ExportFormat(str, Enum):
    """Downloadable export formats."""

    MMD = "mmd"
    SVG = "svg"
    PNG = "png"

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    ExportFormat.MMD: "text/plain; charset=utf-8",
    ExportFormat.SVG: "image/svg+xml",
    ExportFormat.PNG: "image/png",
}


@dataclass(frozen=True)
class ExportedFile:
    """A rendered export ready to be sent as an attachment."""

    filename: str
    media_type: str
    content: bytes


def safe_file_stem(file_name: str | None) -> str:
    """
    Derive a download file stem from a caller-supplied name.

    Drops directories and the extension, replaces unsafe characters.
    Falls back to "diagram".
    """
    if not file_name or not file_name.strip():
        return DEFAULT_FILE_STEM
    name = PurePath(file_name.strip().replace("\\", "/")).name
    stem = name.split(".")[0]
    stem = _UNSAFE_STEM_CHARS.sub("_", stem).strip("_")
    return stem or DEFAULT_FILE_STEM


def _require_code(code: str | None, message: str) -> str:
    if not code or not code.strip():
        raise ValidationError(message, field="code")
    return code


class ExportService:
    """Share links and file exports for diagram source."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient) -> None:
        self.settings = settings
        self.http_client = http_client

    def live_editor_url(self, code: str | None, theme: str | None = None) -> str:
        """Mermaid Live Editor link for the given source."""
        code = _require_code(code, "No Mermaid code to open.")
        renderer = self.settings.renderer
        return build_live_editor_url(code, theme or renderer.theme, renderer.live_url)

    def export_mmd(self, code: str | None, file_name: str | None = None) -> ExportedFile:
        """Raw diagram source as a `.mmd` file."""
        code = _require_code(code, "No Mermaid code to save.")
        return ExportedFile(
            filename=f"{safe_file_stem(file_name)}.mmd",
            media_type=ExportFormat.MMD.media_type,
            content=code.encode("utf-8"),
        )

    def render_url(self, code: str, fmt: ExportFormat, theme: str | None = None) -> str:
        """mermaid.ink URL for an SVG or PNG render."""
        renderer = self.settings.renderer
        state = encode_pako_state(code, theme or renderer.theme)
        base = renderer.ink_url.rstrip("/")
        if fmt is ExportFormat.SVG:
            return f"{base}/svg/{state}"
        if fmt is ExportFormat.PNG:
            return f"{base}/img/{state}?type=png"
        raise ValueError(f"Format {fmt.value} is not rendered")

    async def render(
        self,
        code: str | None,
        fmt: ExportFormat,
        file_name: str | None = None,
        theme: str | None = None,
    ) -> ExportedFile:
        """
        Render diagram source to SVG or PNG via the hosted renderer.

        Raises:
            ValidationError: Blank code, or the renderer rejected the syntax
            RenderError: Renderer unreachable or failed
        """
        code = _require_code(code, "No diagram rendered to download.")
        url = self.render_url(code, fmt, theme)
        logger.info(f"{__name__}:render - START format={fmt.value} chars={len(code)}")

        try:
            response = await self.http_client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"{__name__}:render - transport error: {type(e).__name__}")
            raise RenderError("Diagram rendering failed", provider="mermaid.ink") from e

        if response.status_code == 400:
            raise ValidationError("Invalid Mermaid syntax.", field="code")
        if response.is_error:
            logger.warning(f"{__name__}:render - renderer returned {response.status_code}")
            raise RenderError(
                "Diagram rendering failed",
                provider="mermaid.ink",
                upstream_status=response.status_code,
            )

        return ExportedFile(
            filename=f"{safe_file_stem(file_name)}.{fmt.value}",
            media_type=fmt.media_type,
            content=response.content,
        )
