"""
Image payload normalization.

Browsers hand over either a bare base64 string or a full data URL
(``data:image/png;base64,...``). Providers need the MIME type and the bare
base64 data separately.

Dependencies: re (stdlib)
System role: Input normalization for the conversion proxy
"""

import re
from dataclasses import dataclass

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[\w-]+=[\w.-]+)*;base64,(?P<data>.*)$", re.DOTALL)


@dataclass(frozen=True)
class ImagePayload:
    """Base64 image data plus its MIME type."""

    mime_type: str
    data: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


def parse_image_payload(image: str, default_mime_type: str = "image/jpeg") -> ImagePayload:
    """
    Split a base64 string or data URL into MIME type and data.

    Args:
        image: Raw base64 string or data URL
        default_mime_type: MIME type used when none is embedded

    Returns:
        ImagePayload: Normalized payload
    """
    image = image.strip()
    match = _DATA_URL_RE.match(image)
    if match:
        return ImagePayload(
            mime_type=match.group("mime") or default_mime_type,
            data=match.group("data").strip(),
        )
    return ImagePayload(mime_type=default_mime_type, data=image)
