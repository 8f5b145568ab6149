"""
Proxy request/response value objects.

Transient values that live for a single request. ConversionRequest is built
from the HTTP body at the API boundary and validated by the service.

Dependencies: dataclasses (stdlib)
System role: Domain contracts for the conversion and edit proxies
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionRequest:
    """Image conversion request as received from the caller."""

    image_data: str | None
    model_id: str | None
    credential: str | None = None
    prompt: str | None = None

    def __repr__(self) -> str:
        # Never render the credential or the (large) image payload
        image_size = len(self.image_data) if self.image_data else 0
        return (
            f"ConversionRequest(model_id={self.model_id!r}, image_chars={image_size}, "
            f"credential={'set' if self.credential else 'unset'}, "
            f"prompt={'set' if self.prompt else 'unset'})"
        )


@dataclass(frozen=True)
class ConversionResult:
    """Fence-free diagram source returned by a provider."""

    diagram_source: str
