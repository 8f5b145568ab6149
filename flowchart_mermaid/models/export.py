"""
Export schemas.

Dependencies: pydantic
System role: Export and share-link API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class LiveLinkRequest(BaseModel):
    """Request schema for a Mermaid Live Editor link."""

    code: str | None = Field(default=None, description="Mermaid diagram code")
    theme: str | None = Field(default=None, description="Mermaid theme (defaults to server setting)")


class LiveLinkResponse(BaseModel):
    """Response schema for a Mermaid Live Editor link."""

    url: str = Field(description="Mermaid Live Editor URL")


class ExportRequest(BaseModel):
    """Request schema for file exports."""

    model_config = ConfigDict(populate_by_name=True)

    code: str | None = Field(default=None, description="Mermaid diagram code")
    file_name: str | None = Field(
        default=None,
        alias="fileName",
        description="Original upload name; its stem names the download",
    )
    theme: str | None = Field(default=None, description="Mermaid theme for rendered exports")
