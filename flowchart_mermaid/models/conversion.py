"""
Conversion and edit schemas.

Request/response contracts for POST /generate and POST /ai-edit. Request
fields are optional at the schema level so missing values are reported by
the service as validation errors with the documented messages.

Dependencies: pydantic, flowchart_mermaid.core.schemas
System role: Conversion API contracts
"""

from pydantic import BaseModel, ConfigDict, Field

from flowchart_mermaid.core.schemas import ConversionRequest


class GenerateRequest(BaseModel):
    """Request schema for image conversion."""

    model_config = ConfigDict(populate_by_name=True)

    image: str | None = Field(default=None, description="Base64 image or data URL")
    model: str | None = Field(default=None, description="Model id, e.g. gpt-4.1 or gemini-2.5-flash")
    api_key: str | None = Field(
        default=None,
        alias="apiKey",
        description="Caller API key; overrides the server default",
    )
    prompt: str | None = Field(default=None, description="Optional instruction override")

    def to_domain(self) -> ConversionRequest:
        return ConversionRequest(
            image_data=self.image,
            model_id=self.model,
            credential=self.api_key,
            prompt=self.prompt,
        )

    def __repr__(self) -> str:
        return repr(self.to_domain())


class GenerateResponse(BaseModel):
    """Response schema for image conversion."""

    output: str = Field(description="Generated Mermaid diagram code")


class EditRequest(BaseModel):
    """Request schema for AI diagram editing."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: str | None = Field(default=None, description="Natural-language change request")
    current_code: str | None = Field(
        default=None,
        alias="currentCode",
        description="Current Mermaid diagram code",
    )


class EditResponse(BaseModel):
    """Response schema for AI diagram editing."""

    model_config = ConfigDict(populate_by_name=True)

    updated_code: str = Field(alias="updatedCode", description="Updated Mermaid diagram code")
