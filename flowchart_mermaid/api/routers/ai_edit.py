"""
AI edit API endpoint.

Routes: POST /ai-edit

Dependencies: flowchart_mermaid.application.services.edit_service
System role: Natural-language diagram editing HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from flowchart_mermaid.api.deps import get_edit_service
from flowchart_mermaid.application.services import EditService
from flowchart_mermaid.core.exceptions import ConverterException, InternalServerError
from flowchart_mermaid.models.common import ErrorResponse
from flowchart_mermaid.models.conversion import EditRequest, EditResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])


@router.post(
    "/ai-edit",
    response_model=EditResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ai_edit(
    request: EditRequest,
    edit_service: EditService = Depends(get_edit_service),
) -> EditResponse:
    """Modify existing Mermaid code from a natural-language instruction."""
    try:
        result = await edit_service.edit(request.prompt, request.current_code)
    except ConverterException:
        raise
    except Exception as e:
        logger.exception(f"{__name__}:ai_edit - Unexpected {type(e).__name__}")
        raise InternalServerError() from e

    return EditResponse(updated_code=result.diagram_source)
