"""
Image conversion API endpoint.

Routes: POST /generate

Dependencies: flowchart_mermaid.application.services.conversion_service
System role: Flowchart image to Mermaid HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from flowchart_mermaid.api.deps import get_conversion_service
from flowchart_mermaid.application.services import ConversionService
from flowchart_mermaid.core.exceptions import ConverterException, InternalServerError
from flowchart_mermaid.models.common import ErrorResponse
from flowchart_mermaid.models.conversion import GenerateRequest, GenerateResponse
from flowchart_mermaid.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    request: GenerateRequest,
    conversion_service: ConversionService = Depends(get_conversion_service),
) -> GenerateResponse:
    """Convert a flowchart image into Mermaid code.

    Args:
        request: GenerateRequest with image, model and optional apiKey
        conversion_service: Injected ConversionService

    Returns:
        GenerateResponse: Fence-free Mermaid code

    Raises:
        ValidationError(400): Missing input, unsupported model, bad key
        UpstreamAuthError(401): Provider rejected the key
        UpstreamError(500): Provider failure or retries exhausted
    """
    try:
        result = await conversion_service.convert(request.to_domain())
    except ConverterException:
        raise
    except Exception as e:
        log_exception_with_context(
            logger,
            f"{__name__}:generate - Unexpected {type(e).__name__}",
            e,
            model=request.model,
        )
        raise InternalServerError() from e

    return GenerateResponse(output=result.diagram_source)
