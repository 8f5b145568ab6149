"""
Export API endpoints.

Routes:
- POST /live-link - Mermaid Live Editor link for the given code
- POST /export/{fmt} - Download as .mmd, .svg or .png

Dependencies: flowchart_mermaid.application.services.export_service
System role: Diagram export HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from flowchart_mermaid.api.deps import get_export_service
from flowchart_mermaid.application.services import ExportFormat, ExportService
from flowchart_mermaid.core.exceptions import ConverterException, InternalServerError
from flowchart_mermaid.models.common import ErrorResponse
from flowchart_mermaid.models.export import ExportRequest, LiveLinkRequest, LiveLinkResponse
from flowchart_mermaid.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["export"])


@router.post(
    "/live-link",
    response_model=LiveLinkResponse,
    responses={400: {"model": ErrorResponse}},
)
async def live_link(
    request: LiveLinkRequest,
    export_service: ExportService = Depends(get_export_service),
) -> LiveLinkResponse:
    """Build a Mermaid Live Editor link for the given code."""
    try:
        url = export_service.live_editor_url(request.code, request.theme)
    except ConverterException:
        raise
    except Exception as e:
        log_exception_with_context(
            logger,
            f"{__name__}:live_link - Unexpected {type(e).__name__}",
            e,
        )
        raise InternalServerError() from e

    return LiveLinkResponse(url=url)


@router.post(
    "/export/{fmt}",
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def export_diagram(
    fmt: ExportFormat,
    request: ExportRequest,
    export_service: ExportService = Depends(get_export_service),
) -> Response:
    """Download diagram code (.mmd) or a rendered image (.svg, .png).

    Args:
        fmt: Export format (mmd, svg, png)
        request: ExportRequest with code and optional fileName/theme
        export_service: Injected ExportService

    Returns:
        Response: File attachment
    """
    try:
        if fmt is ExportFormat.MMD:
            exported = export_service.export_mmd(request.code, request.file_name)
        else:
            exported = await export_service.render(
                request.code,
                fmt,
                file_name=request.file_name,
                theme=request.theme,
            )
    except ConverterException:
        raise
    except Exception as e:
        log_exception_with_context(
            logger,
            f"{__name__}:export_diagram - Unexpected {type(e).__name__}",
            e,
            export_format=fmt.value,
        )
        raise InternalServerError() from e

    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
