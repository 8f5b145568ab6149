"""
Exception handlers.

Translate converter exceptions and request-body validation failures into the
``{"error": ...}`` JSON contract.

Dependencies: fastapi, flowchart_mermaid.core.exceptions
System role: Error-to-HTTP mapping
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flowchart_mermaid.core.exceptions import ConverterException
from flowchart_mermaid.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def add_exception_handlers(app: FastAPI) -> None:
    """
    Adds exception handlers to the FastAPI application.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(ConverterException)
    async def converter_exception_handler(request: Request, exc: ConverterException) -> JSONResponse:
        """
        Handles converter exceptions.

        Returns:
            JSON response with the exception's status and safe message
        """
        logger.info(
            f"{__name__}:converter_exception_handler - {request.url.path} "
            f"{exc.status_code} category={exc.category.value}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Handles malformed request bodies.

        Returns:
            400 JSON response; field values are not echoed back
        """
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="Invalid request body.").model_dump(),
        )
