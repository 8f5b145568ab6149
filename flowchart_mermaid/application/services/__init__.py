"""Service orchestrators."""

from .conversion_service import ConversionService
from .edit_service import EditService
from .export_service import ExportFormat, ExportService

__all__ = [
    "ConversionService",
    "EditService",
    "ExportFormat",
    "ExportService",
]
