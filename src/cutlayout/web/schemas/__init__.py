"""Pydantic schemas for the REST API."""

from cutlayout.web.schemas.requests import (
    ConfigValidateRequest,
    LayoutRequest,
    SvgLayoutRequest,
)
from cutlayout.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutOutputSchema,
    LayoutSummarySchema,
    PanelSchema,
    PieceSchema,
    PlacedPieceSchema,
    ShelfSchema,
    StockSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "LayoutRequest",
    "SvgLayoutRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutOutputSchema",
    "LayoutSummarySchema",
    "PanelSchema",
    "PieceSchema",
    "PlacedPieceSchema",
    "ShelfSchema",
    "StockSchema",
    "ValidationResultSchema",
]
