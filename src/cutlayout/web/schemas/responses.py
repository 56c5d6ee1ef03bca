"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class StockSchema(BaseModel):
    """Stock panel size."""

    length: float = Field(..., description="Stock length in mm")
    width: float = Field(..., description="Stock width in mm")


class PieceSchema(BaseModel):
    """Numbered piece at finished size."""

    id: int = Field(..., description="Piece number, starting at 1")
    label: str = Field(..., description="Label of the cut-list row")
    length: float = Field(..., description="Finished length in mm")
    width: float = Field(..., description="Finished width in mm")


class PlacedPieceSchema(BaseModel):
    """Piece placed on a panel, at packed (kerf-inflated) size."""

    id: int
    label: str
    x: float = Field(..., description="Offset across the stock width in mm")
    y: float = Field(..., description="Offset along the stock length in mm")
    length: float = Field(..., description="Placed extent along the stock length")
    width: float = Field(..., description="Placed extent across the stock width")
    rotated: bool = Field(..., description="Whether the piece was turned 90 degrees")


class ShelfSchema(BaseModel):
    """Horizontal strip of a panel."""

    y: float
    height: float
    used_width: float


class PanelSchema(BaseModel):
    """One stock panel of the layout."""

    index: int = Field(..., description="Zero-based panel index")
    used_height: float = Field(..., description="Length consumed by shelves in mm")
    efficiency: float = Field(..., description="Share of the panel covered, in %")
    shelves: list[ShelfSchema] = Field(default_factory=list)
    pieces: list[PlacedPieceSchema] = Field(default_factory=list)


class LayoutSummarySchema(BaseModel):
    """Totals of a computed layout."""

    piece_types: int = Field(..., description="Number of cut-list rows")
    total_pieces: int = Field(..., description="Number of piece instances")
    total_panels: int = Field(..., description="Number of stock panels used")
    finished_area: float = Field(..., description="Area of pieces without kerf in mm²")
    used_area: float = Field(..., description="Area of placed pieces with kerf in mm²")
    total_panel_area: float = Field(..., description="Area of all panels used in mm²")
    waste_area: float = Field(..., description="Unused panel area in mm²")
    efficiency: float = Field(..., description="Used area over panel area, in %")


class LayoutOutputSchema(BaseModel):
    """Response for layout generation."""

    is_valid: bool = Field(..., description="Whether generation was successful")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    stock: StockSchema | None = Field(default=None, description="Stock panel size")
    kerf: float = Field(default=0.0, description="Saw kerf in mm")
    pieces: list[PieceSchema] = Field(
        default_factory=list, description="Numbered pieces at finished size"
    )
    panels: list[PanelSchema] = Field(default_factory=list, description="Panels in order")
    summary: LayoutSummarySchema | None = Field(default=None, description="Layout totals")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )


class ExportFormatsSchema(BaseModel):
    """Available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict[str, Any]] | None = Field(default=None, description="Error details")
