"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cutlayout.application.config import PieceConfigSchema, StockConfigSchema


class LayoutRequest(BaseModel):
    """Request for computing a panel layout.

    Mirrors the stock, kerf and pieces sections of a configuration file.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    stock: StockConfigSchema = Field(
        default_factory=StockConfigSchema, description="Stock panel size in mm"
    )
    kerf: float = Field(default=3.0, ge=0, le=20, description="Saw kerf in mm")
    pieces: list[PieceConfigSchema] = Field(
        ..., min_length=1, description="Cut-list rows"
    )


class SvgLayoutRequest(LayoutRequest):
    """Request for an SVG drawing of the panel layout."""

    scale: float = Field(default=0.25, gt=0, le=10, description="Pixels per mm")
    show_labels: bool = Field(default=True, description="Print piece numbers")
    show_dimensions: bool = Field(default=True, description="Print placed dimensions")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Cut layout configuration JSON")
