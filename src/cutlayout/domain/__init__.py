"""Domain layer - pieces, stock panels, errors and layout metrics."""

from .errors import InvalidInputError, NestingError, UnplaceablePieceError
from .metrics import LayoutSummary, mm2_to_m2, round2, summarize_layout
from .value_objects import (
    ORIENTATIONS,
    Orientation,
    PieceRequest,
    PieceType,
    StockPanel,
)

__all__ = [
    "InvalidInputError",
    "LayoutSummary",
    "NestingError",
    "ORIENTATIONS",
    "Orientation",
    "PieceRequest",
    "PieceType",
    "StockPanel",
    "UnplaceablePieceError",
    "mm2_to_m2",
    "round2",
    "summarize_layout",
]
