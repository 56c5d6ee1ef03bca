"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cutlayout.domain import LayoutSummary, PieceRequest, PieceType, StockPanel

if TYPE_CHECKING:
    from cutlayout.infrastructure.nesting import Panel


def default_label(row_number: int) -> str:
    """Label used for a cut-list row left unnamed."""
    return f"Piece {row_number}"


def _is_finite_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


@dataclass
class PieceTypeInput:
    """Input DTO for one cut-list row."""

    label: str
    length: float
    width: float
    quantity: int = 1

    def resolved_label(self, row_number: int) -> str:
        """Return the trimmed label, or the default name for the row."""
        label = (self.label or "").strip()
        return label or default_label(row_number)

    def validate(self, row_number: int) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        dimensions_ok = _is_finite_positive(self.length) and _is_finite_positive(self.width)
        if not dimensions_ok or self.quantity <= 0:
            errors.append(
                f'Row "{self.resolved_label(row_number)}" has invalid dimensions or quantity'
            )
        return errors

    def to_piece_type(self, row_number: int) -> PieceType:
        """Convert to PieceType value object."""
        return PieceType(
            label=self.resolved_label(row_number),
            length=self.length,
            width=self.width,
            quantity=self.quantity,
        )


@dataclass
class CutListInput:
    """Input DTO for a complete layout request.

    Attributes:
        stock_length: Stock panel length in mm.
        stock_width: Stock panel width in mm.
        kerf: Saw kerf added to both dimensions of every piece, in mm.
        pieces: Cut-list rows.
    """

    stock_length: float
    stock_width: float
    kerf: float = 3.0
    pieces: list[PieceTypeInput] = field(default_factory=list)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not _is_finite_positive(self.stock_length):
            errors.append("Stock length must be a finite positive number")
        if not _is_finite_positive(self.stock_width):
            errors.append("Stock width must be a finite positive number")
        if not (math.isfinite(self.kerf) and self.kerf >= 0):
            errors.append("Kerf must be a finite non-negative number")
        if not self.pieces:
            errors.append("Add at least one piece")
        for row_number, piece in enumerate(self.pieces, start=1):
            errors.extend(piece.validate(row_number))
        return errors

    def to_stock_panel(self) -> StockPanel:
        """Convert to StockPanel value object."""
        return StockPanel(width=self.stock_width, length=self.stock_length)

    def to_piece_types(self) -> list[PieceType]:
        """Convert every row to a PieceType value object."""
        return [
            piece.to_piece_type(row_number)
            for row_number, piece in enumerate(self.pieces, start=1)
        ]


@dataclass
class LayoutOutput:
    """Output DTO containing the computed layout.

    Attributes:
        stock: Stock panel dimensions.
        kerf: Kerf clearance applied to the pieces.
        piece_types: Cut-list rows.
        finished_pieces: Individual pieces at finished size, numbered from 1.
        packed_pieces: The same pieces with kerf added, as given to the engine.
        panels: Panels computed by the nesting engine.
        summary: Layout totals.
        errors: List of error messages if generation failed.
    """

    stock: StockPanel | None = None
    kerf: float = 0.0
    piece_types: list[PieceType] = field(default_factory=list)
    finished_pieces: list[PieceRequest] = field(default_factory=list)
    packed_pieces: list[PieceRequest] = field(default_factory=list)
    panels: tuple[Panel, ...] = ()
    summary: LayoutSummary | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was generated successfully."""
        return len(self.errors) == 0
