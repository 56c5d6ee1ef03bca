"""Summary statistics for a computed panel layout."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from cutlayout.domain.value_objects import PieceRequest, PieceType, StockPanel

if TYPE_CHECKING:
    from cutlayout.infrastructure.nesting import Panel

MM2_PER_M2 = 1_000_000


def round2(value: float) -> float:
    """Round to two decimals, halves rounding up."""
    return math.floor(value * 100 + 0.5) / 100


def mm2_to_m2(area: float) -> float:
    """Convert square millimetres to square metres."""
    return area / MM2_PER_M2


@dataclass(frozen=True)
class LayoutSummary:
    """Totals for one nesting run.

    Areas are in mm². ``used_area`` is kerf-inclusive because placed pieces
    carry the kerf clearance; ``finished_area`` is the sum of finished piece
    areas without it.

    Attributes:
        total_panels: Number of stock panels needed.
        used_area: Area covered by placed pieces.
        panel_area: Area of a single stock panel.
        total_panel_area: panel_area times total_panels.
        waste_area: total_panel_area minus used_area.
        efficiency: Used area as a percentage of total panel area.
        piece_type_count: Number of cut-list rows.
        total_pieces: Number of individual pieces.
        finished_area: Finished (kerf-free) area of all pieces.
    """

    total_panels: int
    used_area: float
    panel_area: float
    total_panel_area: float
    waste_area: float
    efficiency: float
    piece_type_count: int = 0
    total_pieces: int = 0
    finished_area: float = 0.0

    @property
    def waste_percentage(self) -> float:
        """Waste as a percentage of total panel area (0 with no panels)."""
        if self.total_panel_area == 0:
            return 0.0
        return 100 - self.efficiency


def summarize_layout(
    panels: Sequence[Panel],
    stock: StockPanel,
    piece_types: Sequence[PieceType] = (),
    finished_pieces: Sequence[PieceRequest] = (),
) -> LayoutSummary:
    """Compute the layout totals from a packing result.

    Args:
        panels: Panels returned by the nesting engine.
        stock: Stock panel dimensions used for the run.
        piece_types: Cut-list rows the pieces were expanded from, if any.
        finished_pieces: Piece instances without kerf, if any.

    Returns:
        LayoutSummary for the run.
    """
    used_area = sum(piece.length * piece.width for panel in panels for piece in panel.pieces)
    total_panels = len(panels)
    total_panel_area = stock.area * total_panels
    efficiency = (used_area / total_panel_area) * 100 if total_panel_area > 0 else 0.0

    return LayoutSummary(
        total_panels=total_panels,
        used_area=used_area,
        panel_area=stock.area,
        total_panel_area=total_panel_area,
        waste_area=total_panel_area - used_area,
        efficiency=efficiency,
        piece_type_count=len(piece_types),
        total_pieces=len(finished_pieces),
        finished_area=sum(p.length * p.width for p in finished_pieces),
    )
