"""Application commands (use cases) for cut layout generation."""

from __future__ import annotations

import logging
from typing import Sequence

from cutlayout.application.cut_list import expand_piece_types, find_oversized_pieces
from cutlayout.application.dtos import CutListInput, LayoutOutput
from cutlayout.domain import PieceRequest, StockPanel, summarize_layout
from cutlayout.infrastructure.nesting import NestingEngine

logger = logging.getLogger(__name__)


def _oversized_errors(
    finished: Sequence[PieceRequest],
    packed: Sequence[PieceRequest],
    stock: StockPanel,
    kerf: float,
) -> list[str]:
    """Describe every piece that cannot fit the stock, by finished size."""
    finished_by_id = {piece.id: piece for piece in finished}
    errors: list[str] = []
    for piece in find_oversized_pieces(packed, stock):
        original = finished_by_id[piece.id]
        errors.append(
            f'Piece "{piece.label}" (#{piece.id}, {original.length:g} x '
            f"{original.width:g} mm) does not fit the {stock.length:g} x "
            f"{stock.width:g} mm stock panel with a {kerf:g} mm kerf"
        )
    return errors


class GenerateCutLayoutCommand:
    """Command to compute the panel layout for a cut list."""

    def __init__(self, engine: NestingEngine | None = None) -> None:
        self.engine = engine or NestingEngine()

    def check(self, cut_list: CutListInput) -> list[str]:
        """Validate a cut list without running the nesting engine.

        Returns:
            Input errors followed by oversized-piece errors; empty when the
            cut list can be laid out.
        """
        errors = cut_list.validate()
        if errors:
            return errors
        stock = cut_list.to_stock_panel()
        finished, packed = expand_piece_types(cut_list.to_piece_types(), cut_list.kerf)
        return _oversized_errors(finished, packed, stock, cut_list.kerf)

    def execute(self, cut_list: CutListInput) -> LayoutOutput:
        """Execute the layout generation command.

        Validates the cut list, expands rows into kerf-inflated pieces,
        checks that every piece fits the stock, runs the nesting engine and
        summarizes the result.

        Args:
            cut_list: Stock size, kerf and cut-list rows.

        Returns:
            LayoutOutput with panels and summary, or with errors.
        """
        errors = cut_list.validate()
        if errors:
            return LayoutOutput(kerf=cut_list.kerf, errors=errors)

        stock = cut_list.to_stock_panel()
        piece_types = cut_list.to_piece_types()
        finished, packed = expand_piece_types(piece_types, cut_list.kerf)

        errors = _oversized_errors(finished, packed, stock, cut_list.kerf)
        if errors:
            return LayoutOutput(
                stock=stock,
                kerf=cut_list.kerf,
                piece_types=piece_types,
                finished_pieces=finished,
                packed_pieces=packed,
                errors=errors,
            )

        result = self.engine.pack(packed, stock.width, stock.length)
        if not result.is_valid:
            return LayoutOutput(
                stock=stock,
                kerf=cut_list.kerf,
                piece_types=piece_types,
                finished_pieces=finished,
                packed_pieces=packed,
                errors=[str(result.error)],
            )

        summary = summarize_layout(result.panels, stock, piece_types, finished)
        logger.info(
            "Cut list of %d pieces needs %d panels (%.2f%% efficiency)",
            summary.total_pieces,
            summary.total_panels,
            summary.efficiency,
        )

        return LayoutOutput(
            stock=stock,
            kerf=cut_list.kerf,
            piece_types=piece_types,
            finished_pieces=finished,
            packed_pieces=packed,
            panels=result.panels,
            summary=summary,
        )
