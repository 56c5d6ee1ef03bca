"""Expansion of cut-list rows into the piece instances the engine packs."""

from __future__ import annotations

from typing import Sequence

from cutlayout.domain import PieceRequest, PieceType, StockPanel


def expand_piece_types(
    piece_types: Sequence[PieceType],
    kerf: float,
) -> tuple[list[PieceRequest], list[PieceRequest]]:
    """Expand rows with quantity N into N numbered pieces.

    Ids start at 1 and follow row order, then instance order. Every instance
    keeps its row's label.

    Args:
        piece_types: Cut-list rows.
        kerf: Clearance added to both dimensions for packing.

    Returns:
        Tuple of (finished pieces, packed pieces). Both lists share ids;
        packed pieces are ``kerf`` larger on each axis.
    """
    finished: list[PieceRequest] = []
    packed: list[PieceRequest] = []
    piece_id = 1
    for piece_type in piece_types:
        for _ in range(piece_type.quantity):
            finished.append(
                PieceRequest(
                    id=piece_id,
                    label=piece_type.label,
                    length=piece_type.length,
                    width=piece_type.width,
                )
            )
            packed.append(
                PieceRequest(
                    id=piece_id,
                    label=piece_type.label,
                    length=piece_type.length + kerf,
                    width=piece_type.width + kerf,
                )
            )
            piece_id += 1
    return finished, packed


def find_oversized_pieces(
    pieces: Sequence[PieceRequest],
    stock: StockPanel,
) -> list[PieceRequest]:
    """Return the pieces that fit an empty stock panel in neither orientation."""
    return [piece for piece in pieces if not stock.fits(piece.length, piece.width)]
