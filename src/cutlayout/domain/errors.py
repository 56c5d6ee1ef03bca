"""Error types reported by the nesting engine.

The engine returns these as values inside a ``NestingResult`` rather than
raising them; ``NestingResult.unwrap()`` raises them for callers that prefer
exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cutlayout.domain.value_objects import PieceRequest


class NestingError(Exception):
    """Base class for nesting failures.

    Attributes:
        message: Human-readable error message.
        error_type: Category of error ("invalid_input", "unplaceable").
    """

    error_type = "nesting"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidInputError(NestingError):
    """Raised for non-positive dimensions, bad ids or labels, or bad stock size."""

    error_type = "invalid_input"


class UnplaceablePieceError(NestingError):
    """Raised when a piece does not fit an empty panel in either orientation.

    Attributes:
        piece: The offending piece request.
        stock_width: Stock panel width in mm.
        stock_length: Stock panel length in mm.
    """

    error_type = "unplaceable"

    def __init__(
        self,
        piece: PieceRequest,
        stock_width: float,
        stock_length: float,
    ) -> None:
        self.piece = piece
        self.stock_width = stock_width
        self.stock_length = stock_length
        super().__init__(
            f"Piece '{piece.label}' (#{piece.id}, {piece.length:g}x{piece.width:g}) "
            f"does not fit a {stock_length:g}x{stock_width:g} stock panel "
            f"in either orientation"
        )
