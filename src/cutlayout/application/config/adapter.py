"""Conversion of validated configuration into application DTOs."""

from cutlayout.application.config.schema import CutLayoutConfiguration
from cutlayout.application.dtos import CutListInput, PieceTypeInput


def config_to_input(config: CutLayoutConfiguration) -> CutListInput:
    """Build the command input from a configuration.

    Args:
        config: A validated CutLayoutConfiguration.

    Returns:
        CutListInput carrying the stock size, kerf and cut-list rows.
    """
    return CutListInput(
        stock_length=config.stock.length,
        stock_width=config.stock.width,
        kerf=config.kerf,
        pieces=[
            PieceTypeInput(
                label=piece.label,
                length=piece.length,
                width=piece.width,
                quantity=piece.quantity,
            )
            for piece in config.pieces
        ],
    )
