"""Application layer - use cases and orchestration."""

from .commands import GenerateCutLayoutCommand
from .cut_list import expand_piece_types, find_oversized_pieces
from .dtos import CutListInput, LayoutOutput, PieceTypeInput

__all__ = [
    "CutListInput",
    "GenerateCutLayoutCommand",
    "LayoutOutput",
    "PieceTypeInput",
    "expand_piece_types",
    "find_oversized_pieces",
]
