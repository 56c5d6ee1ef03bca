"""Parsing of ``--piece`` command line values.

A piece is written ``LENGTHxWIDTH[xQTY][:LABEL]``, for example
``800x400``, ``800x400x2`` or ``800x400x2:Side panel``.
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from cutlayout.application.config import PieceConfigSchema

_DIMENSIONS = re.compile(
    r"^\s*(?P<length>\d+(?:\.\d+)?)\s*[xX]\s*(?P<width>\d+(?:\.\d+)?)"
    r"(?:\s*[xX]\s*(?P<quantity>\d+))?\s*$"
)


class PieceSpecError(ValueError):
    """Raised when a ``--piece`` value cannot be parsed."""


def parse_piece(value: str) -> PieceConfigSchema:
    """Parse one ``LENGTHxWIDTH[xQTY][:LABEL]`` value.

    Raises:
        PieceSpecError: If the value is malformed or a number is out of range.
    """
    dimensions, _, label = value.partition(":")
    match = _DIMENSIONS.match(dimensions)
    if match is None:
        raise PieceSpecError(
            f"Invalid piece '{value}'. Expected LENGTHxWIDTH[xQTY][:LABEL], e.g. 800x400x2:Side"
        )

    length = float(match.group("length"))
    width = float(match.group("width"))
    quantity = int(match.group("quantity") or 1)
    if length <= 0 or width <= 0:
        raise PieceSpecError(f"Invalid piece '{value}'. Dimensions must be positive")
    if quantity < 1:
        raise PieceSpecError(f"Invalid piece '{value}'. Quantity must be at least 1")

    try:
        return PieceConfigSchema(
            label=label.strip(),
            length=length,
            width=width,
            quantity=quantity,
        )
    except ValidationError as e:
        reasons = "; ".join(err["msg"] for err in e.errors())
        raise PieceSpecError(f"Invalid piece '{value}'. {reasons}") from e


def parse_pieces(values: list[str] | None) -> list[PieceConfigSchema]:
    """Parse every ``--piece`` value in order."""
    return [parse_piece(value) for value in values or []]
