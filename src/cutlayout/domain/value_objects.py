"""Value objects for pieces, orientations and stock panels.

All dimensions are in millimetres. Stock panels use a top-left origin with
the x axis along the stock width and the y axis along the stock length.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PieceRequest:
    """A single rectangular piece instance handed to the nesting engine.

    Dimensions already include the saw kerf clearance on both axes. The
    engine validates the values itself, so construction never raises.

    Attributes:
        id: Positive identifier, unique within one packing call.
        label: Display name (shared by every instance of a piece type).
        length: Kerf-inclusive length in mm.
        width: Kerf-inclusive width in mm.
    """

    id: int
    label: str
    length: float
    width: float

    @property
    def longest_side(self) -> float:
        """Larger of the two dimensions, used for the packing order."""
        return max(self.length, self.width)

    @property
    def area(self) -> float:
        """Area in square millimetres."""
        return self.length * self.width


class Orientation(str, Enum):
    """How a piece's length/width map onto the stock axes.

    AS_GIVEN keeps the piece length along the stock length. ROTATED turns the
    piece 90 degrees so its width runs along the stock length.
    """

    AS_GIVEN = "as_given"
    ROTATED = "rotated"

    @property
    def rotated(self) -> bool:
        return self is Orientation.ROTATED

    def apply(self, length: float, width: float) -> tuple[float, float]:
        """Return the (length, width) pair as laid out in this orientation."""
        if self is Orientation.ROTATED:
            return width, length
        return length, width


# Evaluation order matters for tie-breaking: unrotated first.
ORIENTATIONS: tuple[Orientation, ...] = (Orientation.AS_GIVEN, Orientation.ROTATED)


@dataclass(frozen=True)
class StockPanel:
    """Dimensions of one raw stock sheet.

    Attributes:
        width: Sheet width in mm (x axis).
        length: Sheet length in mm (y axis).
    """

    width: float
    length: float

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Stock width must be positive")
        if self.length <= 0:
            raise ValueError("Stock length must be positive")

    @property
    def area(self) -> float:
        """Area of one sheet in square millimetres."""
        return self.width * self.length

    def fits(self, length: float, width: float) -> bool:
        """Check whether a piece fits an empty sheet in either orientation."""
        return any(
            oriented[0] <= self.length and oriented[1] <= self.width
            for oriented in (o.apply(length, width) for o in ORIENTATIONS)
        )


@dataclass(frozen=True)
class PieceType:
    """One row of a cut list: a labelled piece needed ``quantity`` times.

    Dimensions are finished sizes, before any kerf clearance is added.
    """

    label: str
    length: float
    width: float
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Piece dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def area(self) -> float:
        """Total finished area for all pieces of this type in mm²."""
        return self.length * self.width * self.quantity
