"""Shelf-based panel nesting for rectangular pieces.

This module provides the data structures for panel layouts and the greedy
nesting engine that assigns each requested piece to a position on a stock
panel. Pieces are laid out on shelves: horizontal bands running across the
stock width whose height is fixed by the first piece placed on them.

For every piece the engine scores all candidate placements (existing
shelves, new shelves on existing panels, a new panel) in both orientations
and commits the cheapest one. The result is deterministic but not
guaranteed optimal.

Output dataclasses are frozen; the mutable ``_ShelfState``/``_PanelState``
records only live for the duration of one ``pack`` call.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Sequence

from cutlayout.domain.errors import (
    InvalidInputError,
    NestingError,
    UnplaceablePieceError,
)
from cutlayout.domain.value_objects import (
    ORIENTATIONS,
    Orientation,
    PieceRequest,
    StockPanel,
)

logger = logging.getLogger(__name__)

# Added to the cost of opening a panel so it only wins when nothing else fits.
NEW_PANEL_PENALTY = 1e9


@dataclass(frozen=True)
class Shelf:
    """A horizontal band of a panel.

    Attributes:
        y: Offset of the band from the panel's top edge.
        height: Band height, set by the first piece placed on it.
        used_width: Width consumed by the pieces on the band.
    """

    y: float
    height: float
    used_width: float


@dataclass(frozen=True)
class PlacedPiece:
    """A piece placed at a resolved position on a panel.

    Coordinates are panel-local with the origin at the top-left corner, x
    along the stock width and y along the stock length.

    Attributes:
        id: Identifier copied from the piece request.
        label: Label copied from the piece request.
        length: Extent along the stock length, as oriented.
        width: Extent along the stock width, as oriented.
        rotated: True if length and width were swapped to place the piece.
        panel_index: Index of the panel in the returned panel sequence.
        x: Offset from the panel's left edge.
        y: Offset from the panel's top edge.
    """

    id: int
    label: str
    length: float
    width: float
    rotated: bool
    panel_index: int
    x: float
    y: float

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def right_edge(self) -> float:
        """X coordinate of the piece's right edge."""
        return self.x + self.width

    @property
    def bottom_edge(self) -> float:
        """Y coordinate of the piece's bottom edge."""
        return self.y + self.length

    @property
    def area(self) -> float:
        return self.length * self.width

    def overlaps(self, other: PlacedPiece) -> bool:
        """Check whether two placements share any interior area."""
        return (
            self.x < other.right_edge
            and other.x < self.right_edge
            and self.y < other.bottom_edge
            and other.y < self.bottom_edge
        )


@dataclass(frozen=True)
class Panel:
    """Layout of pieces on a single stock panel.

    Attributes:
        index: Zero-based index of this panel in the result.
        stock: Stock panel dimensions.
        shelves: Shelves in creation order.
        used_height: Stock length consumed by the shelves.
        pieces: Placed pieces in placement order.
    """

    index: int
    stock: StockPanel
    shelves: tuple[Shelf, ...]
    used_height: float
    pieces: tuple[PlacedPiece, ...]

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Panel index must be non-negative")

    @property
    def used_area(self) -> float:
        """Area covered by placed pieces in mm²."""
        return sum(piece.area for piece in self.pieces)

    @property
    def waste_area(self) -> float:
        """Stock area not covered by pieces in mm²."""
        return self.stock.area - self.used_area

    @property
    def efficiency(self) -> float:
        """Percentage of the panel covered by pieces."""
        return (self.used_area / self.stock.area) * 100

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

    @property
    def remaining_length(self) -> float:
        """Stock length still available for new shelves."""
        return self.stock.length - self.used_height


@dataclass(frozen=True)
class NestingResult:
    """Outcome of one nesting run: panels on success, an error otherwise.

    Attributes:
        panels: Panels in creation order (empty on failure).
        stock: Stock panel used, or None when the stock size was invalid.
        error: The failure, or None on success.
    """

    panels: tuple[Panel, ...] = ()
    stock: StockPanel | None = None
    error: NestingError | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the nesting run succeeded."""
        return self.error is None

    @property
    def panel_count(self) -> int:
        return len(self.panels)

    @property
    def piece_count(self) -> int:
        return sum(panel.piece_count for panel in self.panels)

    def unwrap(self) -> tuple[Panel, ...]:
        """Return the panels, raising the carried error if the run failed.

        Raises:
            NestingError: InvalidInputError or UnplaceablePieceError.
        """
        if self.error is not None:
            raise self.error
        return self.panels


@dataclass
class _ShelfState:
    """Internal shelf representation for the packing loop."""

    y: float
    height: float
    used_width: float


@dataclass
class _PanelState:
    """Internal state for a panel during packing.

    Attributes:
        shelves: Shelves on this panel, in creation order.
        used_height: Y position for the next new shelf.
        pieces: Pieces placed on this panel, in placement order.
    """

    shelves: list[_ShelfState] = field(default_factory=list)
    used_height: float = 0.0
    pieces: list[PlacedPiece] = field(default_factory=list)


@dataclass(frozen=True)
class ExistingShelfCandidate:
    """Place the piece at the end of an existing shelf."""

    panel_index: int
    shelf_index: int
    orientation: Orientation
    length: float
    width: float
    cost: float


@dataclass(frozen=True)
class NewShelfCandidate:
    """Open a shelf below the last one on an existing panel."""

    panel_index: int
    orientation: Orientation
    length: float
    width: float
    cost: float


@dataclass(frozen=True)
class NewPanelCandidate:
    """Open a fresh panel and start its first shelf."""

    orientation: Orientation
    length: float
    width: float
    cost: float


Candidate = ExistingShelfCandidate | NewShelfCandidate | NewPanelCandidate


def _dimension_problem(value: float) -> str | None:
    """Describe why a dimension is unusable, or return None if it is fine."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return "must be a real number"
    if not math.isfinite(value) or value <= 0:
        return "must be a finite positive number"
    return None


def _cheaper(best: Candidate | None, candidate: Candidate) -> Candidate:
    # Strict comparison: on equal cost the earlier candidate stays.
    if best is None or candidate.cost < best.cost:
        return candidate
    return best


class NestingEngine:
    """Greedy shelf nesting of rectangular pieces onto stock panels.

    Pieces are processed longest side first. Each piece is scored against
    every existing shelf, a new shelf on every existing panel, and a new
    panel, in both orientations; the strictly cheapest candidate wins and
    ties go to the first one scanned. Cost is the leftover width (existing
    shelf) or leftover length (new shelf) after placing, and new panels carry
    ``new_panel_penalty`` on top of their leftover length.

    Attributes:
        new_panel_penalty: Cost added to every new-panel candidate.
    """

    def __init__(self, new_panel_penalty: float = NEW_PANEL_PENALTY) -> None:
        self.new_panel_penalty = new_panel_penalty

    def pack(
        self,
        pieces: Sequence[PieceRequest],
        stock_width: float,
        stock_length: float,
    ) -> NestingResult:
        """Nest pieces onto as few stock panels as the heuristic manages.

        Args:
            pieces: Piece requests with kerf already included.
            stock_width: Stock panel width in mm.
            stock_length: Stock panel length in mm.

        Returns:
            NestingResult with the panels, or with an InvalidInputError or
            UnplaceablePieceError and no panels.
        """
        error = self._validate(pieces, stock_width, stock_length)
        if error is not None:
            logger.warning("Rejected nesting input: %s", error)
            return NestingResult(error=error)

        stock = StockPanel(width=stock_width, length=stock_length)

        for piece in pieces:
            if not stock.fits(piece.length, piece.width):
                error = UnplaceablePieceError(piece, stock_width, stock_length)
                logger.warning("%s", error)
                return NestingResult(stock=stock, error=error)

        ordered = self._sort_by_longest_side(pieces)
        logger.debug("Nesting %d pieces onto %sx%s stock", len(ordered), stock_length, stock_width)

        panels: list[_PanelState] = []
        for piece in ordered:
            candidate = self._find_best_candidate(piece, panels, stock)
            if candidate is None:
                # Unreachable after the fit check above
                error = UnplaceablePieceError(piece, stock_width, stock_length)
                logger.warning("%s", error)
                return NestingResult(stock=stock, error=error)
            self._apply_candidate(piece, candidate, panels)

        layouts = tuple(
            self._freeze_panel(index, state, stock) for index, state in enumerate(panels)
        )

        logger.info("Nested %d pieces onto %d panels", len(ordered), len(layouts))
        return NestingResult(panels=layouts, stock=stock)

    def _validate(
        self,
        pieces: Sequence[PieceRequest],
        stock_width: float,
        stock_length: float,
    ) -> InvalidInputError | None:
        """Check stock dimensions and piece requests.

        Returns:
            The first problem found, or None if the input is usable.
        """
        for name, value in (("width", stock_width), ("length", stock_length)):
            problem = _dimension_problem(value)
            if problem is not None:
                return InvalidInputError(f"Stock {name} {problem} (got {value!r})")

        seen_ids: set[int] = set()
        for piece in pieces:
            if isinstance(piece.id, bool) or not isinstance(piece.id, int) or piece.id < 1:
                return InvalidInputError(f"Piece id must be a positive integer (got {piece.id!r})")
            if piece.id in seen_ids:
                return InvalidInputError(f"Duplicate piece id {piece.id}")
            seen_ids.add(piece.id)
            if not piece.label or not piece.label.strip():
                return InvalidInputError(f"Piece #{piece.id} has an empty label")
            for name, value in (("length", piece.length), ("width", piece.width)):
                problem = _dimension_problem(value)
                if problem is not None:
                    return InvalidInputError(
                        f"Piece '{piece.label}' (#{piece.id}) {name} {problem} (got {value!r})"
                    )
        return None

    def _sort_by_longest_side(self, pieces: Sequence[PieceRequest]) -> list[PieceRequest]:
        """Sort pieces by their larger dimension, largest first.

        The sort is stable, so pieces with equal longest sides keep their
        input order.
        """
        return sorted(pieces, key=lambda p: p.longest_side, reverse=True)

    def _find_best_candidate(
        self,
        piece: PieceRequest,
        panels: list[_PanelState],
        stock: StockPanel,
    ) -> Candidate | None:
        """Scan all placement options for a piece and keep the cheapest.

        Scan order: for each panel, its shelves (both orientations each),
        then a new shelf on that panel (both orientations); after all panels,
        a new panel (both orientations).
        """
        best: Candidate | None = None

        for panel_index, panel in enumerate(panels):
            for shelf_index, shelf in enumerate(panel.shelves):
                for orientation in ORIENTATIONS:
                    length, width = orientation.apply(piece.length, piece.width)
                    if length <= shelf.height and shelf.used_width + width <= stock.width:
                        best = _cheaper(
                            best,
                            ExistingShelfCandidate(
                                panel_index=panel_index,
                                shelf_index=shelf_index,
                                orientation=orientation,
                                length=length,
                                width=width,
                                cost=stock.width - (shelf.used_width + width),
                            ),
                        )

            remaining = stock.length - panel.used_height
            if remaining > 0:
                for orientation in ORIENTATIONS:
                    length, width = orientation.apply(piece.length, piece.width)
                    if length <= remaining and width <= stock.width:
                        best = _cheaper(
                            best,
                            NewShelfCandidate(
                                panel_index=panel_index,
                                orientation=orientation,
                                length=length,
                                width=width,
                                cost=remaining - length,
                            ),
                        )

        for orientation in ORIENTATIONS:
            length, width = orientation.apply(piece.length, piece.width)
            if length <= stock.length and width <= stock.width:
                best = _cheaper(
                    best,
                    NewPanelCandidate(
                        orientation=orientation,
                        length=length,
                        width=width,
                        cost=(stock.length - length) + self.new_panel_penalty,
                    ),
                )

        return best

    def _apply_candidate(
        self,
        piece: PieceRequest,
        candidate: Candidate,
        panels: list[_PanelState],
    ) -> PlacedPiece:
        """Commit a candidate placement and update the layout state.

        Args:
            piece: The piece being placed.
            candidate: The winning candidate for the piece.
            panels: Panel states, appended to when a new panel is opened.

        Returns:
            The placed piece.
        """
        if isinstance(candidate, NewPanelCandidate):
            panels.append(_PanelState())
            panel_index = len(panels) - 1
            logger.debug("Opened panel %d for piece '%s'", panel_index, piece.label)
        else:
            panel_index = candidate.panel_index
        panel = panels[panel_index]

        if isinstance(candidate, ExistingShelfCandidate):
            shelf = panel.shelves[candidate.shelf_index]
            x = shelf.used_width
            shelf.used_width += candidate.width
        else:
            shelf = _ShelfState(
                y=panel.used_height,
                height=candidate.length,
                used_width=candidate.width,
            )
            panel.shelves.append(shelf)
            panel.used_height = shelf.y + shelf.height
            x = 0.0

        placement = PlacedPiece(
            id=piece.id,
            label=piece.label,
            length=candidate.length,
            width=candidate.width,
            rotated=candidate.orientation.rotated,
            panel_index=panel_index,
            x=x,
            y=shelf.y,
        )
        panel.pieces.append(placement)

        if placement.rotated:
            logger.debug(
                "Piece '%s' (#%d) placed rotated at (%s, %s) on panel %d, "
                "placed dimensions: %sx%s",
                piece.label,
                piece.id,
                placement.x,
                placement.y,
                panel_index,
                placement.length,
                placement.width,
            )

        return placement

    def _freeze_panel(self, index: int, state: _PanelState, stock: StockPanel) -> Panel:
        """Convert a panel state into an immutable Panel."""
        return Panel(
            index=index,
            stock=stock,
            shelves=tuple(
                Shelf(y=shelf.y, height=shelf.height, used_width=shelf.used_width)
                for shelf in state.shelves
            ),
            used_height=state.used_height,
            pieces=tuple(state.pieces),
        )


def pack_pieces(
    pieces: Sequence[PieceRequest],
    stock_width: float,
    stock_length: float,
) -> NestingResult:
    """Nest pieces with a default NestingEngine.

    See ``NestingEngine.pack``.
    """
    return NestingEngine().pack(pieces, stock_width, stock_length)
