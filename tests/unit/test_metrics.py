"""Unit tests for layout metrics."""

import pytest

from cutlayout.domain import (
    LayoutSummary,
    PieceRequest,
    PieceType,
    StockPanel,
    mm2_to_m2,
    round2,
    summarize_layout,
)
from cutlayout.infrastructure.nesting import NestingEngine


class TestRound2:
    """Tests for round2."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1.234, 1.23),
            (1.235001, 1.24),
            (0.125, 0.13),
            (60.0, 60.0),
            (-1.005, -1.0),
        ],
    )
    def test_rounds_to_two_decimals(self, value: float, expected: float) -> None:
        assert round2(value) == pytest.approx(expected)

    def test_half_rounds_up(self) -> None:
        """Halves go up, unlike Python's banker's rounding."""
        assert round(0.125, 2) == 0.12
        assert round2(0.125) == 0.13


class TestMm2ToM2:
    def test_conversion(self) -> None:
        assert mm2_to_m2(2_000_000) == 2.0
        assert mm2_to_m2(0) == 0


class TestSummarizeLayout:
    """Tests for summarize_layout."""

    def test_ten_pieces_on_three_panels(self) -> None:
        stock = StockPanel(width=1000, length=2000)
        pieces = [PieceRequest(id=i, label="Door", length=900, width=400) for i in range(1, 11)]
        panels = NestingEngine().pack(pieces, stock.width, stock.length).panels

        summary = summarize_layout(
            panels,
            stock,
            piece_types=[PieceType(label="Door", length=900, width=400, quantity=10)],
            finished_pieces=pieces,
        )

        assert summary.total_panels == 3
        assert summary.used_area == 3_600_000
        assert summary.panel_area == 2_000_000
        assert summary.total_panel_area == 6_000_000
        assert summary.waste_area == 2_400_000
        assert summary.efficiency == pytest.approx(60.0)
        assert summary.waste_percentage == pytest.approx(40.0)
        assert summary.piece_type_count == 1
        assert summary.total_pieces == 10
        assert summary.finished_area == 3_600_000

    def test_no_panels_gives_zero_efficiency(self) -> None:
        summary = summarize_layout((), StockPanel(width=1000, length=2000))

        assert summary.total_panels == 0
        assert summary.total_panel_area == 0
        assert summary.efficiency == 0.0
        assert summary.waste_percentage == 0.0

    def test_efficiency_never_exceeds_hundred(self) -> None:
        stock = StockPanel(width=1000, length=2000)
        pieces = [PieceRequest(id=1, label="Full", length=2000, width=1000)]
        panels = NestingEngine().pack(pieces, stock.width, stock.length).panels

        summary = summarize_layout(panels, stock)

        assert summary.efficiency == pytest.approx(100.0)
        assert summary.waste_area == 0


class TestLayoutSummary:
    def test_defaults(self) -> None:
        summary = LayoutSummary(
            total_panels=1,
            used_area=10.0,
            panel_area=100.0,
            total_panel_area=100.0,
            waste_area=90.0,
            efficiency=10.0,
        )

        assert summary.total_pieces == 0
        assert summary.finished_area == 0.0
        assert summary.waste_percentage == pytest.approx(90.0)
