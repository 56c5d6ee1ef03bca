"""Tests for the plain-text formatters."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from cutlayout.application import CutListInput, GenerateCutLayoutCommand, LayoutOutput, PieceTypeInput
from cutlayout.infrastructure import (
    CutListFormatter,
    LayoutReportFormatter,
    PanelReportFormatter,
    SummaryFormatter,
)

SRC_PATH = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture
def door_layout() -> LayoutOutput:
    """Ten 900 x 400 doors on 2000 x 1000 stock without kerf."""
    return GenerateCutLayoutCommand().execute(
        CutListInput(
            stock_length=2000,
            stock_width=1000,
            kerf=0,
            pieces=[PieceTypeInput(label="Door", length=900, width=400, quantity=10)],
        )
    )


class TestCutListFormatter:
    def test_lists_every_piece(self, cabinet_layout: LayoutOutput) -> None:
        text = CutListFormatter().format(cabinet_layout.finished_pieces)

        assert text.startswith("CUT LIST")
        assert "Side" in text
        assert "800 x 400" in text
        assert "Piece 3" in text
        assert "300 x 200" in text
        assert "803" not in text

    def test_empty(self) -> None:
        assert CutListFormatter().format([]) == "No pieces in cut list."


class TestPanelReportFormatter:
    def test_describe_panel(self, door_layout: LayoutOutput) -> None:
        description = PanelReportFormatter.describe_panel(door_layout.panels[2])

        assert description == "#9 (Door : 900x400) | #10 (Door : 900x400)"

    def test_totals(self, door_layout: LayoutOutput) -> None:
        assert door_layout.summary is not None

        text = PanelReportFormatter().format(door_layout.panels, door_layout.summary)

        assert "Panels needed: 3" in text
        assert "Used area (with kerf): 3.6 m²" in text
        assert "Total panel area: 6.0 m²" in text
        assert "Waste area: 2.4 m²" in text
        assert "Efficiency: 60.0 %" in text

    def test_one_line_per_panel(self, door_layout: LayoutOutput) -> None:
        assert door_layout.summary is not None

        text = PanelReportFormatter().format(door_layout.panels, door_layout.summary)

        lines = [line for line in text.splitlines() if line.split(" ", 1)[0] in {"1", "2", "3"}]
        assert len(lines) == 3
        assert lines[0].startswith("1 ")
        assert "#1 (Door : 900x400)" in lines[0]

    def test_no_panels(self, door_layout: LayoutOutput) -> None:
        assert door_layout.summary is not None

        assert "No pieces to place." in PanelReportFormatter().format((), door_layout.summary)


class TestSummaryFormatter:
    def test_summary(self, cabinet_layout: LayoutOutput) -> None:
        text = SummaryFormatter().format(cabinet_layout)

        assert "Piece types: 3" in text
        assert "Total pieces: 6" in text
        assert "Stock panel: 2000 x 1000 mm" in text
        assert "Kerf: 3 mm" in text
        assert "Total piece area (without kerf): 1.24 m²" in text
        assert "Area of one panel: 2.0 m²" in text


class TestLayoutReportFormatter:
    def test_full_report_sections(self, cabinet_layout: LayoutOutput) -> None:
        text = LayoutReportFormatter().format(cabinet_layout)

        assert text.index("SUMMARY") < text.index("CUT LIST") < text.index("PANEL LAYOUT")

    def test_errors_only_for_invalid_output(self) -> None:
        text = LayoutReportFormatter().format(LayoutOutput(errors=["Add at least one piece"]))

        assert text == "Errors:\n  - Add at least one piece"


class TestImportLayering:
    def test_infrastructure_imports_without_application(self) -> None:
        """The formatters only need the application DTOs for type checking."""
        pythonpath = os.pathsep.join([str(SRC_PATH), os.environ.get("PYTHONPATH", "")])
        env = {**os.environ, "PYTHONPATH": pythonpath}
        result = subprocess.run(
            [
                sys.executable,
                "-c",
                "import sys, cutlayout.infrastructure.formatters; "
                "print('cutlayout.application' in sys.modules)",
            ],
            capture_output=True,
            text=True,
            env=env,
        )

        assert result.returncode == 0, f"Import failed: {result.stderr}"
        assert result.stdout.strip() == "False"
