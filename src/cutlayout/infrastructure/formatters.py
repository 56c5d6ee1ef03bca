"""Plain-text formatters for cut lists and panel layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from cutlayout.domain import LayoutSummary, PieceRequest, mm2_to_m2, round2
from cutlayout.infrastructure.nesting import Panel

if TYPE_CHECKING:
    from cutlayout.application.dtos import LayoutOutput


class CutListFormatter:
    """Formats the numbered piece list at finished dimensions."""

    def format(self, pieces: Sequence[PieceRequest]) -> str:
        """Format pieces as a table, one line per piece."""
        if not pieces:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 60,
            f"{'No.':<6} {'Piece':<30} {'Finished size (mm)'}",
            "-" * 60,
        ]
        for piece in pieces:
            lines.append(
                f"{piece.id:<6} {piece.label:<30} {piece.length:.0f} x {piece.width:.0f}"
            )
        lines.append("-" * 60)
        lines.append("Dimensions are finished sizes, without kerf.")
        return "\n".join(lines)


class PanelReportFormatter:
    """Formats the per-panel piece assignment and the layout totals."""

    def format(self, panels: Sequence[Panel], summary: LayoutSummary) -> str:
        if not panels:
            return "PANEL LAYOUT\n" + "=" * 60 + "\nNo pieces to place."

        lines = [
            "PANEL LAYOUT",
            "=" * 60,
            f"{'Panel':<7} Pieces",
            "-" * 60,
        ]
        for panel in panels:
            lines.append(f"{panel.index + 1:<7} {self.describe_panel(panel)}")
        lines.append("-" * 60)
        lines.append(f"Panels needed: {summary.total_panels}")
        lines.append(f"Used area (with kerf): {round2(mm2_to_m2(summary.used_area))} m²")
        lines.append(f"Total panel area: {round2(mm2_to_m2(summary.total_panel_area))} m²")
        lines.append(f"Waste area: {round2(mm2_to_m2(summary.waste_area))} m²")
        lines.append(f"Efficiency: {round2(summary.efficiency)} %")
        return "\n".join(lines)

    @staticmethod
    def describe_panel(panel: Panel) -> str:
        """List a panel's pieces as ``#id (label : LxW)`` joined by `` | ``."""
        if not panel.pieces:
            return "-"
        return " | ".join(
            f"#{piece.id} ({piece.label} : {piece.length:.0f}x{piece.width:.0f})"
            for piece in panel.pieces
        )


class SummaryFormatter:
    """Formats the request summary: rows, piece count, stock and kerf."""

    def format(self, output: LayoutOutput) -> str:
        lines = ["SUMMARY", "=" * 60]
        lines.append(f"Piece types: {len(output.piece_types)}")
        lines.append(f"Total pieces: {len(output.finished_pieces)}")
        if output.stock is not None:
            lines.append(
                f"Stock panel: {output.stock.length:g} x {output.stock.width:g} mm"
            )
        lines.append(
            f"Kerf: {output.kerf:g} mm (added to length and width for nesting)"
        )
        finished_area = sum(p.length * p.width for p in output.finished_pieces)
        lines.append(f"Total piece area (without kerf): {round2(mm2_to_m2(finished_area))} m²")
        if output.stock is not None:
            lines.append(f"Area of one panel: {round2(mm2_to_m2(output.stock.area))} m²")
        return "\n".join(lines)


class LayoutReportFormatter:
    """Full text report: summary, cut list and panel layout."""

    def __init__(self) -> None:
        self.summary_formatter = SummaryFormatter()
        self.cut_list_formatter = CutListFormatter()
        self.panel_formatter = PanelReportFormatter()

    def format(self, output: LayoutOutput) -> str:
        if not output.is_valid:
            return "Errors:\n" + "\n".join(f"  - {error}" for error in output.errors)

        sections = [
            self.summary_formatter.format(output),
            self.cut_list_formatter.format(output.finished_pieces),
        ]
        if output.summary is not None:
            sections.append(self.panel_formatter.format(output.panels, output.summary))
        return "\n\n".join(sections)
