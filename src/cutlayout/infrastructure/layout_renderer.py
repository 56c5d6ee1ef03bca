"""Panel layout rendering.

This module provides SVG and ASCII rendering of nested panels showing piece
placements, piece numbers, placed dimensions, rotation markers and unused
areas. Drawings use the panel coordinate system as is: origin at the top-left
corner, x along the stock width and y along the stock length.
"""

from __future__ import annotations

from typing import Sequence
from xml.sax.saxutils import escape

from cutlayout.infrastructure.nesting import Panel, PlacedPiece


class LayoutDiagramRenderer:
    """Renders panel layouts as SVG or ASCII diagrams.

    Attributes:
        scale: Pixels per millimetre for SVG rendering.
        piece_fill: Fill color for placed pieces.
        piece_stroke: Stroke color for piece outlines.
        waste_fill: Fill color for unused areas.
        text_color: Color for labels and dimensions.
        show_labels: Whether to print piece numbers.
        show_dimensions: Whether to print placed dimensions.
    """

    HEADER_HEIGHT = 30
    PANEL_SPACING = 20

    def __init__(
        self,
        scale: float = 0.25,
        piece_fill: str = "#E0E0E0",
        piece_stroke: str = "#999999",
        waste_fill: str = "#F5DEB3",
        text_color: str = "#000000",
        show_labels: bool = True,
        show_dimensions: bool = True,
    ) -> None:
        self.scale = scale
        self.piece_fill = piece_fill
        self.piece_stroke = piece_stroke
        self.waste_fill = waste_fill
        self.text_color = text_color
        self.show_labels = show_labels
        self.show_dimensions = show_dimensions

    def render_svg(self, panel: Panel, total_panels: int = 1) -> str:
        """Generate an SVG diagram for a single panel.

        Args:
            panel: Panel with placed pieces.
            total_panels: Total number of panels (for the header).

        Returns:
            SVG document as a string.
        """
        svg_width = panel.stock.width * self.scale
        svg_height = panel.stock.length * self.scale + self.HEADER_HEIGHT

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'viewBox="0 0 {svg_width} {svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" fill="white"/>',
        ]
        parts.extend(self._render_panel_body(panel, total_panels))
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, panels: Sequence[Panel]) -> list[str]:
        """Generate one SVG document per panel."""
        total = len(panels)
        return [self.render_svg(panel, total) for panel in panels]

    def render_combined_svg(self, panels: Sequence[Panel]) -> str:
        """Generate a single SVG with all panels stacked vertically.

        Args:
            panels: Panels in result order.

        Returns:
            SVG document as a string.
        """
        if not panels:
            return (
                '<svg width="160" height="50" xmlns="http://www.w3.org/2000/svg">'
                '<text x="10" y="30">No panels to display</text></svg>'
            )

        svg_width = max(panel.stock.width for panel in panels) * self.scale
        svg_height = sum(self._panel_block_height(panel) for panel in panels)

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'viewBox="0 0 {svg_width} {svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" fill="white"/>',
        ]

        y_offset = 0.0
        for panel in panels:
            parts.append(f'  <g transform="translate(0, {y_offset})">')
            parts.extend(f"  {line}" for line in self._render_panel_body(panel, len(panels)))
            parts.append("  </g>")
            y_offset += self._panel_block_height(panel)

        parts.append("</svg>")
        return "\n".join(parts)

    def _panel_block_height(self, panel: Panel) -> float:
        return panel.stock.length * self.scale + self.HEADER_HEIGHT + self.PANEL_SPACING

    def _render_panel_body(self, panel: Panel, total_panels: int) -> list[str]:
        """Render header, outline, waste areas and pieces for one panel."""
        header_text = (
            f"Panel {panel.index + 1} of {total_panels} - "
            f"{panel.piece_count} piece{'s' if panel.piece_count != 1 else ''} - "
            f"{panel.efficiency:.1f}% used"
        )
        width = panel.stock.width * self.scale
        length = panel.stock.length * self.scale

        parts = [
            f'  <text x="10" y="{self.HEADER_HEIGHT - 10}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{header_text}</text>',
            f'  <rect x="0" y="{self.HEADER_HEIGHT}" width="{width}" height="{length}" '
            f'fill="#FDFDFD" stroke="#777777" stroke-width="1"/>',
        ]
        parts.extend(self._render_waste_areas(panel))
        for piece in panel.pieces:
            parts.append(self._render_piece(piece))
        return parts

    def _render_waste_areas(self, panel: Panel) -> list[str]:
        """Shade the unused end of every shelf and the strip below the last one."""
        parts: list[str] = []
        for shelf in panel.shelves:
            leftover = panel.stock.width - shelf.used_width
            if leftover > 0:
                parts.append(
                    f'  <rect x="{shelf.used_width * self.scale}" '
                    f'y="{self.HEADER_HEIGHT + shelf.y * self.scale}" '
                    f'width="{leftover * self.scale}" height="{shelf.height * self.scale}" '
                    f'fill="{self.waste_fill}" stroke="none"/>'
                )
        if panel.remaining_length > 0:
            parts.append(
                f'  <rect x="0" y="{self.HEADER_HEIGHT + panel.used_height * self.scale}" '
                f'width="{panel.stock.width * self.scale}" '
                f'height="{panel.remaining_length * self.scale}" '
                f'fill="{self.waste_fill}" stroke="none"/>'
            )
        return parts

    def _render_piece(self, piece: PlacedPiece) -> str:
        """Render a placed piece as an SVG group with its number and size."""
        x = piece.x * self.scale
        y = self.HEADER_HEIGHT + piece.y * self.scale
        w = piece.width * self.scale
        h = piece.length * self.scale

        rect = (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{self.piece_fill}" stroke="{self.piece_stroke}" stroke-width="0.5">'
            f"<title>{escape(piece.label)}</title></rect>"
        )

        font_size = min(12, min(w, h) / 4)
        if font_size < 5 or not (self.show_labels or self.show_dimensions):
            return f"  {rect}"

        text_x = x + w / 2
        text_y = y + h / 2
        parts = ["  <g>", f"    {rect}"]

        if self.show_labels:
            label_y = text_y - font_size / 2 if self.show_dimensions else text_y
            parts.append(
                f'    <text x="{text_x}" y="{label_y}" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="{font_size}" '
                f'fill="{self.text_color}">#{piece.id}</text>'
            )

        if self.show_dimensions:
            dims = f"{piece.length:g} x {piece.width:g}"
            if piece.rotated:
                dims += " (R)"
            dims_y = text_y + font_size / 2 + 2 if self.show_labels else text_y
            parts.append(
                f'    <text x="{text_x}" y="{dims_y}" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="{font_size * 0.8}" '
                f'fill="{self.text_color}">{dims}</text>'
            )

        parts.append("  </g>")
        return "\n".join(parts)

    def render_ascii(
        self,
        panel: Panel,
        width: int = 80,
        total_panels: int = 1,
        max_lines: int = 60,
    ) -> str:
        """Generate an ASCII diagram for a single panel.

        Args:
            panel: Panel with placed pieces.
            width: Terminal width in characters.
            total_panels: Total number of panels (for the header).
            max_lines: Upper bound on the diagram height in lines.

        Returns:
            Text diagram of the panel.
        """
        grid_width = width - 2
        scale_x = grid_width / panel.stock.width

        # Terminal characters are roughly twice as tall as they are wide
        grid_height = int(grid_width * (panel.stock.length / panel.stock.width) * 0.5)
        grid_height = min(max(grid_height, 10), max_lines)
        scale_y = grid_height / panel.stock.length

        grid = [[" " for _ in range(grid_width)] for _ in range(grid_height)]
        for piece in panel.pieces:
            self._draw_piece_ascii(grid, piece, scale_x, scale_y)

        lines = [
            f"Panel {panel.index + 1} of {total_panels} - "
            f"{panel.stock.length:g} x {panel.stock.width:g} mm - "
            f"{panel.efficiency:.1f}% used",
            "+" + "-" * grid_width + "+",
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * grid_width + "+")
        return "\n".join(lines)

    def _draw_piece_ascii(
        self,
        grid: list[list[str]],
        piece: PlacedPiece,
        scale_x: float,
        scale_y: float,
    ) -> None:
        """Draw one piece outline and its number onto the grid."""
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0
        if not grid_width:
            return

        x1 = max(0, min(int(piece.x * scale_x), grid_width - 1))
        x2 = max(0, min(int(piece.right_edge * scale_x), grid_width - 1))
        y1 = max(0, min(int(piece.y * scale_y), grid_height - 1))
        y2 = max(0, min(int(piece.bottom_edge * scale_y), grid_height - 1))

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        inner = x2 - x1 - 1
        texts = [f"#{piece.id}", f"{piece.length:.0f}x{piece.width:.0f}{'R' if piece.rotated else ''}"]
        for offset, text in enumerate(texts, start=1):
            row = y1 + offset
            if row >= y2 or len(text) > inner:
                break
            for i, char in enumerate(text):
                grid[row][x1 + 1 + i] = char

    def render_all_ascii(self, panels: Sequence[Panel], width: int = 80) -> str:
        """Generate ASCII diagrams for all panels, separated by blank lines."""
        if not panels:
            return "No panels to display."

        total = len(panels)
        return "\n\n".join(self.render_ascii(panel, width, total) for panel in panels)
