"""Tests for LayoutDiagramRenderer SVG and ASCII output."""

from __future__ import annotations

import pytest

from cutlayout.domain import PieceRequest
from cutlayout.infrastructure import LayoutDiagramRenderer, NestingEngine, Panel


def layout(*pieces: tuple[str, float, float]) -> tuple[Panel, ...]:
    """Nest labelled pieces on 2000 x 1000 stock."""
    requests = [
        PieceRequest(id=i, label=label, length=length, width=width)
        for i, (label, length, width) in enumerate(pieces, start=1)
    ]
    return NestingEngine().pack(requests, 1000, 2000).unwrap()


@pytest.fixture
def renderer() -> LayoutDiagramRenderer:
    return LayoutDiagramRenderer()


@pytest.fixture
def single_panel() -> Panel:
    return layout(("Side", 800, 400))[0]


# =============================================================================
# SVG Tests
# =============================================================================


class TestRenderSvg:
    """Tests for single-panel SVG rendering."""

    def test_document_size_follows_scale(
        self, renderer: LayoutDiagramRenderer, single_panel: Panel
    ) -> None:
        svg = renderer.render_svg(single_panel)

        assert svg.startswith('<svg width="250.0" height="530.0"')
        assert svg.endswith("</svg>")

    def test_header_reports_usage(
        self, renderer: LayoutDiagramRenderer, single_panel: Panel
    ) -> None:
        svg = renderer.render_svg(single_panel)

        assert "Panel 1 of 1 - 1 piece - 16.0% used" in svg

    def test_piece_number_and_dimensions(
        self, renderer: LayoutDiagramRenderer, single_panel: Panel
    ) -> None:
        svg = renderer.render_svg(single_panel)

        assert ">#1</text>" in svg
        assert "800 x 400" in svg
        assert "(R)" not in svg
        assert "<title>Side</title>" in svg

    def test_waste_areas_shaded(
        self, renderer: LayoutDiagramRenderer, single_panel: Panel
    ) -> None:
        svg = renderer.render_svg(single_panel)

        # Right of the shelf and below it
        assert svg.count(f'fill="{renderer.waste_fill}"') == 2
        assert '<rect x="100.0" y="30.0" width="150.0" height="200.0"' in svg
        assert '<rect x="0" y="230.0" width="250.0" height="300.0"' in svg

    def test_full_panel_has_no_waste(self, renderer: LayoutDiagramRenderer) -> None:
        panel = layout(("Full", 2000, 1000))[0]

        assert f'fill="{renderer.waste_fill}"' not in renderer.render_svg(panel)

    def test_rotated_piece_marked(self, renderer: LayoutDiagramRenderer) -> None:
        panel = layout(("Door", 400, 900))[0]

        assert "900 x 400 (R)" in renderer.render_svg(panel)

    def test_label_is_escaped(self, renderer: LayoutDiagramRenderer) -> None:
        panel = layout(("Top & <bottom>", 800, 400))[0]

        assert "<title>Top &amp; &lt;bottom&gt;</title>" in renderer.render_svg(panel)

    def test_labels_and_dimensions_can_be_hidden(self, single_panel: Panel) -> None:
        renderer = LayoutDiagramRenderer(show_labels=False, show_dimensions=False)

        svg = renderer.render_svg(single_panel)

        assert "#1" not in svg
        assert "800 x 400" not in svg

    def test_tiny_piece_has_no_text(self, renderer: LayoutDiagramRenderer) -> None:
        panel = layout(("Dowel", 10, 10))[0]

        svg = renderer.render_svg(panel)

        assert ">#1</text>" not in svg
        assert "<title>Dowel</title>" in svg

    def test_render_all_svg_one_document_per_panel(
        self, renderer: LayoutDiagramRenderer
    ) -> None:
        panels = layout(*[("Door", 900, 400)] * 10)

        svgs = renderer.render_all_svg(panels)

        assert len(svgs) == 3
        assert "Panel 3 of 3 - 2 pieces" in svgs[2]


class TestRenderCombinedSvg:
    """Tests for the stacked multi-panel SVG."""

    def test_empty_placeholder(self, renderer: LayoutDiagramRenderer) -> None:
        assert "No panels to display" in renderer.render_combined_svg([])

    def test_panels_stacked_vertically(self, renderer: LayoutDiagramRenderer) -> None:
        panels = layout(*[("Door", 900, 400)] * 10)

        svg = renderer.render_combined_svg(panels)

        assert svg.count("<svg") == 1
        assert 'transform="translate(0, 0.0)"' in svg
        assert 'transform="translate(0, 550.0)"' in svg
        assert 'transform="translate(0, 1100.0)"' in svg
        assert 'height="1650.0"' in svg
        for number in range(1, 11):
            assert f">#{number}</text>" in svg


# =============================================================================
# ASCII Tests
# =============================================================================


class TestRenderAscii:
    """Tests for ASCII rendering."""

    def test_header_and_frame(
        self, renderer: LayoutDiagramRenderer, single_panel: Panel
    ) -> None:
        lines = renderer.render_ascii(single_panel).splitlines()

        assert lines[0] == "Panel 1 of 1 - 2000 x 1000 mm - 16.0% used"
        assert lines[1] == "+" + "-" * 78 + "+"
        assert lines[-1] == lines[1]
        assert all(len(line) == 80 for line in lines[1:])

    def test_height_is_capped(
        self, renderer: LayoutDiagramRenderer, single_panel: Panel
    ) -> None:
        lines = renderer.render_ascii(single_panel, max_lines=20).splitlines()

        assert len(lines) == 20 + 3

    def test_piece_number_and_size_drawn(
        self, renderer: LayoutDiagramRenderer, single_panel: Panel
    ) -> None:
        text = renderer.render_ascii(single_panel)

        assert "#1" in text
        assert "800x400" in text

    def test_rotated_suffix(self, renderer: LayoutDiagramRenderer) -> None:
        panel = layout(("Door", 400, 900))[0]

        assert "900x400R" in renderer.render_ascii(panel)

    def test_render_all_ascii(self, renderer: LayoutDiagramRenderer) -> None:
        panels = layout(*[("Door", 900, 400)] * 10)

        text = renderer.render_all_ascii(panels)

        assert "Panel 1 of 3" in text
        assert "Panel 3 of 3" in text

    def test_render_all_ascii_empty(self, renderer: LayoutDiagramRenderer) -> None:
        assert renderer.render_all_ascii([]) == "No panels to display."
