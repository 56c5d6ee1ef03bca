"""SVG exporter: all panels stacked in one diagram."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cutlayout.infrastructure.exporters.base import ExporterRegistry
from cutlayout.infrastructure.layout_renderer import LayoutDiagramRenderer

if TYPE_CHECKING:
    from cutlayout.application.dtos import LayoutOutput


@ExporterRegistry.register("svg")
class SvgExporter:
    """Exports the panel layout as a combined SVG diagram.

    Attributes:
        format_name: "svg"
        file_extension: "svg"
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float = 0.25,
        show_labels: bool = True,
        show_dimensions: bool = True,
    ) -> None:
        self.renderer = LayoutDiagramRenderer(
            scale=scale,
            show_labels=show_labels,
            show_dimensions=show_dimensions,
        )

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: LayoutOutput) -> str:
        return self.renderer.render_combined_svg(output.panels)
