"""Plain-text report exporter."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cutlayout.infrastructure.exporters.base import ExporterRegistry
from cutlayout.infrastructure.formatters import LayoutReportFormatter

if TYPE_CHECKING:
    from cutlayout.application.dtos import LayoutOutput


@ExporterRegistry.register("text")
class TextReportExporter:
    """Exports the summary, cut list and panel assignment as text."""

    format_name: ClassVar[str] = "text"
    file_extension: ClassVar[str] = "txt"

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: LayoutOutput) -> str:
        return LayoutReportFormatter().format(output)
