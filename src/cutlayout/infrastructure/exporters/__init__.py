"""Exporter framework for computed layouts.

Registered exporters:
- json: Layout document with stock, summary, panels, shelves and pieces
- svg: Combined SVG diagram of all panels
- text: Plain-text summary, cut list and panel assignment

Usage:
    from cutlayout.infrastructure.exporters import ExporterRegistry, ExportManager

    formats = ExporterRegistry.available_formats()
    svg = ExporterRegistry.get("svg")().export_string(layout_output)

    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["json", "svg"], layout_output, project_name="kitchen")
"""

from cutlayout.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from cutlayout.infrastructure.exporters.json_exporter import LayoutJsonExporter
from cutlayout.infrastructure.exporters.svg import SvgExporter
from cutlayout.infrastructure.exporters.text import TextReportExporter

__all__ = [
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "LayoutJsonExporter",
    "SvgExporter",
    "TextReportExporter",
]
