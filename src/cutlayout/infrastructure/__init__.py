"""Infrastructure layer - nesting engine, renderers, formatters and exporters."""

from .nesting import (
    NEW_PANEL_PENALTY,
    NestingEngine,
    NestingResult,
    Panel,
    PlacedPiece,
    Shelf,
    pack_pieces,
)
from .layout_renderer import LayoutDiagramRenderer
from .formatters import (
    CutListFormatter,
    LayoutReportFormatter,
    PanelReportFormatter,
    SummaryFormatter,
)
from .exporters import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    LayoutJsonExporter,
    SvgExporter,
    TextReportExporter,
)

__all__ = [
    # Nesting
    "NEW_PANEL_PENALTY",
    "NestingEngine",
    "NestingResult",
    "Panel",
    "PlacedPiece",
    "Shelf",
    "pack_pieces",
    # Rendering
    "LayoutDiagramRenderer",
    # Formatters
    "CutListFormatter",
    "LayoutReportFormatter",
    "PanelReportFormatter",
    "SummaryFormatter",
    # Exporters
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "LayoutJsonExporter",
    "SvgExporter",
    "TextReportExporter",
]
