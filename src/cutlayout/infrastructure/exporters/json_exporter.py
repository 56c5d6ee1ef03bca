"""JSON exporter for computed layouts.

The document carries a schema version, the stock and kerf, the layout
totals, every panel with its shelves and placed pieces, and the finished
piece list.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from cutlayout.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from cutlayout.application.dtos import LayoutOutput
    from cutlayout.infrastructure.nesting import Panel

SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class LayoutJsonExporter:
    """Exports a layout output as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: LayoutOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent, ensure_ascii=False)

    def to_dict(self, output: LayoutOutput) -> dict[str, Any]:
        """Build the JSON-serializable document."""
        data: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "stock": (
                {"length": output.stock.length, "width": output.stock.width}
                if output.stock is not None
                else None
            ),
            "kerf": output.kerf,
            "is_valid": output.is_valid,
            "errors": list(output.errors),
            "pieces": [
                {
                    "id": piece.id,
                    "label": piece.label,
                    "length": piece.length,
                    "width": piece.width,
                }
                for piece in output.finished_pieces
            ],
            "panels": [self._panel_to_dict(panel) for panel in output.panels],
            "summary": None,
        }

        if output.summary is not None:
            summary = output.summary
            data["summary"] = {
                "piece_types": summary.piece_type_count,
                "total_pieces": summary.total_pieces,
                "total_panels": summary.total_panels,
                "finished_area": summary.finished_area,
                "used_area": summary.used_area,
                "panel_area": summary.panel_area,
                "total_panel_area": summary.total_panel_area,
                "waste_area": summary.waste_area,
                "efficiency": summary.efficiency,
            }
        return data

    def _panel_to_dict(self, panel: Panel) -> dict[str, Any]:
        return {
            "index": panel.index,
            "used_height": panel.used_height,
            "efficiency": panel.efficiency,
            "shelves": [
                {"y": shelf.y, "height": shelf.height, "used_width": shelf.used_width}
                for shelf in panel.shelves
            ],
            "pieces": [
                {
                    "id": piece.id,
                    "label": piece.label,
                    "x": piece.x,
                    "y": piece.y,
                    "length": piece.length,
                    "width": piece.width,
                    "rotated": piece.rotated,
                }
                for piece in panel.pieces
            ],
        }
