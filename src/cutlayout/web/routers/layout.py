"""Layout generation endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from cutlayout.application import CutListInput, LayoutOutput, PieceTypeInput
from cutlayout.application.config import ConfigError, config_to_input, load_config_from_dict
from cutlayout.infrastructure import LayoutDiagramRenderer
from cutlayout.infrastructure.exporters import ExporterRegistry
from cutlayout.web.dependencies import GenerateCommandDep
from cutlayout.web.exceptions import LayoutGenerationError, UnsupportedFormatError
from cutlayout.web.schemas.requests import (
    ConfigValidateRequest,
    LayoutRequest,
    SvgLayoutRequest,
)
from cutlayout.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutOutputSchema,
    LayoutSummarySchema,
    PanelSchema,
    PieceSchema,
    PlacedPieceSchema,
    ShelfSchema,
    StockSchema,
    ValidationResultSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])

SVG_MEDIA_TYPE = "image/svg+xml"
GENERATION_ERRORS = {422: {"model": ErrorResponseSchema}}
EXPORT_MEDIA_TYPES = {
    "json": "application/json",
    "svg": SVG_MEDIA_TYPE,
    "text": "text/plain",
}


def _request_to_input(request: LayoutRequest) -> CutListInput:
    return CutListInput(
        stock_length=request.stock.length,
        stock_width=request.stock.width,
        kerf=request.kerf,
        pieces=[
            PieceTypeInput(
                label=piece.label,
                length=piece.length,
                width=piece.width,
                quantity=piece.quantity,
            )
            for piece in request.pieces
        ],
    )


def _generate(command: GenerateCommandDep, request: LayoutRequest) -> LayoutOutput:
    """Run the layout command, raising LayoutGenerationError on failure."""
    output = command.execute(_request_to_input(request))
    if not output.is_valid:
        raise LayoutGenerationError(output.errors)
    return output


def _layout_output_to_schema(output: LayoutOutput) -> LayoutOutputSchema:
    """Convert LayoutOutput to response schema."""
    summary = None
    if output.summary is not None:
        summary = LayoutSummarySchema(
            piece_types=output.summary.piece_type_count,
            total_pieces=output.summary.total_pieces,
            total_panels=output.summary.total_panels,
            finished_area=output.summary.finished_area,
            used_area=output.summary.used_area,
            total_panel_area=output.summary.total_panel_area,
            waste_area=output.summary.waste_area,
            efficiency=output.summary.efficiency,
        )

    panels = [
        PanelSchema(
            index=panel.index,
            used_height=panel.used_height,
            efficiency=panel.efficiency,
            shelves=[
                ShelfSchema(y=shelf.y, height=shelf.height, used_width=shelf.used_width)
                for shelf in panel.shelves
            ],
            pieces=[
                PlacedPieceSchema(
                    id=piece.id,
                    label=piece.label,
                    x=piece.x,
                    y=piece.y,
                    length=piece.length,
                    width=piece.width,
                    rotated=piece.rotated,
                )
                for piece in panel.pieces
            ],
        )
        for panel in output.panels
    ]

    return LayoutOutputSchema(
        is_valid=output.is_valid,
        errors=output.errors,
        stock=(
            StockSchema(length=output.stock.length, width=output.stock.width)
            if output.stock is not None
            else None
        ),
        kerf=output.kerf,
        pieces=[
            PieceSchema(id=p.id, label=p.label, length=p.length, width=p.width)
            for p in output.finished_pieces
        ],
        panels=panels,
        summary=summary,
    )


@router.post("", response_model=LayoutOutputSchema, responses=GENERATION_ERRORS)
async def generate_layout(
    request: LayoutRequest,
    command: GenerateCommandDep,
) -> LayoutOutputSchema:
    """Compute the panel layout for a cut list.

    Args:
        request: Stock size, kerf and cut-list rows.
        command: Injected GenerateCutLayoutCommand.

    Returns:
        Numbered pieces, panels with shelves and placed pieces, and totals.

    Raises:
        LayoutGenerationError: If the cut list is invalid or a piece does not fit.
    """
    output = _generate(command, request)
    return _layout_output_to_schema(output)


@router.post(
    "/svg",
    responses={200: {"content": {SVG_MEDIA_TYPE: {}}}, **GENERATION_ERRORS},
)
async def generate_layout_svg(
    request: SvgLayoutRequest,
    command: GenerateCommandDep,
) -> Response:
    """Compute the layout and return it as a single SVG drawing."""
    output = _generate(command, request)
    renderer = LayoutDiagramRenderer(
        scale=request.scale,
        show_labels=request.show_labels,
        show_dimensions=request.show_dimensions,
    )
    return Response(
        content=renderer.render_combined_svg(output.panels),
        media_type=SVG_MEDIA_TYPE,
    )


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/export/{format_name}",
    responses={400: {"model": ErrorResponseSchema}, **GENERATION_ERRORS},
)
async def export_layout(
    format_name: str,
    request: LayoutRequest,
    command: GenerateCommandDep,
) -> Response:
    """Compute the layout and return it in a registered export format.

    Raises:
        UnsupportedFormatError: If no exporter is registered for the format.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = _generate(command, request)
    exporter = ExporterRegistry.get(format_name)()
    return Response(
        content=exporter.export_string(output),
        media_type=EXPORT_MEDIA_TYPES.get(format_name, "application/octet-stream"),
    )


@router.post("/validate", response_model=ValidationResultSchema)
async def validate_config(
    request: ConfigValidateRequest,
    command: GenerateCommandDep,
) -> ValidationResultSchema:
    """Validate a configuration and check every piece fits the stock.

    Returns:
        is_valid with a list of ``{"path", "message"}`` errors.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        errors = [
            {"path": detail.get("path", ""), "message": detail.get("message", e.message)}
            for detail in e.details
        ] or [{"path": "", "message": e.message}]
        return ValidationResultSchema(is_valid=False, errors=errors)

    errors = [
        {"path": "pieces", "message": message}
        for message in command.check(config_to_input(config))
    ]
    return ValidationResultSchema(is_valid=not errors, errors=errors)
