"""Typer CLI for cut layout generation."""

from pathlib import Path
from typing import Annotated, Any

import typer

from cutlayout.application import GenerateCutLayoutCommand, LayoutOutput
from cutlayout.application.config import (
    ConfigError,
    CutLayoutConfiguration,
    config_to_input,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from cutlayout.cli.commands import validate_command
from cutlayout.cli.commands.validate import display_config_error
from cutlayout.cli.piece_parser import PieceSpecError, parse_pieces
from cutlayout.infrastructure import (
    LayoutDiagramRenderer,
    LayoutJsonExporter,
    LayoutReportFormatter,
    PanelReportFormatter,
)
from cutlayout.infrastructure.exporters import ExporterRegistry, ExportManager


def _handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: LayoutOutput,
) -> None:
    """Handle multi-format export via --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        result: The layout output to export.
    """
    if output_formats_str.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid or not formats:
        typer.echo(f"Unknown formats: {', '.join(invalid) or output_formats_str}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        written = manager.export_all(formats, result, project_name=project_name)
    except OSError as e:
        typer.echo(f"Error: Export failed: {e}", err=True)
        raise typer.Exit(code=1)

    for format_name, path in written.items():
        typer.echo(f"{format_name.upper()} exported to: {path}")


def _build_configuration(
    config_file: Path | None,
    stock_length: float | None,
    stock_width: float | None,
    kerf: float | None,
    piece_values: list[str] | None,
    output_format: str | None,
    output_file: Path | None,
) -> CutLayoutConfiguration:
    """Load the configuration file (if any) and apply command line values.

    Raises:
        ConfigError: If the resulting configuration is invalid.
        PieceSpecError: If a --piece value cannot be parsed.
    """
    pieces = parse_pieces(piece_values)
    output_path = str(output_file) if output_file is not None else None

    if config_file is not None:
        config = load_config(config_file)
        return merge_config_with_cli(
            config,
            stock_length=stock_length,
            stock_width=stock_width,
            kerf=kerf,
            pieces=pieces,
            output_format=output_format,
            output_file=output_path,
        )

    data: dict[str, Any] = {
        "schema_version": "1.0",
        "stock": {},
        "pieces": [piece.model_dump() for piece in pieces],
        "output": {},
    }
    if stock_length is not None:
        data["stock"]["length"] = stock_length
    if stock_width is not None:
        data["stock"]["width"] = stock_width
    if kerf is not None:
        data["kerf"] = kerf
    if output_format is not None:
        data["output"]["format"] = output_format
    if output_path is not None:
        data["output"]["output_file"] = output_path
    return load_config_from_dict(data)


def _render(config: CutLayoutConfiguration, result: LayoutOutput) -> str:
    """Render the layout in the configured output format."""
    output_format = config.output.format
    svg_options = config.output.svg

    if output_format == "json":
        return LayoutJsonExporter().export_string(result)
    if output_format == "svg":
        renderer = LayoutDiagramRenderer(
            scale=svg_options.scale,
            show_labels=svg_options.show_labels,
            show_dimensions=svg_options.show_dimensions,
        )
        return renderer.render_combined_svg(result.panels)
    if output_format == "ascii":
        renderer = LayoutDiagramRenderer()
        sections = [renderer.render_all_ascii(result.panels)]
        if result.summary is not None:
            sections.append(PanelReportFormatter().format(result.panels, result.summary))
        return "\n\n".join(sections)
    return LayoutReportFormatter().format(result)


app = typer.Typer(
    name="cutlayout",
    help="Lay out rectangular pieces on stock panels for cutting.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def layout(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    stock_length: Annotated[
        float | None,
        typer.Option("--stock-length", "-L", help="Stock panel length in mm"),
    ] = None,
    stock_width: Annotated[
        float | None,
        typer.Option("--stock-width", "-W", help="Stock panel width in mm"),
    ] = None,
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Saw kerf in mm, added to both piece dimensions"),
    ] = None,
    pieces: Annotated[
        list[str] | None,
        typer.Option(
            "--piece",
            "-p",
            help="Piece as LENGTHxWIDTH[xQTY][:LABEL]; repeat for several rows",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, ascii, svg, json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to this file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: json,svg,text (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            help="Output directory for multi-format export",
        ),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option(
            "--project-name",
            help="Project name for output file naming",
        ),
    ] = "cutlayout",
) -> None:
    """Compute the panel layout for a cut list.

    Pieces come from a configuration file, from --piece options, or both;
    command line values take precedence over the file.

    Example:
        cutlayout layout -L 2440 -W 1220 -k 3 -p 800x400x2:Side -p 600x300:Shelf
    """
    if config_file is None and not pieces:
        typer.echo("Error: Provide --config or at least one --piece", err=True)
        raise typer.Exit(code=1)

    try:
        config = _build_configuration(
            config_file,
            stock_length,
            stock_width,
            kerf,
            pieces,
            output_format,
            output_file,
        )
    except PieceSpecError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    command = GenerateCutLayoutCommand()
    result = command.execute(config_to_input(config))

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    if output_formats is not None:
        _handle_multi_format_export(output_formats, output_dir, project_name, result)
        return

    content = _render(config, result)
    if config.output.output_file:
        path = Path(config.output.output_file)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: Could not write {path}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"{config.output.format.upper()} exported to: {path}")
    else:
        typer.echo(content)


if __name__ == "__main__":
    app()
