"""Configuration merging utilities for CLI override support.

Precedence is: CLI args > config values > defaults. Only arguments that are
not None override the configuration.
"""

from typing import Any

from cutlayout.application.config.loader import load_config_from_dict
from cutlayout.application.config.schema import (
    CutLayoutConfiguration,
    PieceConfigSchema,
)


def merge_config_with_cli(
    config: CutLayoutConfiguration,
    *,
    stock_length: float | None = None,
    stock_width: float | None = None,
    kerf: float | None = None,
    pieces: list[PieceConfigSchema] | None = None,
    output_format: str | None = None,
    output_file: str | None = None,
) -> CutLayoutConfiguration:
    """Merge CLI arguments with configuration values.

    Pieces given on the command line are appended to the configured rows.

    Args:
        config: The base configuration
        stock_length: Override for stock.length
        stock_width: Override for stock.width
        kerf: Override for kerf
        pieces: Extra cut-list rows
        output_format: Override for output.format
        output_file: Override for output.output_file

    Returns:
        A new, re-validated CutLayoutConfiguration

    Raises:
        ConfigError: If an override makes the configuration invalid.

    Example:
        >>> merged = merge_config_with_cli(config, kerf=4.0)
        >>> merged.kerf
        4.0
    """
    data: dict[str, Any] = config.model_dump()

    if stock_length is not None:
        data["stock"]["length"] = stock_length
    if stock_width is not None:
        data["stock"]["width"] = stock_width
    if kerf is not None:
        data["kerf"] = kerf
    if pieces:
        data["pieces"].extend(piece.model_dump() for piece in pieces)
    if output_format is not None:
        data["output"]["format"] = output_format
    if output_file is not None:
        data["output"]["output_file"] = output_file

    return load_config_from_dict(data)
