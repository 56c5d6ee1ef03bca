"""Configuration schema and loading for cut layout configuration files.

Public API:
    - CutLayoutConfiguration: Root configuration model
    - StockConfigSchema, PieceConfigSchema: Stock size and cut-list rows
    - OutputConfigSchema, SvgOutputConfigSchema: Output options
    - load_config, load_config_from_dict: Load and validate a configuration
    - ConfigError: Exception for configuration errors
    - config_to_input: Convert a configuration to a CutListInput
    - merge_config_with_cli: Apply command line overrides

Example:
    >>> from pathlib import Path
    >>> from cutlayout.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"Stock: {config.stock.length}x{config.stock.width}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cutlayout.application.config.adapter import config_to_input
from cutlayout.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cutlayout.application.config.merger import merge_config_with_cli
from cutlayout.application.config.schema import (
    SUPPORTED_VERSIONS,
    CutLayoutConfiguration,
    OutputConfigSchema,
    PieceConfigSchema,
    StockConfigSchema,
    SvgOutputConfigSchema,
)

__all__ = [
    "ConfigError",
    "CutLayoutConfiguration",
    "OutputConfigSchema",
    "PieceConfigSchema",
    "SUPPORTED_VERSIONS",
    "StockConfigSchema",
    "SvgOutputConfigSchema",
    "config_to_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
