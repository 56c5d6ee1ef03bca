"""Pydantic models for cut layout configuration files.

Example configuration::

    {
      "schema_version": "1.0",
      "stock": {"length": 2440, "width": 1220},
      "kerf": 3,
      "pieces": [
        {"label": "Side", "length": 800, "width": 400, "quantity": 2}
      ],
      "output": {"format": "text"}
    }
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

# Supported schema versions for configuration files
# Version 1.0: Stock size, kerf, piece rows and output options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OutputFormat = Literal["text", "ascii", "svg", "json"]


class StockConfigSchema(BaseModel):
    """Stock panel dimensions.

    Attributes:
        length: Panel length in mm (the direction shelves stack along).
        width: Panel width in mm (the direction pieces line up along a shelf).
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    length: float = Field(default=2440.0, gt=0, description="Stock length in mm")
    width: float = Field(default=1220.0, gt=0, description="Stock width in mm")


class PieceConfigSchema(BaseModel):
    """One cut-list row.

    Attributes:
        label: Piece name. Left blank, it becomes "Piece <row number>".
        length: Finished length in mm.
        width: Finished width in mm.
        quantity: Number of identical pieces.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    label: str = Field(default="", max_length=100)
    length: float = Field(..., gt=0, description="Finished length in mm")
    width: float = Field(..., gt=0, description="Finished width in mm")
    quantity: int = Field(default=1, ge=1, le=1000)


class SvgOutputConfigSchema(BaseModel):
    """SVG diagram options.

    Attributes:
        scale: Pixels per millimetre.
        show_labels: Whether to print piece numbers.
        show_dimensions: Whether to print placed dimensions.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    scale: float = Field(default=0.25, gt=0, description="Pixels per mm")
    show_labels: bool = True
    show_dimensions: bool = True


class OutputConfigSchema(BaseModel):
    """Output format configuration.

    Attributes:
        format: Report format written by the CLI.
        output_file: Path to write the report to (stdout when unset).
        svg: SVG diagram options.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    format: OutputFormat = "text"
    output_file: str | None = None
    svg: SvgOutputConfigSchema = Field(default_factory=SvgOutputConfigSchema)


class CutLayoutConfiguration(BaseModel):
    """Root configuration model for a cut layout.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        stock: Stock panel dimensions
        kerf: Saw kerf in mm, added to both dimensions of every piece
        pieces: Cut-list rows (at least one)
        output: Output format configuration
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    stock: StockConfigSchema = Field(default_factory=StockConfigSchema)
    kerf: float = Field(default=3.0, ge=0, le=20, description="Saw kerf in mm")
    pieces: list[PieceConfigSchema] = Field(..., min_length=1)
    output: OutputConfigSchema = Field(default_factory=OutputConfigSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
