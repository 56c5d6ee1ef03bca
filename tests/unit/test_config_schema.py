"""Unit tests for the configuration schema models."""

import pytest
from pydantic import ValidationError

from cutlayout.application.config import (
    CutLayoutConfiguration,
    OutputConfigSchema,
    PieceConfigSchema,
    StockConfigSchema,
    SvgOutputConfigSchema,
)


class TestStockConfigSchema:
    def test_defaults(self) -> None:
        stock = StockConfigSchema()

        assert stock.length == 2440
        assert stock.width == 1220

    @pytest.mark.parametrize("field", ["length", "width"])
    def test_non_positive_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            StockConfigSchema(**{field: 0})

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError, match="finite number"):
            StockConfigSchema(length=value)


class TestPieceConfigSchema:
    def test_defaults(self) -> None:
        piece = PieceConfigSchema(length=800, width=400)

        assert piece.label == ""
        assert piece.quantity == 1

    @pytest.mark.parametrize(
        "data",
        [
            {"length": 0, "width": 400},
            {"length": 800, "width": -1},
            {"length": 800, "width": 400, "quantity": 0},
            {"length": 800, "width": 400, "quantity": 1001},
            {"length": 800, "width": 400, "label": "x" * 101},
            {"length": 800, "width": 400, "grain": "vertical"},
            {"length": float("inf"), "width": 400},
            {"length": 800, "width": float("nan")},
        ],
    )
    def test_invalid_rows_rejected(self, data: dict) -> None:
        with pytest.raises(ValidationError):
            PieceConfigSchema(**data)


class TestOutputConfigSchema:
    def test_defaults(self) -> None:
        output = OutputConfigSchema()

        assert output.format == "text"
        assert output.output_file is None
        assert output.svg == SvgOutputConfigSchema()
        assert output.svg.scale == 0.25

    @pytest.mark.parametrize("fmt", ["text", "ascii", "svg", "json"])
    def test_supported_formats(self, fmt: str) -> None:
        assert OutputConfigSchema(format=fmt).format == fmt

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfigSchema(format="dxf")


class TestCutLayoutConfiguration:
    """Tests for the root configuration model."""

    def test_minimal(self) -> None:
        config = CutLayoutConfiguration(
            schema_version="1.0",
            pieces=[PieceConfigSchema(length=800, width=400)],
        )

        assert config.kerf == 3.0
        assert config.stock == StockConfigSchema()
        assert config.output.format == "text"

    def test_newer_minor_version_accepted(self) -> None:
        config = CutLayoutConfiguration.model_validate(
            {"schema_version": "1.3", "pieces": [{"length": 1, "width": 1}]}
        )

        assert config.schema_version == "1.3"

    @pytest.mark.parametrize("version", ["2.0", "0.9", "1", "one"])
    def test_unsupported_version_rejected(self, version: str) -> None:
        with pytest.raises(ValidationError):
            CutLayoutConfiguration.model_validate(
                {"schema_version": version, "pieces": [{"length": 1, "width": 1}]}
            )

    def test_pieces_required(self) -> None:
        with pytest.raises(ValidationError):
            CutLayoutConfiguration.model_validate({"schema_version": "1.0", "pieces": []})

    @pytest.mark.parametrize("kerf", [-0.1, 20.5, float("nan")])
    def test_kerf_bounds(self, kerf: float) -> None:
        with pytest.raises(ValidationError):
            CutLayoutConfiguration.model_validate(
                {"schema_version": "1.0", "kerf": kerf, "pieces": [{"length": 1, "width": 1}]}
            )

    def test_zero_kerf_allowed(self) -> None:
        config = CutLayoutConfiguration.model_validate(
            {"schema_version": "1.0", "kerf": 0, "pieces": [{"length": 1, "width": 1}]}
        )

        assert config.kerf == 0
