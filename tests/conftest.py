"""Pytest configuration and shared fixtures for cut layout tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cutlayout.application import (
    CutListInput,
    GenerateCutLayoutCommand,
    LayoutOutput,
    PieceTypeInput,
)
from cutlayout.domain import StockPanel
from cutlayout.infrastructure import NestingEngine

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def engine() -> NestingEngine:
    """Create a nesting engine with the default new-panel penalty."""
    return NestingEngine()


@pytest.fixture
def stock() -> StockPanel:
    """Create a 2000 x 1000 mm stock panel."""
    return StockPanel(width=1000, length=2000)


@pytest.fixture
def generate_command() -> GenerateCutLayoutCommand:
    """Create a GenerateCutLayoutCommand with a default engine."""
    return GenerateCutLayoutCommand()


@pytest.fixture
def cabinet_cut_list() -> CutListInput:
    """Create a small cabinet cut list on 2000 x 1000 stock, 3 mm kerf."""
    return CutListInput(
        stock_length=2000,
        stock_width=1000,
        kerf=3,
        pieces=[
            PieceTypeInput(label="Side", length=800, width=400, quantity=2),
            PieceTypeInput(label="Shelf", length=600, width=300, quantity=3),
            PieceTypeInput(label="", length=300, width=200),
        ],
    )


@pytest.fixture
def cabinet_layout(
    generate_command: GenerateCutLayoutCommand,
    cabinet_cut_list: CutListInput,
) -> LayoutOutput:
    """Compute the layout for the cabinet cut list."""
    return generate_command.execute(cabinet_cut_list)


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the sample configuration files."""
    return FIXTURES_PATH
