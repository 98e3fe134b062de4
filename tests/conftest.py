"""Pytest configuration and shared fixtures."""

import pytest

from colbuilder_app.state.builder import ColumnBuilder
from colbuilder_app.state.models import ColumnKind, DraftState


@pytest.fixture
def builder() -> ColumnBuilder:
    """Column builder seeded with the default configuration."""
    return ColumnBuilder()


@pytest.fixture
def lag_draft() -> DraftState:
    """Lag draft with no column name."""
    return DraftState(kind=ColumnKind.LAG, period=5, on_column="close")


@pytest.fixture
def rolling_draft() -> DraftState:
    """Rolling std over a volume window with a lag modifier."""
    return DraftState(
        kind=ColumnKind.ROLLING,
        period=10,
        func="std",
        lag=2,
        on_column="volume",
    )


@pytest.fixture
def formula_draft() -> DraftState:
    """Named formula draft."""
    return DraftState(
        kind=ColumnKind.FORMULA,
        column_name="ratio",
        formula="close/open",
    )


@pytest.fixture
def config_dir(tmp_path):
    """Empty config directory; tests write builder.yaml into it as needed."""
    return tmp_path
