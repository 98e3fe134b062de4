"""Default configuration parameters for the column builder."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class DraftDefaults:
    """Initial draft values, matching DraftState from state.models."""
    kind: str = "lag"                                # Active kind on start
    column_name: Optional[str] = None                # None -> "auto" except formula
    on_column: str = "close"                         # Source field
    period: Optional[Union[int, float]] = 1          # Offset / period / window
    lag: Optional[Union[int, float, bool]] = None    # Pct change / rolling modifier
    func: str = "mean"                               # Rolling aggregation
    formula: Optional[str] = None


@dataclass(frozen=True)
class OptionLists:
    """Choices offered to the caller for populating selectors."""
    columns: tuple[str, ...] = ("open", "high", "low", "close", "volume")
    functions: tuple[str, ...] = (
        "count", "sum", "mean", "max", "min", "var", "std", "zscore",
    )
    indicators: tuple[str, ...] = ("SMA", "EMA")
    operators: tuple[str, ...] = ("+", "-")


@dataclass(frozen=True)
class BuilderConfig:
    """Complete builder configuration."""
    draft: DraftDefaults
    options: OptionLists


def get_default_config() -> BuilderConfig:
    """Get the default configuration instance."""
    return BuilderConfig(
        draft=DraftDefaults(),
        options=OptionLists(),
    )
