"""
Draft state data models for column definition assembly.

This module defines the column kinds, the rolling aggregation functions and
the mutable draft that a ColumnBuilder edits between add-column calls.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Optional, Union

from ..errors import UnknownColumnKindError

Number = Union[int, float]


class ColumnKind(str, Enum):
    """Column definition categories; exactly one is active at a time."""
    LAG = "lag"
    PERCENT_CHANGE = "percent_change"
    FORMULA = "formula"
    ROLLING = "rolling"
    INDICATOR = "indicator"

    @property
    def tag(self) -> str:
        """One-letter key used by the backend to dispatch interpretation."""
        return _KIND_TAGS[self]

    @classmethod
    def parse(cls, value: Union["ColumnKind", str]) -> "ColumnKind":
        """Coerce a kind or its string value, rejecting unknown names."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownColumnKindError(
                f"Unknown column kind: {value!r}",
                kind=str(value),
                context={"allowed": [k.value for k in cls]}
            ) from None


_KIND_TAGS = {
    ColumnKind.LAG: "L",
    ColumnKind.PERCENT_CHANGE: "P",
    ColumnKind.FORMULA: "F",
    ColumnKind.ROLLING: "R",
    ColumnKind.INDICATOR: "I",
}


class RollingFunction(str, Enum):
    """Aggregations available for rolling windows."""
    COUNT = "count"
    SUM = "sum"
    MEAN = "mean"
    MAX = "max"
    MIN = "min"
    VAR = "var"
    STD = "std"
    ZSCORE = "zscore"


AUTO_COLUMN_NAME = "auto"


@dataclass
class DraftState:
    """The in-progress column definition, mirrored from the form fields."""

    kind: ColumnKind = ColumnKind.LAG
    column_name: Optional[str] = None
    on_column: str = "close"
    period: Optional[Number] = 1                     # lag offset / pct period / window
    lag: Optional[Union[Number, bool]] = None        # percent_change and rolling only
    func: str = RollingFunction.MEAN.value
    formula: Optional[str] = None

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def clear(self) -> None:
        """Clear the per-column inputs after an add attempt."""
        self.formula = None
        self.column_name = None

    def snapshot(self) -> dict[str, Any]:
        """Plain dict view of the draft for logging."""
        return {
            "kind": self.kind.value,
            "column_name": self.column_name,
            "on_column": self.on_column,
            "period": self.period,
            "lag": self.lag,
            "func": self.func,
            "formula": self.formula,
        }


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating a draft for one kind."""

    kind: ColumnKind
    column: Optional[dict[str, Any]] = None
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.column is not None

    @classmethod
    def success(cls, kind: ColumnKind, column: dict[str, Any]) -> "EvaluationResult":
        """Create an accepted result carrying the configuration object."""
        return cls(kind=kind, column=column)

    @classmethod
    def rejected(cls, kind: ColumnKind, reason: str) -> "EvaluationResult":
        """Create a rejected result with the reason."""
        return cls(kind=kind, reason=reason)
