"""
Per-kind draft evaluators.

Each evaluator turns a DraftState into a tagged configuration object, a
single-key dict whose key is the kind's one-letter tag, or rejects it.
Field checks raise ValidationRejected; the rejection is absorbed at the
evaluator boundary so callers only ever see a value or None.

Output field names and tags are the backend contract:

    {"L": {"period", "col_name", "on"}}
    {"P": {"on", "period", "col_name", "lag"?}}
    {"R": {"on", "window", "col_name", "function", "lag"?}}
    {"F": {"formula", "col_name"}}
"""

from typing import Any, Callable, Optional, Union

from ..errors import ValidationRejected
from ..logging.config import get_builder_logger
from .models import AUTO_COLUMN_NAME, ColumnKind, DraftState, EvaluationResult

logger = get_builder_logger(__name__)

ColumnConfig = dict[str, dict[str, Any]]


def _require(draft: DraftState, field: str, kind: ColumnKind) -> Any:
    value = getattr(draft, field)
    if value is None:
        raise ValidationRejected(
            f"{field} is required for {kind.value} columns",
            field=field,
            value=value,
            kind=kind.value
        )
    return value


def _reject_zero(draft: DraftState, field: str, kind: ColumnKind) -> None:
    value = getattr(draft, field)
    if value is not None and value == 0:
        raise ValidationRejected(
            f"{field} must not be zero for {kind.value} columns",
            field=field,
            value=value,
            kind=kind.value
        )


def _column_name(draft: DraftState) -> str:
    if draft.column_name is None:
        return AUTO_COLUMN_NAME
    return draft.column_name


def _check_windowed(draft: DraftState, kind: ColumnKind) -> None:
    """Shared rules for percent change and rolling windows."""
    _require(draft, "period", kind)
    _reject_zero(draft, "period", kind)
    _reject_zero(draft, "lag", kind)


def _build_lag(draft: DraftState) -> ColumnConfig:
    kind = ColumnKind.LAG
    period = _require(draft, "period", kind)
    return {
        kind.tag: {
            "period": period,
            "col_name": _column_name(draft),
            "on": draft.on_column,
        }
    }


def _build_percent_change(draft: DraftState) -> ColumnConfig:
    kind = ColumnKind.PERCENT_CHANGE
    _check_windowed(draft, kind)
    record = {
        "on": draft.on_column,
        "period": draft.period,
        "col_name": _column_name(draft),
    }
    # Truthiness decides inclusion, so negative lags are passed through
    if draft.lag:
        record["lag"] = draft.lag
    return {kind.tag: record}


def _build_rolling(draft: DraftState) -> ColumnConfig:
    kind = ColumnKind.ROLLING
    _check_windowed(draft, kind)
    record = {
        "on": draft.on_column,
        "window": draft.period,
        "col_name": _column_name(draft),
        "function": draft.func,
    }
    if draft.lag:
        record["lag"] = draft.lag
    return {kind.tag: record}


def _build_formula(draft: DraftState) -> ColumnConfig:
    kind = ColumnKind.FORMULA
    column_name = _require(draft, "column_name", kind)
    formula = _require(draft, "formula", kind)
    return {
        kind.tag: {
            "formula": formula,
            "col_name": column_name,
        }
    }


def _build_indicator(draft: DraftState) -> ColumnConfig:
    raise ValidationRejected(
        "indicator columns are not supported yet",
        kind=ColumnKind.INDICATOR.value
    )


BUILDERS: dict[ColumnKind, Callable[[DraftState], ColumnConfig]] = {
    ColumnKind.LAG: _build_lag,
    ColumnKind.PERCENT_CHANGE: _build_percent_change,
    ColumnKind.FORMULA: _build_formula,
    ColumnKind.ROLLING: _build_rolling,
    ColumnKind.INDICATOR: _build_indicator,
}


def evaluate_draft(
    draft: DraftState,
    kind: Optional[Union[ColumnKind, str]] = None
) -> EvaluationResult:
    """
    Evaluate the draft for a kind (the draft's own kind by default).

    Args:
        draft: Draft column definition
        kind: Kind to evaluate the draft as

    Returns:
        EvaluationResult holding either the configuration object or the
        rejection reason
    """
    kind = ColumnKind.parse(draft.kind if kind is None else kind)

    try:
        column = BUILDERS[kind](draft)
    except ValidationRejected as e:
        logger.debug(
            "Draft rejected",
            kind=kind.value,
            field=e.field,
            value=e.value,
            reason=str(e),
            draft=draft.snapshot()
        )
        return EvaluationResult.rejected(kind, str(e))

    return EvaluationResult.success(kind, column)


def evaluate_lag(draft: DraftState) -> Optional[ColumnConfig]:
    """Evaluate the draft as a lag column."""
    return evaluate_draft(draft, ColumnKind.LAG).column


def evaluate_percent_change(draft: DraftState) -> Optional[ColumnConfig]:
    """Evaluate the draft as a percent change column."""
    return evaluate_draft(draft, ColumnKind.PERCENT_CHANGE).column


def evaluate_rolling(draft: DraftState) -> Optional[ColumnConfig]:
    """Evaluate the draft as a rolling window column."""
    return evaluate_draft(draft, ColumnKind.ROLLING).column


def evaluate_formula(draft: DraftState) -> Optional[ColumnConfig]:
    """Evaluate the draft as a formula column; the name is never defaulted."""
    return evaluate_draft(draft, ColumnKind.FORMULA).column


def evaluate_indicator(draft: DraftState) -> Optional[ColumnConfig]:
    """Indicator columns have no output shape; always None."""
    return evaluate_draft(draft, ColumnKind.INDICATOR).column
