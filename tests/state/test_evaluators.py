"""Tests for per-kind draft evaluators."""

import pytest

from colbuilder_app.errors import UnknownColumnKindError
from colbuilder_app.state.evaluators import (
    BUILDERS,
    evaluate_draft,
    evaluate_formula,
    evaluate_indicator,
    evaluate_lag,
    evaluate_percent_change,
    evaluate_rolling,
)
from colbuilder_app.state.models import ColumnKind, DraftState


class TestLagEvaluator:
    """Test lag column evaluation."""

    def test_auto_name(self, lag_draft):
        """Test unset name becomes 'auto'."""
        assert evaluate_lag(lag_draft) == {
            "L": {"period": 5, "col_name": "auto", "on": "close"}
        }

    def test_field_order(self, lag_draft):
        """Test record keys follow the backend field order."""
        assert list(evaluate_lag(lag_draft)["L"]) == ["period", "col_name", "on"]

    def test_named(self):
        draft = DraftState(period=2, column_name="prev_open", on_column="open")
        assert evaluate_lag(draft) == {
            "L": {"period": 2, "col_name": "prev_open", "on": "open"}
        }

    def test_missing_period(self):
        """Test lag rejects an unset period."""
        assert evaluate_lag(DraftState(period=None)) is None

    def test_zero_period_allowed(self):
        """Test lag only checks for an unset period, not zero."""
        assert evaluate_lag(DraftState(period=0))["L"]["period"] == 0

    def test_does_not_mutate_draft(self, lag_draft):
        evaluate_lag(lag_draft)
        assert lag_draft.column_name is None


class TestPercentChangeEvaluator:
    """Test percent change column evaluation."""

    def test_basic(self):
        draft = DraftState(kind=ColumnKind.PERCENT_CHANGE, period=3)
        assert evaluate_percent_change(draft) == {
            "P": {"on": "close", "period": 3, "col_name": "auto"}
        }

    def test_lag_included_when_truthy(self):
        draft = DraftState(period=3, lag=2, column_name="pct3")
        result = evaluate_percent_change(draft)

        assert result == {
            "P": {"on": "close", "period": 3, "col_name": "pct3", "lag": 2}
        }
        assert list(result["P"]) == ["on", "period", "col_name", "lag"]

    def test_lag_omitted_when_unset(self):
        result = evaluate_percent_change(DraftState(period=3, lag=None))
        assert "lag" not in result["P"]

    def test_boolean_lag_included(self):
        result = evaluate_percent_change(DraftState(period=3, lag=True))
        assert result["P"]["lag"] is True

    def test_negative_lag_included(self):
        """Test negative lags are passed through untouched."""
        result = evaluate_percent_change(DraftState(period=3, lag=-1))
        assert result["P"]["lag"] == -1

    @pytest.mark.parametrize("period,lag", [
        (None, None),
        (0, None),
        (3, 0),
        (3, False),
        (0.0, 1),
    ])
    def test_rejections(self, period, lag):
        """Test unset period, zero period and zero lag are rejected."""
        assert evaluate_percent_change(DraftState(period=period, lag=lag)) is None


class TestRollingEvaluator:
    """Test rolling window column evaluation."""

    def test_scenario_with_lag(self, rolling_draft):
        """Test rolling std over volume with lag 2."""
        assert evaluate_rolling(rolling_draft) == {
            "R": {
                "on": "volume",
                "window": 10,
                "col_name": "auto",
                "function": "std",
                "lag": 2,
            }
        }

    def test_field_order(self, rolling_draft):
        assert list(evaluate_rolling(rolling_draft)["R"]) == [
            "on", "window", "col_name", "function", "lag"
        ]

    def test_default_function(self):
        result = evaluate_rolling(DraftState(period=20))
        assert result == {
            "R": {"on": "close", "window": 20, "col_name": "auto", "function": "mean"}
        }

    @pytest.mark.parametrize("period,lag", [
        (None, 1),
        (0, 1),
        (10, 0),
    ])
    def test_rejections(self, period, lag):
        assert evaluate_rolling(DraftState(period=period, lag=lag)) is None


class TestFormulaEvaluator:
    """Test formula column evaluation."""

    def test_named_formula(self, formula_draft):
        assert evaluate_formula(formula_draft) == {
            "F": {"formula": "close/open", "col_name": "ratio"}
        }

    def test_missing_name_not_defaulted(self):
        """Test formula never falls back to 'auto'."""
        draft = DraftState(kind=ColumnKind.FORMULA, formula="close/open")
        assert evaluate_formula(draft) is None

    def test_missing_formula(self):
        draft = DraftState(kind=ColumnKind.FORMULA, column_name="ratio")
        assert evaluate_formula(draft) is None

    def test_period_irrelevant(self, formula_draft):
        formula_draft.period = None
        assert evaluate_formula(formula_draft) is not None


class TestIndicatorEvaluator:
    """Test the indicator variant."""

    def test_always_rejected(self):
        draft = DraftState(kind=ColumnKind.INDICATOR, column_name="sma", period=20)
        assert evaluate_indicator(draft) is None

    def test_reason_reported(self):
        result = evaluate_draft(DraftState(kind=ColumnKind.INDICATOR))
        assert result.accepted is False
        assert "indicator" in result.reason


class TestEvaluateDraft:
    """Test dispatch over the kind table."""

    def test_every_kind_has_a_builder(self):
        assert set(BUILDERS) == set(ColumnKind)

    def test_uses_draft_kind_by_default(self, formula_draft):
        result = evaluate_draft(formula_draft)
        assert result.kind == ColumnKind.FORMULA
        assert result.column == {"F": {"formula": "close/open", "col_name": "ratio"}}

    def test_explicit_kind_overrides_draft(self, formula_draft):
        formula_draft.period = 4
        result = evaluate_draft(formula_draft, "lag")
        assert result.column == {"L": {"period": 4, "col_name": "ratio", "on": "close"}}

    def test_rejection_reason_names_field(self):
        result = evaluate_draft(DraftState(period=0), ColumnKind.ROLLING)
        assert result.accepted is False
        assert "period" in result.reason

    def test_unknown_kind(self, lag_draft):
        with pytest.raises(UnknownColumnKindError):
            evaluate_draft(lag_draft, "candles")
