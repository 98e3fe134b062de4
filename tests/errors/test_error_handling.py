"""
Error handling tests for the column builder.

Tests cover the error hierarchy and that draft rejections never escape the
evaluators.
"""

import pytest
from unittest.mock import patch

from colbuilder_app.errors import (
    ConfigError,
    DraftError,
    DraftFieldError,
    UnknownColumnKindError,
    ValidationRejected,
)
from colbuilder_app.state import evaluators
from colbuilder_app.state.evaluators import evaluate_draft
from colbuilder_app.state.models import ColumnKind, DraftState


class TestErrorClassification:
    """Test error classification system."""

    def test_draft_error_hierarchy(self):
        """Test that draft errors share the DraftError base."""
        base_error = DraftError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        rejected = ValidationRejected("period is required", field="period",
                                      value=None, kind="lag")
        assert isinstance(rejected, DraftError)
        assert rejected.field == "period"
        assert rejected.kind == "lag"
        assert rejected.recoverable is True

        field_error = DraftFieldError("unknown field", field="window", allowed=["period"])
        assert isinstance(field_error, DraftError)
        assert field_error.allowed == ["period"]

        kind_error = UnknownColumnKindError("unknown kind", kind="candles")
        assert isinstance(kind_error, DraftError)
        assert kind_error.recoverable is False

    def test_context_passthrough(self):
        error = ValidationRejected("lag must not be zero", field="lag", value=0,
                                   context={"draft": "pct"})
        assert error.context == {"draft": "pct"}
        assert str(error) == "lag must not be zero"

    def test_config_error(self):
        error = ConfigError("bad config", path="/tmp/builder.yaml", errors=["x"])
        assert not isinstance(error, DraftError)
        assert error.path == "/tmp/builder.yaml"
        assert error.errors == ["x"]
        assert error.recoverable is False


class TestRejectionAbsorbed:
    """Test ValidationRejected stays inside the evaluator boundary."""

    @pytest.mark.parametrize("kind", list(ColumnKind))
    def test_empty_draft_never_raises(self, kind):
        draft = DraftState(period=None, lag=0)
        result = evaluate_draft(draft, kind)
        assert result.kind is kind

    def test_rejection_logged_at_debug(self):
        with patch.object(evaluators, "logger") as mock_logger:
            evaluate_draft(DraftState(period=None), ColumnKind.LAG)

        mock_logger.debug.assert_called_once()
        kwargs = mock_logger.debug.call_args.kwargs
        assert kwargs["kind"] == "lag"
        assert kwargs["field"] == "period"
        assert kwargs["draft"]["kind"] == "lag"
        assert kwargs["draft"]["period"] is None

    def test_other_errors_propagate(self):
        """Test errors other than rejections are not swallowed."""
        def broken(draft):
            raise RuntimeError("boom")

        with patch.dict(evaluators.BUILDERS, {ColumnKind.LAG: broken}):
            with pytest.raises(RuntimeError):
                evaluate_draft(DraftState(), ColumnKind.LAG)
