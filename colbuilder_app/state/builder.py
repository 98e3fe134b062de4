"""
Column builder: owns the draft and the accepted column list.

The builder keeps exactly one active kind, lets the caller edit the draft
field by field, and on add_column evaluates the draft for a kind, appends
the tagged configuration object when it is accepted, then clears the name
and formula inputs whether or not anything was appended.
"""

import copy
import json
from pathlib import Path
from typing import Any, Optional, Union

from ..config.defaults import BuilderConfig
from ..config.loader import ConfigLoader
from ..errors import DraftFieldError, UnknownColumnKindError
from ..logging.config import get_builder_logger, log_column_decision
from .evaluators import ColumnConfig, evaluate_draft
from .models import ColumnKind, DraftState, EvaluationResult

logger = get_builder_logger(__name__)


class ColumnBuilder:
    """Assembles an ordered list of column definitions for the backtest pipeline."""

    def __init__(
        self,
        config: Optional[BuilderConfig] = None,
        config_dir: Optional[Path] = None
    ) -> None:
        """
        Initialize the builder.

        Args:
            config: Ready-made configuration; when omitted it is loaded from
                builder.yaml in config_dir
            config_dir: Directory holding builder.yaml (package config/ by default)

        Raises:
            ConfigError: builder.yaml is unreadable or fails validation
        """
        self.logger = logger

        self.config_loader = ConfigLoader.create(config_dir)
        if config is None:
            config = self.config_loader.load_builder_config()
        self.config = config

        defaults = self.config.draft
        self.draft = DraftState(
            kind=ColumnKind.parse(defaults.kind),
            column_name=defaults.column_name,
            on_column=defaults.on_column,
            period=defaults.period,
            lag=defaults.lag,
            func=defaults.func,
            formula=defaults.formula,
        )
        self._columns: list[ColumnConfig] = []

    @property
    def active_kind(self) -> ColumnKind:
        return self.draft.kind

    @property
    def columns(self) -> list[ColumnConfig]:
        """Accepted configuration objects, in the order they were added."""
        return list(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def set_active_kind(self, kind: Union[ColumnKind, str]) -> ColumnKind:
        """Make kind the single active kind."""
        new_kind = ColumnKind.parse(kind)
        if new_kind != self.draft.kind:
            self.logger.debug(
                "Active kind changed",
                from_kind=self.draft.kind.value,
                to_kind=new_kind.value
            )
        self.draft.kind = new_kind
        return new_kind

    def update_draft(self, **fields: Any) -> None:
        """
        Set draft fields from form values.

        Args:
            **fields: DraftState field names and their new values

        Raises:
            DraftFieldError: Unknown field, or func outside the function list
            UnknownColumnKindError: kind outside ColumnKind
        """
        known = DraftState.field_names()
        for name in fields:
            if name not in known:
                raise DraftFieldError(
                    f"Unknown draft field: {name}",
                    field=name,
                    allowed=known
                )

        if "kind" in fields:
            ColumnKind.parse(fields["kind"])

        if "func" in fields:
            functions = list(self.config.options.functions)
            if fields["func"] not in functions:
                raise DraftFieldError(
                    f"Unsupported rolling function: {fields['func']!r}",
                    field="func",
                    allowed=functions
                )

        for name, value in fields.items():
            if name == "kind":
                self.set_active_kind(value)
            else:
                setattr(self.draft, name, value)

    def evaluate(self, kind: Optional[Union[ColumnKind, str]] = None) -> EvaluationResult:
        """Evaluate the draft without appending or clearing anything."""
        return evaluate_draft(self.draft, kind)

    def add_column(self, kind: Optional[Union[ColumnKind, str]] = None) -> Optional[ColumnConfig]:
        """
        Evaluate the draft and append it to the accepted list if valid.

        The column name and formula inputs are cleared afterwards in every case.

        Args:
            kind: Kind to evaluate as; defaults to the active kind

        Returns:
            The appended configuration object, or None if the draft was
            rejected or the kind is unknown
        """
        try:
            result = self.evaluate(kind)
        except UnknownColumnKindError as e:
            log_column_decision(
                self.logger,
                kind=str(e.kind),
                accepted=False,
                reason=str(e)
            )
            return None
        finally:
            self.draft.clear()

        if result.accepted:
            self._columns.append(result.column)

        log_column_decision(
            self.logger,
            kind=result.kind.value,
            accepted=result.accepted,
            reason=result.reason,
            column=result.column
        )
        return result.column

    def to_payload(self) -> list[ColumnConfig]:
        """Independent copy of the accepted list for the backend."""
        return copy.deepcopy(self._columns)

    def to_json(self, **kwargs: Any) -> str:
        """Accepted list serialized as a JSON array."""
        return json.dumps(self._columns, **kwargs)
