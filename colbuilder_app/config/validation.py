"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from ..state.models import ColumnKind, RollingFunction
from .defaults import DraftDefaults, OptionLists


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates builder configuration sections."""

    @staticmethod
    def validate_draft_defaults(
        params: dict[str, Any],
        functions: list[str]
    ) -> list[ValidationError]:
        """Validate draft default values."""
        errors = []

        known = {f.name for f in fields(DraftDefaults)}
        for key in params:
            if key not in known:
                errors.append(ValidationError(
                    field=f"draft.{key}",
                    message="Unknown draft field",
                    value=params[key]
                ))

        if "kind" in params:
            value = params["kind"]
            if value not in [k.value for k in ColumnKind]:
                errors.append(ValidationError(
                    field="draft.kind",
                    message=f"Must be one of {[k.value for k in ColumnKind]}",
                    value=value
                ))

        if "period" in params:
            value = params["period"]
            if value is not None and (not _is_number(value) or value < 0):
                errors.append(ValidationError(
                    field="draft.period",
                    message="Must be a non-negative number or null",
                    value=value
                ))

        if "lag" in params:
            value = params["lag"]
            if value is not None and not isinstance(value, (int, float)):
                errors.append(ValidationError(
                    field="draft.lag",
                    message="Must be a number, a boolean or null",
                    value=value
                ))

        if "func" in params:
            value = params["func"]
            if value not in functions:
                errors.append(ValidationError(
                    field="draft.func",
                    message=f"Must be one of {functions}",
                    value=value
                ))

        if "on_column" in params:
            value = params["on_column"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="draft.on_column",
                    message="Must be a non-empty string",
                    value=value
                ))

        for key in ("column_name", "formula"):
            if key in params:
                value = params[key]
                if value is not None and not isinstance(value, str):
                    errors.append(ValidationError(
                        field=f"draft.{key}",
                        message="Must be a string or null",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_option_lists(params: dict[str, Any]) -> list[ValidationError]:
        """Validate selector option lists."""
        errors = []

        known = {f.name for f in fields(OptionLists)}
        for key, value in params.items():
            if key not in known:
                errors.append(ValidationError(
                    field=f"options.{key}",
                    message="Unknown option list",
                    value=value
                ))
                continue

            if (not isinstance(value, (list, tuple))
                    or not all(isinstance(item, str) and item for item in value)):
                errors.append(ValidationError(
                    field=f"options.{key}",
                    message="Must be a list of non-empty strings",
                    value=value
                ))

        if "functions" in params and isinstance(params["functions"], (list, tuple)):
            allowed = [f.value for f in RollingFunction]
            unknown = [item for item in params["functions"] if item not in allowed]
            if unknown:
                errors.append(ValidationError(
                    field="options.functions",
                    message=f"Unsupported rolling functions, allowed: {allowed}",
                    value=unknown
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for key in config:
            if key not in ("draft", "options"):
                errors.append(ValidationError(
                    field=key,
                    message="Unknown configuration section",
                    value=config[key]
                ))

        options = config.get("options", {})
        if not isinstance(options, dict):
            errors.append(ValidationError(
                field="options",
                message="Must be a mapping",
                value=options
            ))
            options = {}
        errors.extend(ConfigValidator.validate_option_lists(options))

        functions = options.get("functions", list(OptionLists().functions))
        if not isinstance(functions, (list, tuple)):
            functions = []

        draft = config.get("draft", {})
        if not isinstance(draft, dict):
            errors.append(ValidationError(
                field="draft",
                message="Must be a mapping",
                value=draft
            ))
        else:
            errors.extend(ConfigValidator.validate_draft_defaults(draft, list(functions)))

        return errors
