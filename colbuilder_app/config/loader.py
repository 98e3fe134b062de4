"""Configuration loader with 2-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigError
from ..logging.config import get_logger
from .defaults import BuilderConfig, DraftDefaults, OptionLists, get_default_config
from .validation import ConfigValidator

logger = get_logger(__name__)

CONFIG_FILENAME = "builder.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages builder configuration loading with precedence."""

    config_dir: Path
    defaults: BuilderConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from builder.yaml, or nothing if it is absent."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Failed to parse {CONFIG_FILENAME}: {e}",
                path=str(self.config_file)
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigError(
                f"{CONFIG_FILENAME} must contain a mapping, got {type(file_config).__name__}",
                path=str(self.config_file)
            )

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. builder.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_builder_config(self, overrides: Optional[dict[str, Any]] = None) -> BuilderConfig:
        """Merge, validate and build a BuilderConfig."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error(
                "Builder configuration validation failed",
                path=str(self.config_file),
                errors=error_msgs
            )
            raise ConfigError(
                "Invalid builder configuration",
                path=str(self.config_file),
                errors=errors
            )

        options = {key: tuple(value) for key, value in config.get("options", {}).items()}
        return BuilderConfig(
            draft=DraftDefaults(**config.get("draft", {})),
            options=OptionLists(**options),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                elif isinstance(value, tuple):
                    result[field_name] = list(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
