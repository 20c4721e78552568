"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    ChartParams,
    CurrencyParams,
    DefaultConfig,
    DisplayParams,
    MovingAverageParams,
    PersistenceParams,
    TargetParams,
    get_default_config,
)
from .validation import ConfigValidator

SETTINGS_FILE = "settings.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings_file(self) -> dict[str, Any]:
        """
        Load user overrides from settings.yaml, if present.

        Raises:
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        settings_file = self.config_dir / SETTINGS_FILE

        if not settings_file.exists():
            return {}

        try:
            with open(settings_file) as f:
                settings = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {settings_file}: {e}") from e

        if settings is None:
            return {}
        if not isinstance(settings, dict):
            raise ConfigurationError(
                f"{settings_file} must contain a mapping of sections, got {type(settings).__name__}"
            )

        return settings

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. settings.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_settings_file())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Build a validated configuration object.

        Raises:
            ConfigurationError: If any merged value fails validation
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value!r})" for err in errors]
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(error_msgs),
                errors=errors
            )

        moving_average = dict(config["moving_average"])
        moving_average["periods"] = tuple(moving_average["periods"])
        currency = dict(config["currency"])
        currency["code"] = currency["code"].upper()

        return DefaultConfig(
            target=TargetParams(**config["target"]),
            currency=CurrencyParams(**currency),
            chart=ChartParams(**config["chart"]),
            moving_average=MovingAverageParams(**moving_average),
            persistence=PersistenceParams(**config["persistence"]),
            display=DisplayParams(**config["display"]),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
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
