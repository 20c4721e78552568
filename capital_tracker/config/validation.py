"""Configuration validation utilities."""

import math
from dataclasses import dataclass, fields
from datetime import date
from typing import Any

from ..data.currency import Currency
from .defaults import DefaultConfig


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_target_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate default target parameters."""
        errors = []

        if "amount" in params:
            value = params["amount"]
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                errors.append(ValidationError(
                    field="target.amount",
                    message="Must be a finite positive number",
                    value=value
                ))

        if "date" in params:
            value = params["date"]
            if not isinstance(value, date):
                errors.append(ValidationError(
                    field="target.date",
                    message="Must be a calendar date (YYYY-MM-DD)",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_currency_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate default currency parameters."""
        errors = []

        if "code" in params:
            value = params["code"]
            known = {currency.value for currency in Currency}
            if not isinstance(value, str) or value.upper() not in known:
                errors.append(ValidationError(
                    field="currency.code",
                    message=f"Must be one of {', '.join(sorted(known))}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_chart_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate chart scaling parameters."""
        errors = []

        if "padding_ratio" in params:
            value = params["padding_ratio"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="chart.padding_ratio",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        # A zero floor would allow a zero value range for flat series
        if "min_padding" in params:
            value = params["min_padding"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="chart.min_padding",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "axis_label_count" in params:
            value = params["axis_label_count"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 2:
                errors.append(ValidationError(
                    field="chart.axis_label_count",
                    message="Must be an integer of at least 2",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_moving_average_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average parameters."""
        errors = []

        if "periods" in params:
            value = params["periods"]
            if (not isinstance(value, (list, tuple)) or not value or
                    any(not isinstance(p, int) or isinstance(p, bool) or p < 1 for p in value)):
                errors.append(ValidationError(
                    field="moving_average.periods",
                    message="Must be a non-empty list of positive integers",
                    value=value
                ))

        if "default_window" in params:
            value = params["default_window"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="moving_average.default_window",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate entry list parameters."""
        errors = []

        if "recent_entries_limit" in params:
            value = params["recent_entries_limit"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="display.recent_entries_limit",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_persistence_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate snapshot storage parameters."""
        errors = []

        if "db_path" in params:
            value = params["db_path"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="persistence.db_path",
                    message="Must be a non-empty path string",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                errors.append(ValidationError(
                    field="persistence.timeout_seconds",
                    message="Must be a finite positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_structure(config: Any) -> list[ValidationError]:
        """Check that sections are mappings holding only known keys."""
        if not isinstance(config, dict):
            return [ValidationError(field="<root>", message="Must be a mapping", value=config)]

        errors = []
        section_types = {f.name: f.type for f in fields(DefaultConfig)}

        for section, params in config.items():
            if section not in section_types:
                errors.append(ValidationError(
                    field=str(section),
                    message=f"Unknown section, expected one of {', '.join(section_types)}",
                    value=params
                ))
                continue

            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            known = {f.name for f in fields(section_types[section])}
            for key in params:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message=f"Unknown key, expected one of {', '.join(sorted(known))}",
                        value=params[key]
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_structure(config)
        if errors:
            return errors

        if "target" in config:
            errors.extend(ConfigValidator.validate_target_params(config["target"]))

        if "currency" in config:
            errors.extend(ConfigValidator.validate_currency_params(config["currency"]))

        if "chart" in config:
            errors.extend(ConfigValidator.validate_chart_params(config["chart"]))

        if "moving_average" in config:
            errors.extend(ConfigValidator.validate_moving_average_params(config["moving_average"]))

        if "display" in config:
            errors.extend(ConfigValidator.validate_display_params(config["display"]))

        if "persistence" in config:
            errors.extend(ConfigValidator.validate_persistence_params(config["persistence"]))

        return errors
