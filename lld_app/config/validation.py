"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

KNOWN_SECTIONS = {
    "atm": {"notes"},
    "menu": {"prices", "currency"},
    "payment": {"max_retries", "retry_delay_seconds", "min_amount", "currency"},
    "editor": {"storage_path", "db_path"},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_atm_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate the ATM note inventory."""
        errors = []

        if "notes" in params:
            notes = params["notes"]
            if not isinstance(notes, dict) or not notes:
                errors.append(ValidationError(
                    field="notes",
                    message="Must be a non-empty mapping of denomination to count",
                    value=notes
                ))
                return errors

            for denomination, count in notes.items():
                # bool is an int subclass; reject it explicitly
                if (not isinstance(denomination, int) or isinstance(denomination, bool)
                        or denomination <= 0):
                    errors.append(ValidationError(
                        field="notes",
                        message="Denomination must be a positive integer",
                        value=denomination
                    ))
                if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                    errors.append(ValidationError(
                        field=f"notes.{denomination}",
                        message="Note count must be a non-negative integer",
                        value=count
                    ))

        return errors

    @staticmethod
    def validate_payment_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate payment parameters."""
        errors = []

        if "max_retries" in params:
            value = params["max_retries"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="max_retries",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "retry_delay_seconds" in params:
            value = params["retry_delay_seconds"]
            if not isinstance(value, (int, float)) or value < 0:
                errors.append(ValidationError(
                    field="retry_delay_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "min_amount" in params:
            value = params["min_amount"]
            if not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="min_amount",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_menu_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate menu prices."""
        errors = []

        prices = params.get("prices", {})
        if not isinstance(prices, dict):
            return [ValidationError(
                field="prices",
                message="Must be a mapping of item to price",
                value=prices
            )]

        for item, price in prices.items():
            if not isinstance(price, (int, float)) or price < 0:
                errors.append(ValidationError(
                    field=f"prices.{item}",
                    message="Price must be a non-negative number",
                    value=price
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Section must be a mapping",
                    value=params
                ))
                continue
            for key in params:
                if key not in KNOWN_SECTIONS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=params[key]
                    ))

        if isinstance(config.get("atm"), dict):
            errors.extend(ConfigValidator.validate_atm_params(config["atm"]))

        if isinstance(config.get("payment"), dict):
            errors.extend(ConfigValidator.validate_payment_params(config["payment"]))

        if isinstance(config.get("menu"), dict):
            errors.extend(ConfigValidator.validate_menu_params(config["menu"]))

        return errors
