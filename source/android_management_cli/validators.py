# ABOUTME: Validation utilities for the Android Management CLI
# ABOUTME: Prompt/flag validators and whole-configuration validation rules

"""Validators for prompts, command flags and the configuration file."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from android_management_cli.config import (
    CALLBACK_URL,
    DEFAULT_ENTERPRISE,
    PROJECT_ID,
    REQUIRED_KEYS,
    SERVICE_ACCOUNT_KEY,
)

URL_PATTERN = re.compile(r"^(https?://)[^\s/$.?#].[^\s]*$", re.IGNORECASE)
DEVICE_STATES = ("active", "disabled")


def validate_existing_file(value: str) -> bool | str:
    """Validate that a path, resolved against the current directory, exists.

    Args:
        value: The path to validate

    Returns:
        True if valid, error message if invalid
    """
    if value and value.strip() and Path(value.strip()).resolve().exists():
        return True
    return "File does not exist. Please provide a valid path."


def validate_project_id(value: str) -> bool | str:
    if value and value.strip():
        return True
    return "PROJECT_ID cannot be empty."


def validate_callback_url(value: str) -> bool | str:
    if value and URL_PATTERN.fullmatch(value):
        return True
    return "Please enter a valid URL."


def validate_no_spaces(value: str) -> bool | str:
    """Validate a resource ID used inside a resource name."""
    if value and not re.search(r"\s", value):
        return True
    return "Invalid name. Name can't include spaces."


def validate_not_empty(value: str) -> bool | str:
    if value and value.strip():
        return True
    return "Value can't be empty."


def validate_device_state(value: str) -> bool | str:
    if value and value.lower() in DEVICE_STATES:
        return True
    return "Invalid state. You can set 'active' or 'disabled'."


def validate_duration(value: str) -> bool | str:
    """Validate a protobuf duration such as '600s'."""
    if value and re.match(r"^\d+(\.\d+)?s$", value):
        return True
    return "Invalid duration. Use seconds with an 's' suffix (e.g. 600s)."


def validate_key_value(value: str) -> bool | str:
    """Validate a 'key=value' pair for the config command."""
    if value and "=" in value:
        key, _, val = value.partition("=")
        if key.strip() and val.strip():
            return True
    return 'Invalid format. Use: amdm config --add "key=value"'


@dataclass
class ValidationResult:
    """Result of configuration validation."""

    valid: bool
    errors: list[str]
    warnings: list[str]

    def __bool__(self) -> bool:
        """Return True if validation passed (no errors)."""
        return self.valid

    def __str__(self) -> str:
        if self.valid:
            msg = "✓ Validation passed"
            if self.warnings:
                msg += f" ({len(self.warnings)} warning(s))"
            return msg
        msg = f"✗ Validation failed ({len(self.errors)} error(s))"
        if self.warnings:
            msg += f", {len(self.warnings)} warning(s)"
        return msg


class ConfigValidator:
    """Validator for the stored configuration."""

    @staticmethod
    def validate_config(data: dict[str, Any]) -> ValidationResult:
        """Validate a configuration mapping.

        Args:
            data: Configuration data to validate.

        Returns:
            ValidationResult with errors and warnings.
        """
        errors = []
        warnings = []

        for key in REQUIRED_KEYS:
            if not data.get(key):
                errors.append(f"Required key '{key}' is missing or empty")

        key_path = data.get(SERVICE_ACCOUNT_KEY)
        if key_path:
            if not Path(key_path).is_absolute():
                errors.append(f"{SERVICE_ACCOUNT_KEY} must be an absolute path: {key_path}")
            elif not Path(key_path).exists():
                errors.append(f"{SERVICE_ACCOUNT_KEY} file does not exist: {key_path}")

        project_id = data.get(PROJECT_ID)
        if project_id is not None and validate_project_id(str(project_id)) is not True:
            errors.append(f"{PROJECT_ID} can't be blank")

        callback_url = data.get(CALLBACK_URL)
        if callback_url is not None and validate_callback_url(str(callback_url)) is not True:
            errors.append(f"Invalid {CALLBACK_URL}: {callback_url}")

        default_enterprise = data.get(DEFAULT_ENTERPRISE)
        if default_enterprise is None:
            warnings.append(f"{DEFAULT_ENTERPRISE} is not set; scoped commands need '--enterprise-name'")
        elif not str(default_enterprise).startswith("enterprises/"):
            warnings.append(
                f"{DEFAULT_ENTERPRISE} should be a full resource name (e.g. enterprises/LC03trycps): "
                f"{default_enterprise}"
            )

        return ValidationResult(valid=len(errors) == 0, errors=errors, warnings=warnings)
