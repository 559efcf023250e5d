"""Errors raised while reading or validating the config file.

- ConfigurationError: Base class
- ConfigFileInvalidError: The file is empty or not valid JSON
- ConfigValidationError: The JSON parsed but a value was rejected
"""

from typing import Any

from .base import LuxaforError

# Extra hints keyed by a fragment of the failing field name
_FIELD_HINTS = {
    "device": "Use 'usb' or the hexadecimal ID from the Luxafor webhook settings",
    "timeout": "The timeout is in seconds and must be greater than zero",
    "usb_": "USB vendor and product IDs are integers, e.g. 1240 for 0x04D8",
}


class ConfigurationError(LuxaforError):
    """The configuration could not be loaded or saved."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is not usable JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Config file that failed to parse
            parse_error: Parser message (or a short reason such as "File is empty")
        """
        reason = parse_error.lower()
        if "empty" in reason:
            user_msg = "Configuration file is empty"
            hint = f"Delete {file_path} to fall back to the defaults"
        elif "trailing comma" in reason:
            user_msg = "Configuration file has a trailing comma"
            hint = f"Remove the comma after the last entry in {file_path}"
        else:
            user_msg = "Configuration file has invalid syntax"
            hint = (
                f"Fix the JSON in {file_path}, or delete it and use "
                "'lux config set' to write a new one"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=hint,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A config value failed model validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Args:
            field: Dotted name of the failing field
            value: The rejected value
            error_msg: Validation message
            file_path: Config file the value came from (optional)
        """
        hints = [f"Update the '{field}' value in your configuration"]
        if file_path:
            hints.append(f"Config file: {file_path}")
        hints.extend(hint for key, hint in _FIELD_HINTS.items() if key in field.lower())

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hints),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
