"""
Error translation between layers.

```
 lux CLI           prints user_message + recovery_hint, exits 1
    ^
    | LuxaforError
    |
 UsbLight / WebhookLight / PydanticPersistence
    ^
    | OSError, ValueError, requests.RequestException, pydantic.ValidationError
    |
 hidapi, requests, pydantic
```

| Situation | Helper |
|-----------|--------|
| HID write or HTTP call raised | `raise wrap_transport_error(e, device_id) from e` |
| Config failed validation | `raise wrap_pydantic_error(e, str(path)) from e` |
| Log start/failure of an operation | `with ErrorContext("set color", logger): ...` |
| Print any error on the CLI | `message, hint = format_error_for_display(e)` |
"""

import logging
from typing import Optional

from .base import LuxaforError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import InvalidRequestError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log the start, end or failure of an operation.

    Failures are logged at ERROR: LuxaforErrors with their technical
    message, anything else with a traceback. The exception is re-raised
    unless re_raise is False, in which case it is kept on ``.error``.

    Example:
        ```python
        with ErrorContext("set solid color", logger_instance=logger):
            light.set_solid(NamedColor.RED)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val
        if isinstance(exc_val, LuxaforError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def _field_name(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> LuxaforError:
    """
    Turn a pydantic ValidationError into a ConfigurationError.

    JSON syntax problems become ConfigFileInvalidError; value problems
    become ConfigValidationError naming the field (or listing all of
    them when several fail).
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError):
        return ConfigValidationError("unknown", None, str(error), file_path=file_path)

    errors = error.errors()
    syntax = [e for e in errors if e.get("type") == "json_invalid"]
    if syntax:
        return ConfigFileInvalidError(file_path, syntax[0].get("msg", str(error)))

    if len(errors) == 1:
        only = errors[0]
        return ConfigValidationError(
            field=_field_name(only),
            value=only.get("input"),
            error_msg=only.get("msg", "validation failed"),
            file_path=file_path,
        )

    lines = [f"  - {_field_name(e)}: {e.get('msg', 'validation failed')}" for e in errors]
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n" + "\n".join(lines),
        file_path=file_path,
    )


def wrap_transport_error(error: Exception, device_id: Optional[str] = None) -> LuxaforError:
    """
    Convert a hidapi or requests failure into an InvalidRequestError.

    LuxaforErrors are returned unchanged.
    """
    if isinstance(error, LuxaforError):
        return error

    error_type = type(error).__name__
    timed_out = "Timeout" in error_type or "timed out" in str(error).lower()

    return InvalidRequestError(
        user_message=(
            "The request to the light timed out" if timed_out
            else "Could not send the request to the light"
        ),
        technical_message=f"{error_type} talking to device {device_id}: {error}",
        device_id=device_id,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, hint) for printing; non-luxafor errors show their type and no hint."""
    if isinstance(error, LuxaforError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
