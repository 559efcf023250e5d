"""Parsing exceptions for domain tokens.

Raised by the parsers in `luxafor.models` before any device I/O happens:
- ParseError: Base class for token parsing errors
- InvalidColorError: Color token not recognized
- InvalidPatternError: Pattern or wave style token not recognized
- InvalidLEDError: LED target token not recognized
- InvalidDeviceIDError: Webhook device identifier badly formatted
"""

from .base import LuxaforError


class ParseError(LuxaforError):
    """A domain token could not be parsed."""

    kind = "value"
    hint = None

    def __init__(self, token: str, reason: str | None = None):
        """
        Initialize parse error.

        Args:
            token: The offending input string
            reason: Optional detail appended to the technical message
        """
        user_msg = f"The {self.kind} value '{token}' was not recognized"
        tech_msg = user_msg if reason is None else f"{user_msg}: {reason}"
        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=self.hint,
        )
        self.token = token


class InvalidColorError(ParseError):
    """The color value supplied was not recognized."""

    kind = "color"
    hint = (
        "Use one of red, green, yellow, blue, white, cyan, magenta "
        "or a 6 digit hex value such as 00ff00"
    )


class InvalidPatternError(ParseError):
    """The pattern value supplied was not recognized."""

    kind = "pattern"
    hint = "Use one of police, 'traffic lights' or 'random 1' to 'random 5'"


class InvalidLEDError(ParseError):
    """The LED is either invalid or not supported by the connected device."""

    kind = "LED"
    hint = "Use one of all, front, back or a number from 1 to 6"


class InvalidDeviceIDError(ParseError):
    """The provided device ID was incorrectly formatted."""

    kind = "device ID"
    hint = "Webhook device IDs are hexadecimal, use 'usb' for a USB connected light"
