"""Device-related exceptions.

This module defines exceptions raised by the USB and webhook backends:
- DeviceError: Base class for device errors
- DeviceNotFoundError: No light discovered, or it could not be opened
- InvalidRequestError: The request could not be encoded or written
- UnexpectedStatusError: The webhook API returned a non-2xx status
- UnsupportedCommandError: The backend cannot perform the command
"""

from .base import LuxaforError


class DeviceError(LuxaforError):
    """Device operation failed."""

    def __init__(self, user_message: str, device_id: str | None = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            device_id: The device identifier involved (if known)
        """
        super().__init__(user_message, **kwargs)
        self.device_id = device_id


class DeviceNotFoundError(DeviceError):
    """No device was discovered, or the ID did not resolve to a device."""

    def __init__(self, original_error: str | None = None):
        """
        Initialize device-not-found error.

        Args:
            original_error: The original error message from the HID library
        """
        user_msg = "No Luxafor light was found on USB."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=(
                "Check the light is plugged in and that your user may access "
                "HID devices (udev rules on Linux)."
            ),
        )


class InvalidRequestError(DeviceError):
    """The request could not be encoded or delivered."""

    def __init__(
        self,
        user_message: str = "The request to the light was invalid",
        technical_message: str | None = None,
        device_id: str | None = None,
    ):
        """
        Initialize invalid request error.

        Args:
            user_message: User-friendly error message
            technical_message: Details for logs (short write count, transport error)
            device_id: The device identifier involved
        """
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            device_id=device_id,
            recoverable=True,
        )


class UnexpectedStatusError(DeviceError):
    """An unexpected HTTP status was returned by the webhook API."""

    def __init__(self, status_code: int, device_id: str | None = None):
        """
        Initialize unexpected status error.

        Args:
            status_code: The HTTP status code returned
            device_id: The webhook device identifier
        """
        recovery = None
        if status_code in (401, 403, 404):
            recovery = "Check the device ID matches the one shown in the Luxafor webhook settings."

        super().__init__(
            user_message=f"An unexpected HTTP error was returned: {status_code}",
            technical_message=f"Webhook call for device {device_id} returned status {status_code}",
            device_id=device_id,
            recoverable=status_code >= 500,
            recovery_hint=recovery,
        )
        self.status_code = status_code


class UnsupportedCommandError(DeviceError):
    """The command is not supported by the current device or connection."""

    def __init__(self, command: str, backend: str, device_id: str | None = None):
        """
        Initialize unsupported command error.

        Args:
            command: Name of the rejected operation (e.g. "fade")
            backend: Name of the backend that rejected it (e.g. "webhook")
            device_id: The device identifier
        """
        hint = None
        if backend == "webhook":
            hint = "Connect the light over USB ('--device usb') to use this command."

        super().__init__(
            user_message=f"The '{command}' command is not supported by {backend} devices",
            device_id=device_id,
            recovery_hint=hint,
        )
        self.command = command
        self.backend = backend
