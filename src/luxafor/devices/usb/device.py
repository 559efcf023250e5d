"""USB connected light."""

import logging
from typing import Protocol

from luxafor.exceptions import (
    InvalidRequestError,
    UnsupportedCommandError,
    wrap_transport_error,
)
from luxafor.models import Color, LedTarget, Pattern, UsbDeviceId, WaveStyle, parse_led_target
from .report import LuxaforReport, format_report

logger = logging.getLogger(__name__)


class HidWriter(Protocol):
    """The part of an open HID handle the light needs."""

    def write(self, data: bytes) -> int:
        """Write an output report, returning the number of bytes written."""
        ...


class UsbLight:
    """
    Light connected over USB HID.

    Implements both Light and TargetedLight. The handle is owned by this
    object for its lifetime and must not be shared between threads.
    """

    def __init__(self, handle: HidWriter, identifier: UsbDeviceId):
        """
        Initialize USB light.

        Args:
            handle: Open HID handle (hidapi device or compatible)
            identifier: Identifier derived from the handle's descriptor strings
        """
        self._handle = handle
        self._identifier = identifier
        self._target_led = LedTarget.ALL

    @property
    def identifier(self) -> UsbDeviceId:
        """Identifier of this device."""
        return self._identifier

    @property
    def target_led(self) -> LedTarget:
        """LED(s) addressed by solid, fade and strobe operations."""
        return self._target_led

    def set_target_led(self, target: LedTarget | str) -> None:
        """
        Set the LED(s) used by later solid, fade and strobe operations.

        Raises:
            InvalidLEDError: If target is not an LED target or its token
        """
        if not isinstance(target, LedTarget):
            target = parse_led_target(str(target))

        logger.info(f"Targeting LED '{target}' on device '{self._identifier}'")
        self._target_led = target

    def turn_off(self) -> None:
        """Turn every LED off."""
        logger.info(f"Turning device '{self._identifier}' off")
        self._write(LuxaforReport.off())

    def set_solid(self, color: Color, blink: bool = False) -> None:
        """
        Set a solid color on the targeted LED(s).

        Raises:
            UnsupportedCommandError: If blink is requested; the HID protocol
                has no blink mode (use set_strobe instead)
        """
        if blink:
            raise UnsupportedCommandError("blink", "USB", device_id=str(self._identifier))

        logger.info(f"Setting the color of device '{self._identifier}' to {color}")
        self._write(LuxaforReport.solid(self._target_led, color.rgb))

    def set_fade(self, color: Color, duration: int) -> None:
        """Fade the targeted LED(s) to a new color."""
        logger.info(
            f"Setting the fade-to color of device '{self._identifier}' to {color}, over {duration}"
        )
        self._write(LuxaforReport.fade(self._target_led, color.rgb, duration))

    def set_strobe(self, color: Color, speed: int, repeat: int) -> None:
        """Strobe the targeted LED(s)."""
        logger.info(
            f"Setting the device '{self._identifier}' to strobe {color}, at {speed}, {repeat} times"
        )
        self._write(LuxaforReport.strobe(self._target_led, color.rgb, speed, repeat))

    def set_wave(self, color: Color, style: WaveStyle, speed: int, repeat: int) -> None:
        """Show a wave across the whole light."""
        logger.info(
            f"Setting the device '{self._identifier}' to wave {color} ({style}), "
            f"at {speed}, {repeat} times"
        )
        self._write(LuxaforReport.wave(style, color.rgb, speed, repeat))

    def set_pattern(self, pattern: Pattern, repeat: int) -> None:
        """Show a preset pattern."""
        logger.info(f"Setting the pattern of device '{self._identifier}' to {pattern}")
        self._write(LuxaforReport.pattern(pattern, repeat))

    def close(self) -> None:
        """Release the HID handle."""
        close = getattr(self._handle, "close", None)
        if close is not None:
            close()
            logger.debug(f"Closed device '{self._identifier}'")

    def _write(self, report: bytes) -> None:
        """
        Write a report, requiring the full length to be accepted.

        Raises:
            InvalidRequestError: Short write, negative result or HID error
        """
        logger.debug(f"writing [{format_report(report)}]")

        try:
            written = self._handle.write(report)
        except (OSError, ValueError) as e:
            logger.error(f"Could not write to HID device: {e}")
            raise wrap_transport_error(e, str(self._identifier)) from e

        if written != len(report):
            logger.error(
                f"Bytes written, {written}, did not match buffer length {len(report)}"
            )
            raise InvalidRequestError(
                user_message="The light did not accept the full request",
                technical_message=f"Wrote {written} of {len(report)} bytes",
                device_id=str(self._identifier),
            )

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"UsbLight({self._identifier}, target_led={self._target_led})"
