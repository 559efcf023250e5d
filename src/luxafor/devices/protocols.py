"""Light capability protocols shared by the USB and webhook backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from luxafor.models import Color, DeviceIdentifier, LedTarget, Pattern, WaveStyle


class Light(Protocol):
    """
    Protocol every light backend implements.

    Operations return None on success and raise a LuxaforError on failure.
    Backends that cannot perform an operation raise UnsupportedCommandError
    before any I/O.
    """

    @property
    def identifier(self) -> DeviceIdentifier:
        """Identifier of the device (no side effects)."""
        ...

    def turn_off(self) -> None:
        """Turn the light off (solid black)."""
        ...

    def set_solid(self, color: Color, blink: bool = False) -> None:
        """Set the light to a continuous, or blinking, solid color."""
        ...

    def set_fade(self, color: Color, duration: int) -> None:
        """
        Fade from the current color to a new one.

        Args:
            color: Target color
            duration: Fade time (0-255)
        """
        ...

    def set_strobe(self, color: Color, speed: int, repeat: int) -> None:
        """
        Strobe the light, dimming and brightening the same color.

        Args:
            color: Strobe color
            speed: Time for each strobe cycle (0-255)
            repeat: Number of cycles (0-255)
        """
        ...

    def set_wave(self, color: Color, style: WaveStyle, speed: int, repeat: int) -> None:
        """
        Repeat one of the predefined wave styles.

        Args:
            color: Wave color
            style: Wave shape
            speed: Time for each wave cycle (0-255)
            repeat: Number of waves (0-255)
        """
        ...

    def set_pattern(self, pattern: Pattern, repeat: int) -> None:
        """
        Repeat one of the predefined patterns.

        Args:
            pattern: Preset pattern
            repeat: Number of repetitions (0-255); backends without a
                    repeat field accept and ignore it
        """
        ...

    def close(self) -> None:
        """Release the handle or connections owned by the light."""
        ...


class TargetedLight(Light, Protocol):
    """Light that can address specific LEDs (USB only)."""

    def set_target_led(self, target: LedTarget) -> None:
        """
        Set the LED(s) used by later solid, fade and strobe operations.

        Args:
            target: LED target, defaults to all LEDs until changed
        """
        ...
