"""
Low-level HID report builder for USB Luxafor lights.

HID Reports: The Flag's Wire Format
===================================

Every command is a short output report written to the device. Byte 0 is
the USB HID *report identifier* and is always ``0x00``; byte 1 selects the
command group (the *mode*)::

    [0x00] [mode] [field] [field] ...
     │      │
     │      └─ Command group (0x01 = solid, 0x06 = pattern, ...)
     └─ Report ID

Field positions are fixed per mode. Trailing ``0x00`` bytes need not be
written, so each report stops after its last meaningful field.

Report Layouts
--------------

::

    Mode       | 1      | 2      | 3   | 4     | 5    | 6        | 7      | 8
    -----------|--------|--------|-----|-------|------|----------|--------|-------
    Simple     | 0x00   | COLOR  |     |       |      |          |        |
    Solid      | 0x01   | LED    | RED | GREEN | BLUE |          |        |
    Fade       | 0x02   | LED    | RED | GREEN | BLUE | TIME     |        |
    Strobe     | 0x03   | LED    | RED | GREEN | BLUE | SPEED    | 0x00   | REPEAT
    Wave       | 0x04   | WTYPE  | RED | GREEN | BLUE | 0x00     | REPEAT | SPEED
    Pattern    | 0x06   | PTYPE  | REPEAT

Only the Simple mode "off" color (``'O'``) is used; every other color is
sent as RGB.

LED Codes
---------

The Flag has three LEDs on the front (tab) and three on the back. Logical
LED numbers count from the front bottom; the wire codes count from the
front top::

    Logical  | Position      | Code
    ---------|---------------|------
    1        | front bottom  | 0x03
    2        | front middle  | 0x02
    3        | front top     | 0x01
    4        | back bottom   | 0x06
    5        | back middle   | 0x05
    6        | back top      | 0x04
    front    | all front     | 0x42
    back     | all back      | 0x41
    all      | every LED     | 0xFF

Pattern Codes
-------------

Pattern codes are not in logical order: police sits between random 3 and
random 4::

    traffic lights=1, random 1..3=2..4, police=5, random 4..5=6..7,
    rainbow=8, sea=9, white wave=10, synthetic=11

Example
-------

Solid red on every LED::

    LuxaforReport.solid(LedTarget.ALL, (255, 0, 0))
    -> [0x00, 0x01, 0xFF, 0xFF, 0x00, 0x00]
        │     │     │     └───┬───────┘
        │     │     │        RGB
        │     │     └─ LED (all)
        │     └─ Mode: solid
        └─ Report ID

Key Design Principle
--------------------

**Hardware abstraction boundary**: this module is the lowest level of
the USB backend. It turns domain values into bytes and knows nothing of
the HID handle; UsbLight does the writing.
"""

from enum import Enum

from luxafor.exceptions import InvalidRequestError
from luxafor.models import LedTarget, Pattern, WaveStyle

HID_REPORT_ID = 0x00
SIMPLE_COLOR_OFF = ord("O")


class ReportMode(Enum):
    """Command groups (byte 1 of every report)."""

    SIMPLE = 0x00
    SOLID = 0x01
    FADE = 0x02
    STROBE = 0x03
    WAVE = 0x04
    PATTERN = 0x06


LED_CODES = {
    LedTarget.ALL: 0xFF,
    LedTarget.FRONT: 0x42,
    LedTarget.BACK: 0x41,
    LedTarget.LED_1: 0x03,  # front bottom
    LedTarget.LED_2: 0x02,  # front middle
    LedTarget.LED_3: 0x01,  # front top
    LedTarget.LED_4: 0x06,  # back bottom
    LedTarget.LED_5: 0x05,  # back middle
    LedTarget.LED_6: 0x04,  # back top
}

WAVE_CODES = {
    WaveStyle.SHORT: 0x01,
    WaveStyle.LONG: 0x02,
    WaveStyle.OVERLAPPING_SHORT: 0x03,
    WaveStyle.OVERLAPPING_LONG: 0x04,
}

PATTERN_CODES = {
    Pattern.TRAFFIC_LIGHTS: 1,
    Pattern.RANDOM_1: 2,
    Pattern.RANDOM_2: 3,
    Pattern.RANDOM_3: 4,
    Pattern.POLICE: 5,
    Pattern.RANDOM_4: 6,
    Pattern.RANDOM_5: 7,
    Pattern.RAINBOW: 8,
    Pattern.SEA: 9,
    Pattern.WHITE_WAVE: 10,
    Pattern.SYNTHETIC: 11,
}


def _byte(name: str, value: int) -> int:
    """Check a single report field fits in one byte."""
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise InvalidRequestError(
            user_message=f"The {name} value must be between 0 and 255",
            technical_message=f"Cannot encode {name}={value!r} as a report byte",
        )
    return value


class LuxaforReport:
    """Builds HID output reports; every method returns the exact bytes to write."""

    @staticmethod
    def _build(mode: ReportMode, *fields: int) -> bytes:
        return bytes([HID_REPORT_ID, mode.value, *fields])

    @staticmethod
    def off() -> bytes:
        """Build the simple-mode "off" report."""
        return LuxaforReport._build(ReportMode.SIMPLE, SIMPLE_COLOR_OFF)

    @staticmethod
    def solid(led: LedTarget, rgb: tuple[int, int, int]) -> bytes:
        """Build a solid color report."""
        return LuxaforReport._build(ReportMode.SOLID, LED_CODES[led], *rgb)

    @staticmethod
    def fade(led: LedTarget, rgb: tuple[int, int, int], duration: int) -> bytes:
        """Build a fade-to-color report."""
        return LuxaforReport._build(
            ReportMode.FADE, LED_CODES[led], *rgb, _byte("duration", duration)
        )

    @staticmethod
    def strobe(led: LedTarget, rgb: tuple[int, int, int], speed: int, repeat: int) -> bytes:
        """Build a strobe report."""
        return LuxaforReport._build(
            ReportMode.STROBE,
            LED_CODES[led],
            *rgb,
            _byte("speed", speed),
            0x00,
            _byte("repeat", repeat),
        )

    @staticmethod
    def wave(style: WaveStyle, rgb: tuple[int, int, int], speed: int, repeat: int) -> bytes:
        """Build a wave report (waves always use every LED)."""
        return LuxaforReport._build(
            ReportMode.WAVE,
            WAVE_CODES[style],
            *rgb,
            0x00,
            _byte("repeat", repeat),
            _byte("speed", speed),
        )

    @staticmethod
    def pattern(pattern: Pattern, repeat: int) -> bytes:
        """Build a preset pattern report."""
        return LuxaforReport._build(
            ReportMode.PATTERN, PATTERN_CODES[pattern], _byte("repeat", repeat)
        )


def format_report(report: bytes) -> str:
    """Render a report as hex bytes for logging, e.g. '0x00, 0x01, 0xff'."""
    return ", ".join(f"{b:#04x}" for b in report)
