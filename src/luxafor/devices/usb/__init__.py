"""USB HID backend for Luxafor lights."""

from .device import HidWriter, UsbLight
from .discovery import open_usb_light
from .report import LED_CODES, PATTERN_CODES, WAVE_CODES, LuxaforReport, ReportMode

__all__ = [
    "HidWriter",
    "LED_CODES",
    "LuxaforReport",
    "PATTERN_CODES",
    "ReportMode",
    "UsbLight",
    "WAVE_CODES",
    "open_usb_light",
]
