"""Domain models for Luxafor lights."""

from .color import Color, CustomColor, NamedColor, parse_color
from .config import AppConfig
from .identifier import DeviceIdentifier, UsbDeviceId, WebhookDeviceId, parse_device_id
from .led import LedTarget, parse_led_target
from .pattern import EXTENDED_PATTERNS, Pattern, WaveStyle, parse_pattern, parse_wave_style

__all__ = [
    "AppConfig",
    # Models
    "Color",
    "CustomColor",
    "DeviceIdentifier",
    "EXTENDED_PATTERNS",
    "LedTarget",
    "NamedColor",
    "Pattern",
    "UsbDeviceId",
    "WaveStyle",
    "WebhookDeviceId",
    # Parsers
    "parse_color",
    "parse_device_id",
    "parse_led_target",
    "parse_pattern",
    "parse_wave_style",
]
