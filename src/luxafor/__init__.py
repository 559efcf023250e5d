"""Luxafor: control Luxafor lights over USB or webhooks."""

__version__ = "0.3.0"

from .devices import Light, TargetedLight, UsbLight, WebhookLight, open_light, open_usb_light
from .exceptions import LuxaforError
from .models import (
    CustomColor,
    LedTarget,
    NamedColor,
    Pattern,
    WaveStyle,
    parse_color,
    parse_device_id,
    parse_led_target,
    parse_pattern,
    parse_wave_style,
)

__all__ = [
    "CustomColor",
    "LedTarget",
    "Light",
    "LuxaforError",
    "NamedColor",
    "Pattern",
    "TargetedLight",
    "UsbLight",
    "WaveStyle",
    "WebhookLight",
    "open_light",
    "open_usb_light",
    "parse_color",
    "parse_device_id",
    "parse_led_target",
    "parse_pattern",
    "parse_wave_style",
]
