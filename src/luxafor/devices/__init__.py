"""Light backends: USB HID and webhook REST."""

from .factory import DEVICE_CONNECTION_USB, open_light
from .protocols import Light, TargetedLight
from .usb import UsbLight, open_usb_light
from .webhook import WebhookLight

__all__ = [
    "DEVICE_CONNECTION_USB",
    "Light",
    "TargetedLight",
    "UsbLight",
    "WebhookLight",
    "open_light",
    "open_usb_light",
]
