"""Device identifiers for USB and webhook lights."""

import string
from dataclasses import dataclass
from typing import Union

from luxafor.exceptions import InvalidDeviceIDError


@dataclass(frozen=True)
class WebhookDeviceId:
    """Identifier shown in the Luxafor app webhook settings (hex string)."""

    value: str

    def __post_init__(self):
        if not self.value or not all(c in string.hexdigits for c in self.value):
            raise InvalidDeviceIDError(self.value, "expected a non-empty hexadecimal string")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UsbDeviceId:
    """Identifier derived from the HID descriptor strings of an open device."""

    manufacturer: str
    product: str
    serial: str

    def __str__(self) -> str:
        return f"{self.manufacturer}::{self.product}::{self.serial}"


DeviceIdentifier = Union[WebhookDeviceId, UsbDeviceId]


def parse_device_id(token: str) -> WebhookDeviceId:
    """
    Parse a webhook device identifier.

    Raises:
        InvalidDeviceIDError: If token is empty or not all hex digits
    """
    return WebhookDeviceId(token)
