"""USB discovery of Luxafor lights via HIDAPI.

Requires: ``pip install hidapi`` (needs libhidapi on Linux, e.g.
``apt install libhidapi-hidraw0``).
"""

import logging
from typing import Callable, Optional

import hid

from luxafor.exceptions import DeviceNotFoundError
from luxafor.models import UsbDeviceId
from luxafor.models.config import LUXAFOR_PRODUCT_ID, LUXAFOR_VENDOR_ID
from .device import UsbLight

logger = logging.getLogger(__name__)


def _descriptor_string(getter: Callable[[], Optional[str]]) -> str:
    """Read one HID descriptor string; '<unknown>' if empty, '<error>' if unreadable."""
    try:
        value = getter()
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read HID descriptor string: {e}")
        return "<error>"
    return value or "<unknown>"


def open_usb_light(
    vendor_id: int = LUXAFOR_VENDOR_ID,
    product_id: int = LUXAFOR_PRODUCT_ID,
) -> UsbLight:
    """
    Open the first connected Luxafor light.

    Args:
        vendor_id: USB vendor ID (VID)
        product_id: USB product ID (PID)

    Returns:
        UsbLight owning the open handle

    Raises:
        DeviceNotFoundError: If no matching device could be opened
    """
    handle = hid.device()
    try:
        handle.open(vendor_id, product_id)
    except (OSError, ValueError) as e:
        logger.error(f"Could not open HID device {vendor_id:#06x}:{product_id:#06x}: {e}")
        raise DeviceNotFoundError(original_error=str(e)) from e

    identifier = UsbDeviceId(
        manufacturer=_descriptor_string(handle.get_manufacturer_string),
        product=_descriptor_string(handle.get_product_string),
        serial=_descriptor_string(handle.get_serial_number_string),
    )
    logger.info(f"Opened USB device '{identifier}'")
    return UsbLight(handle, identifier)
