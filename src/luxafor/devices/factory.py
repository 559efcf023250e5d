"""Backend composition: turn a device selector into a Light."""

import logging

from luxafor.exceptions import InvalidLEDError, UnsupportedCommandError
from luxafor.models import AppConfig, LedTarget, parse_device_id
from .protocols import Light
from .usb import open_usb_light
from .webhook import RequestsTransport, WebhookLight

logger = logging.getLogger(__name__)

DEVICE_CONNECTION_USB = "usb"


def open_light(device: str, config: AppConfig | None = None, led: LedTarget | None = None) -> Light:
    """
    Open a light from a device selector.

    "usb" opens the first USB light; any other value is parsed as a
    webhook device ID. LED targeting is applied here, on the USB branch
    only, so webhook lights never receive a target.

    Args:
        device: "usb" or a webhook device ID
        config: Application config (defaults used if None)
        led: Optional LED target (USB only)

    Raises:
        DeviceNotFoundError: No USB light could be opened
        InvalidDeviceIDError: Webhook device ID is not hexadecimal
        InvalidLEDError: LED target is not valid (the USB handle is closed)
        UnsupportedCommandError: LED target given for a webhook device; no
            transport is created
    """
    config = config or AppConfig()

    if device == DEVICE_CONNECTION_USB:
        light = open_usb_light(config.usb_vendor_id, config.usb_product_id)
        logger.debug(f"USB device: '{light.identifier}'")
        if led is not None:
            try:
                light.set_target_led(led)
            except InvalidLEDError:
                light.close()
                raise
        return light

    device_id = parse_device_id(device)
    if led is not None:
        raise UnsupportedCommandError("led", "webhook", device_id=str(device_id))

    logger.debug(f"Webhook device: '{device_id}'")
    return WebhookLight(
        device_id,
        RequestsTransport(timeout=config.timeout),
        base_url=config.webhook_url,
    )
