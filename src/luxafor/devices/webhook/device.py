"""Webhook connected light."""

import logging

import requests

from luxafor.exceptions import UnexpectedStatusError, UnsupportedCommandError, wrap_transport_error
from luxafor.models import Color, CustomColor, Pattern, WaveStyle, WebhookDeviceId, parse_device_id
from luxafor.models.config import WEBHOOK_API_V1
from .payload import WebhookRequest, color_request, pattern_request
from .transport import DEFAULT_TIMEOUT, RequestsTransport, WebhookTransport

logger = logging.getLogger(__name__)


class WebhookLight:
    """
    Light controlled through the Luxafor webhook API.

    Works for USB and Bluetooth lights registered with the Luxafor app.
    The API only has solid, blink and pattern actions: fade, strobe, wave
    and LED targeting are rejected with UnsupportedCommandError, and the pattern
    repeat count is accepted but ignored.
    """

    def __init__(
        self,
        device_id: WebhookDeviceId,
        transport: WebhookTransport | None = None,
        base_url: str = WEBHOOK_API_V1,
    ):
        """
        Initialize webhook light.

        Args:
            device_id: Webhook device identifier
            transport: HTTP transport (defaults to a RequestsTransport)
            base_url: Base URL of the webhook actions API
        """
        self._id = device_id
        self._transport = transport or RequestsTransport()
        self._base_url = base_url

    @classmethod
    def for_device(cls, device_id: str, timeout: float = DEFAULT_TIMEOUT, **kwargs) -> "WebhookLight":
        """
        Create a light from a device ID string.

        Raises:
            InvalidDeviceIDError: If device_id is not a hex string
        """
        return cls(parse_device_id(device_id), RequestsTransport(timeout=timeout), **kwargs)

    @property
    def identifier(self) -> WebhookDeviceId:
        """Identifier of this device."""
        return self._id

    def turn_off(self) -> None:
        """Turn the light off (solid black)."""
        self.set_solid(CustomColor.off())

    def set_solid(self, color: Color, blink: bool = False) -> None:
        """Set a solid or blinking color."""
        logger.info(f"Setting the color of device '{self._id}' to {color}")
        self._send(color_request(self._id, color, blink=blink))

    def set_fade(self, color: Color, duration: int) -> None:
        """Not available over webhooks."""
        raise UnsupportedCommandError("fade", "webhook", device_id=str(self._id))

    def set_strobe(self, color: Color, speed: int, repeat: int) -> None:
        """Not available over webhooks."""
        raise UnsupportedCommandError("strobe", "webhook", device_id=str(self._id))

    def set_wave(self, color: Color, style: WaveStyle, speed: int, repeat: int) -> None:
        """Not available over webhooks."""
        raise UnsupportedCommandError("wave", "webhook", device_id=str(self._id))

    def set_pattern(self, pattern: Pattern, repeat: int) -> None:
        """Show a preset pattern; the API has no repeat field so repeat is ignored."""
        logger.info(f"Setting the pattern of device '{self._id}' to {pattern}")
        logger.info(f"Repeat count {repeat} ignored, the webhook API repeats patterns itself")
        self._send(pattern_request(self._id, pattern))

    def _send(self, request: WebhookRequest) -> None:
        """
        POST a request and check the status.

        Raises:
            UnexpectedStatusError: Non-2xx response (body is logged, not kept)
            InvalidRequestError: The HTTP call itself failed
        """
        url = request.url(self._base_url)
        body = request.body.to_json_dict()
        logger.debug(f"Sending to: {url}")
        logger.debug(f"Sending data: {body}")

        try:
            result = self._transport.post(url, body)
        except requests.RequestException as e:
            logger.error(f"Webhook call to {url} failed: {e}")
            raise wrap_transport_error(e, str(self._id)) from e

        if result.ok:
            logger.info("call successful")
            return

        logger.error(f"call failed with status {result.status_code}")
        logger.error(result.text)
        raise UnexpectedStatusError(result.status_code, device_id=str(self._id))

    def close(self) -> None:
        """Release the transport's connections."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"WebhookLight({self._id})"
