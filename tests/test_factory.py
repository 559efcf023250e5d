"""Tests for open_light backend selection."""

from unittest.mock import patch

import pytest

from luxafor.devices import WebhookLight, open_light
from luxafor.exceptions import InvalidDeviceIDError, InvalidLEDError, UnsupportedCommandError
from luxafor.models import AppConfig, LedTarget


@pytest.mark.unit
class TestOpenLight:
    """Test device selector handling."""

    @patch("luxafor.devices.factory.open_usb_light")
    def test_usb(self, mock_open):
        """'usb' opens a USB light with the configured IDs."""
        config = AppConfig(usb_vendor_id=1, usb_product_id=2)

        light = open_light("usb", config)

        mock_open.assert_called_once_with(1, 2)
        assert light is mock_open.return_value
        light.set_target_led.assert_not_called()

    @patch("luxafor.devices.factory.open_usb_light")
    def test_usb_with_led(self, mock_open):
        """An LED target is applied to USB lights."""
        light = open_light("usb", led=LedTarget.BACK)

        light.set_target_led.assert_called_once_with(LedTarget.BACK)

    def test_webhook(self):
        """Anything else is a webhook device ID."""
        config = AppConfig(timeout=4.0, webhook_url="https://example.test/actions")

        light = open_light("2a0f2c73b72", config)

        assert isinstance(light, WebhookLight)
        assert str(light.identifier) == "2a0f2c73b72"
        assert light._base_url == "https://example.test/actions"
        assert light._transport.timeout == 4.0
        light.close()

    def test_webhook_invalid_id(self):
        """Bad webhook IDs are parse errors."""
        with pytest.raises(InvalidDeviceIDError):
            open_light("not-a-device")

    def test_webhook_rejects_led(self):
        """LED targeting is USB only."""
        with pytest.raises(UnsupportedCommandError) as exc_info:
            open_light("2a0f2c73b72", led=LedTarget.FRONT)

        assert exc_info.value.command == "led"
        assert exc_info.value.backend == "webhook"

    @patch("luxafor.devices.factory.RequestsTransport")
    def test_webhook_led_builds_no_transport(self, mock_transport):
        """No session is opened for a request that is refused."""
        with pytest.raises(UnsupportedCommandError):
            open_light("2a0f2c73b72", led=LedTarget.FRONT)

        mock_transport.assert_not_called()

    @patch("luxafor.devices.factory.RequestsTransport")
    def test_webhook_invalid_id_builds_no_transport(self, mock_transport):
        """ID validation happens before the transport exists."""
        with pytest.raises(InvalidDeviceIDError):
            open_light("zz")

        mock_transport.assert_not_called()

    @patch("luxafor.devices.factory.open_usb_light")
    def test_usb_bad_led_closes_handle(self, mock_open):
        """A rejected LED target does not leave the USB handle open."""
        light = mock_open.return_value
        light.set_target_led.side_effect = InvalidLEDError("7")

        with pytest.raises(InvalidLEDError):
            open_light("usb", led="7")

        light.close.assert_called_once()
