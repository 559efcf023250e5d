"""Pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

from luxafor.devices.usb import UsbLight
from luxafor.devices.webhook import HttpResult, WebhookLight
from luxafor.models import UsbDeviceId, WebhookDeviceId

WEBHOOK_ID = "2a0f2c73b72"
TEST_BASE_URL = "https://example.test/webhook/v1/actions"


@pytest.fixture
def hid_handle():
    """Mock HID handle that accepts every byte it is given."""
    handle = Mock()
    handle.write.side_effect = lambda data: len(data)
    return handle


@pytest.fixture
def usb_light(hid_handle):
    """USB light writing to the mock handle."""
    return UsbLight(hid_handle, UsbDeviceId("Microchip", "LUXAFOR FLAG", "0001"))


@pytest.fixture
def transport():
    """Mock webhook transport answering 200 OK."""
    mock = Mock()
    mock.post.return_value = HttpResult(status_code=200, text="")
    return mock


@pytest.fixture
def webhook_light(transport):
    """Webhook light posting through the mock transport."""
    return WebhookLight(WebhookDeviceId(WEBHOOK_ID), transport=transport, base_url=TEST_BASE_URL)


@pytest.fixture
def config_path(tmp_path):
    """Config file path inside a temporary directory (not created)."""
    return tmp_path / "config.json"
