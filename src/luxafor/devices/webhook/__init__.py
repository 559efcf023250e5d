"""Webhook (cloud REST) backend for Luxafor lights."""

from .device import WebhookLight
from .payload import ActionFields, WebhookBody, WebhookRequest, color_request, pattern_request
from .transport import HttpResult, RequestsTransport, WebhookTransport

__all__ = [
    "ActionFields",
    "HttpResult",
    "RequestsTransport",
    "WebhookBody",
    "WebhookLight",
    "WebhookRequest",
    "WebhookTransport",
    "color_request",
    "pattern_request",
]
