"""HTTP transport for webhook lights."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class HttpResult:
    """Status and body of a completed HTTP call."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status_code < 300


class WebhookTransport(Protocol):
    """POST JSON and report the status; raises requests.RequestException on failure."""

    def post(self, url: str, body: dict[str, Any]) -> HttpResult:
        ...


class RequestsTransport:
    """
    WebhookTransport backed by a requests Session.

    The session is reused across calls made through the same transport.
    Every POST applies the configured timeout.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None):
        """
        Initialize transport.

        Args:
            timeout: Connect/read timeout in seconds
            session: Optional session to use (a new one is created if None)
        """
        self.timeout = timeout
        self._session = session or requests.Session()

    def post(self, url: str, body: dict[str, Any]) -> HttpResult:
        """
        POST a JSON body.

        Raises:
            requests.RequestException: Connection, TLS or timeout failure
        """
        response = self._session.post(
            url,
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        return HttpResult(status_code=response.status_code, text=response.text)

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()
