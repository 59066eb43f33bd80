"""Pluggable transport and clock used by the API client.

The client never talks to the network itself. It awaits a `Transport`
callable and reads the status and JSON body from whatever it returns. The
default implementation is backed by httpx; tests inject recording fakes or an
`httpx.MockTransport`.
"""

import time
from typing import Any, Mapping, Protocol

import httpx

from arena_client.config import Config


class TransportResponse(Protocol):
    """The parts of an HTTP response the client reads.

    `httpx.Response` satisfies this protocol.
    """

    status_code: int
    reason_phrase: str

    def json(self) -> Any:
        """Decode the response body as JSON."""
        ...


class Transport(Protocol):
    """An async callable performing a single HTTP request."""

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes | None = None,
    ) -> TransportResponse:
        """Send the request and return its response."""
        ...


class Clock(Protocol):
    """Time source for the cache-busting `date` query parameter."""

    def now(self) -> int:
        """Return the current time in epoch milliseconds."""
        ...


class SystemClock:
    """Wall-clock time in epoch milliseconds."""

    def now(self) -> int:
        return int(time.time() * 1000)


class HttpxTransport:
    """Default transport that sends each request with a short-lived httpx client.

    An `httpx.AsyncBaseTransport` may be passed to route requests somewhere
    other than the network, e.g. `httpx.MockTransport` in tests.
    """

    def __init__(
        self,
        timeout: float = Config.DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Timeout for each HTTP request in seconds.
            transport: Optional low-level httpx transport to send requests through.
        """
        self.timeout = timeout
        self.transport = transport

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes | None = None,
    ) -> httpx.Response:
        """Send a request and return the response with its body loaded.

        Raises:
            httpx.RequestError: For network-related issues.
        """
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            return await client.request(
                method, url, headers=dict(headers), content=content
            )
