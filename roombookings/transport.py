"""HTTP transport for the room bookings API."""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

import httpx

from .config import Settings, get_settings
from .errors import TransportError

logger = logging.getLogger("roombookings")


class Transport(Protocol):
    """Anything that can perform one blocking GET and return the body."""

    def get(self, url: str, headers: Mapping[str, str]) -> bytes:
        ...


class HttpxTransport:
    """Thin wrapper around httpx for room bookings API calls."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._client = httpx.Client(
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )

    def get(self, url: str, headers: Mapping[str, str]) -> bytes:
        """Fetch ``url`` and return the raw body.

        Error statuses still return their body, since the service reports its
        own failures inside the JSON envelope.
        """
        try:
            response = self._client.get(url, headers=dict(headers))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"GET request failed: {exc}", [exc]) from exc
        if response.is_error:
            logger.debug("Room bookings API answered HTTP %s", response.status_code)
        return response.content

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
