"""Exceptions raised by the room bookings client."""

from __future__ import annotations

from typing import Any, Iterable


class RoomBookingsError(Exception):
    """Base class for every error raised by this package."""


class EncodingError(RoomBookingsError):
    """An options object could not be turned into query parameters."""


class TransportError(RoomBookingsError):
    """The HTTP request failed before a response body was received.

    A transport can report several underlying failures for one request; they
    are kept in order on ``causes``.
    """

    def __init__(self, message: str, causes: Iterable[BaseException] = ()) -> None:
        super().__init__(message)
        self.causes = tuple(causes)
        if self.causes:
            self.__cause__ = self.causes[0]


class MalformedResponseError(RoomBookingsError):
    """The response body is not JSON or does not have the envelope shape."""

    def __init__(self, message: str, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body


class ParseError(MalformedResponseError):
    """A datetime string did not match ``YYYY-MM-DDTHH:MM:SS+HH:MM``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid datetime {value!r}")
        self.value = value


class ApiError(RoomBookingsError):
    """The service answered with ``ok: false``.

    ``message`` is whatever the service put under ``error``; it is empty when
    that could not be read. ``envelope`` is an empty envelope of the shape
    that was requested.
    """

    def __init__(self, message: str, envelope: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.envelope = envelope


class NoNextPageError(RoomBookingsError):
    """``next_page`` was called on a response that has no next page."""

    def __init__(self) -> None:
        super().__init__("The next page doesn't exist")
