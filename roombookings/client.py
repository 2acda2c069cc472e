"""Client for the room bookings API."""

from __future__ import annotations

import logging
from typing import Iterator

from .config import Settings, get_settings
from .errors import NoNextPageError
from .query import encode_query, query_params
from .responses import read_bookings, read_equipment, read_rooms
from .schemas import (
    Booking,
    BookingOptList,
    ResponseBookings,
    ResponseEquipment,
    ResponseRooms,
    RoomOptList,
)
from .transport import HttpxTransport, Transport

logger = logging.getLogger("roombookings")


class RoomBookingsClient:
    """Query rooms, bookings and equipment with a bearer token.

    The client keeps no state besides the token and its transport, so one
    instance can be reused for any number of calls.
    """

    def __init__(
        self,
        token: str,
        *,
        transport: Transport | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._token = token
        self._settings = settings or get_settings()
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport(self._settings)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RoomBookingsClient":
        """Build a client using the token from configuration."""
        settings = settings or get_settings()
        if not settings.token:
            raise ValueError("UCLAPI_TOKEN is not configured")
        return cls(settings.token, settings=settings)

    @property
    def token(self) -> str:
        return self._token

    def build_url(self, path: str, query: str) -> str:
        return f"{self._settings.base_url}{path}?{query}"

    def _get(self, path: str, params: dict[str, str]) -> bytes:
        params["token"] = self._token
        url = self.build_url(path, encode_query(params))
        logger.debug("GET %s (%d parameters)", path, len(params))
        headers = {self._settings.version_header: self._settings.api_version}
        return self._transport.get(url, headers)

    def get_rooms(self, options: RoomOptList | None = None) -> ResponseRooms:
        """Return the rooms matching ``options``."""
        params = query_params(options if options is not None else RoomOptList())
        return read_rooms(self._get("rooms", params))

    def get_bookings(self, options: BookingOptList | None = None) -> ResponseBookings:
        """Return the first page of bookings matching ``options``."""
        params = query_params(options if options is not None else BookingOptList())
        return read_bookings(self._get("bookings", params))

    def get_equipment(self, room_id: str, site_id: str) -> ResponseEquipment:
        """Return the equipment installed in one room."""
        params = {"roomid": room_id, "siteid": site_id}
        return read_equipment(self._get("equipment", params))

    def next_page(self, previous: ResponseBookings) -> ResponseBookings:
        """Fetch the page that follows ``previous``.

        Raises NoNextPageError without touching the network when
        ``previous`` is the last page.
        """
        if not previous.next_page_exists:
            raise NoNextPageError()
        params = {"page_token": previous.page_token}
        return read_bookings(self._get("bookings", params))

    def iter_bookings(self, options: BookingOptList | None = None) -> Iterator[Booking]:
        """Yield every booking matching ``options`` across all pages."""
        page = self.get_bookings(options)
        while True:
            yield from page.bookings
            if not page.next_page_exists:
                return
            page = self.next_page(page)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "RoomBookingsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
