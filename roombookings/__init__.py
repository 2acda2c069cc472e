"""Client library for the UCL API room bookings service."""

from .client import RoomBookingsClient
from .config import Settings, get_settings
from .errors import (
    ApiError,
    EncodingError,
    MalformedResponseError,
    NoNextPageError,
    ParseError,
    RoomBookingsError,
    TransportError,
)
from .query import encode_query, query_params
from .responses import decode_response
from .schemas import (
    Booking,
    BookingOptList,
    Equipment,
    Location,
    ResponseBookings,
    ResponseEquipment,
    ResponseRooms,
    Room,
    RoomKind,
    RoomOptList,
)
from .timecodecs import DateCodec, DateTimeCodec
from .transport import HttpxTransport, Transport

__all__ = [
    "ApiError",
    "Booking",
    "BookingOptList",
    "DateCodec",
    "DateTimeCodec",
    "EncodingError",
    "Equipment",
    "HttpxTransport",
    "Location",
    "MalformedResponseError",
    "NoNextPageError",
    "ParseError",
    "ResponseBookings",
    "ResponseEquipment",
    "ResponseRooms",
    "Room",
    "RoomBookingsClient",
    "RoomBookingsError",
    "RoomKind",
    "RoomOptList",
    "Settings",
    "Transport",
    "TransportError",
    "decode_response",
    "encode_query",
    "get_settings",
    "query_params",
]
