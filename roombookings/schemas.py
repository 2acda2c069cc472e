"""Pydantic schemas for room bookings requests and responses."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .timecodecs import Day, IsoDateTime


class RoomKind(str, Enum):
    """Room classification codes used by the service."""

    CLASS_ROOM = "CR"
    LECTURE_THEATRE = "LT"
    SOCIAL_SPACE = "SS"
    PUBLIC_CLUSTER = "PC1"


def _null_as_empty(value: Any) -> Any:
    return [] if value is None else value


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class RoomOptList(_Frozen):
    """Optional filters for the rooms endpoint."""

    room_id: Optional[str] = Field(default=None, alias="roomid")
    room_name: Optional[str] = Field(default=None, alias="roomname")
    site_id: Optional[str] = Field(default=None, alias="siteid")
    site_name: Optional[str] = Field(default=None, alias="sitename")
    classification: Optional[RoomKind] = None
    capacity: Optional[int] = None


class BookingOptList(_Frozen):
    """Optional filters for the bookings endpoint."""

    room_id: Optional[str] = Field(default=None, alias="roomid")
    room_name: Optional[str] = Field(default=None, alias="roomname")
    site_id: Optional[str] = Field(default=None, alias="siteid")
    description: Optional[str] = None
    contact: Optional[str] = None
    day: Optional[Day] = Field(default=None, alias="date")
    start_time: Optional[IsoDateTime] = Field(default=None, alias="start_datetime")
    end_time: Optional[IsoDateTime] = Field(default=None, alias="end_datetime")
    results_per_page: Optional[int] = Field(default=None, alias="result_per_page")


class Location(_Frozen):
    """Postal address of a room, one entry per line."""

    address: Annotated[List[str], BeforeValidator(_null_as_empty)] = Field(default_factory=list)

    @property
    def full_address(self) -> str:
        return ", ".join(line for line in self.address if line)


class Room(_Frozen):
    """Single bookable room."""

    room_id: str = Field(alias="roomid")
    room_name: str = Field(default="", alias="roomname")
    site_id: str = Field(default="", alias="siteid")
    site_name: str = Field(default="", alias="sitename")
    # Codes the client does not know about are kept as plain strings.
    classification: Union[RoomKind, str] = Field(default="", union_mode="left_to_right")
    capacity: int = 0
    automated: bool = False
    location: Location = Field(default_factory=Location)


class Booking(_Frozen):
    """Single booked slot."""

    slot_id: Optional[int] = Field(default=None, alias="slotid")
    contact: Optional[str] = None
    start_time: IsoDateTime
    end_time: IsoDateTime
    room_id: Optional[str] = Field(default=None, alias="roomid")
    room_name: Optional[str] = Field(default=None, alias="roomname")
    site_id: Optional[str] = Field(default=None, alias="siteid")
    week_number: Optional[int] = Field(default=None, alias="weeknumber")
    phone: Optional[str] = None
    description: Optional[str] = None


class Equipment(_Frozen):
    """Piece of equipment installed in a room."""

    type: str = ""
    description: str = ""
    units: int = 0


class ResponseRooms(_Frozen):
    """Envelope for the rooms endpoint."""

    ok: bool = False
    rooms: Annotated[List[Room], BeforeValidator(_null_as_empty)] = Field(default_factory=list)


class ResponseBookings(_Frozen):
    """Envelope for the bookings endpoint, including pagination state."""

    ok: bool = False
    next_page_exists: bool = False
    count: Optional[int] = None
    page_token: str = ""
    bookings: Annotated[List[Booking], BeforeValidator(_null_as_empty)] = Field(default_factory=list)


class ResponseEquipment(_Frozen):
    """Envelope for the equipment endpoint."""

    ok: bool = False
    equipment: Annotated[List[Equipment], BeforeValidator(_null_as_empty)] = Field(default_factory=list)
