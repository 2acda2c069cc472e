"""Decode JSON response bodies into envelopes.

Every endpoint answers with an object carrying an ``ok`` flag. When the flag
is set the rest of the object is the payload; when it is not, the object has
an ``error`` string instead. The flag is read on its own first, then the body
is decoded a second time into whichever of the two shapes applies.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError

from .errors import ApiError, MalformedResponseError
from .schemas import ResponseBookings, ResponseEquipment, ResponseRooms

logger = logging.getLogger("roombookings")

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


class _Status(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ok: Optional[StrictBool] = False


class _ErrorPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    error: str


def error_message(body: bytes) -> str:
    """Return the ``error`` string of a failed response, or "" if unreadable."""
    try:
        return _ErrorPayload.model_validate_json(body).error
    except ValidationError:
        logger.warning("Service reported a failure without a readable error message")
        return ""


def decode_response(body: bytes, shape: type[EnvelopeT]) -> EnvelopeT:
    """Decode ``body`` into ``shape`` or raise the matching error.

    Raises MalformedResponseError when the body is not a JSON object or the
    payload does not fit ``shape``, ParseError for a bad timestamp inside the
    payload, and ApiError when the service set ``ok`` to false.
    """
    try:
        status = _Status.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedResponseError(f"response is not a valid envelope: {exc}", body) from exc

    if not status.ok:
        raise ApiError(error_message(body), envelope=shape())

    try:
        return shape.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"response does not match {shape.__name__}: {exc}", body
        ) from exc


def read_rooms(body: bytes) -> ResponseRooms:
    return decode_response(body, ResponseRooms)


def read_bookings(body: bytes) -> ResponseBookings:
    return decode_response(body, ResponseBookings)


def read_equipment(body: bytes) -> ResponseEquipment:
    return decode_response(body, ResponseEquipment)
