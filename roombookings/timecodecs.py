"""Timestamp formats used by the room bookings API.

Two codecs exist. ``DateTimeCodec`` handles full ISO-8601 timestamps with a
``+HH:MM`` offset and works in both directions. ``DateCodec`` only writes the
``YYYYMMDD`` form used by the ``date`` query filter.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from .errors import ParseError

logger = logging.getLogger("roombookings")

_DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}$")


def _format_offset(offset: timedelta) -> str:
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


class DateTimeCodec:
    """Encode and decode ``YYYY-MM-DDTHH:MM:SS+HH:MM`` timestamps."""

    FORMAT = "%Y-%m-%dT%H:%M:%S%z"

    @staticmethod
    def encode(value: datetime | None) -> str | None:
        """Return the wire form, or None when there is nothing to send.

        Naive datetimes are taken to be in the local timezone.
        """
        if value is None:
            return None
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.astimezone()
        return value.strftime("%Y-%m-%dT%H:%M:%S") + _format_offset(value.utcoffset())

    @classmethod
    def decode(cls, value: str) -> datetime:
        """Parse a wire timestamp, raising ParseError on anything else."""
        if isinstance(value, str) and _DATETIME_PATTERN.match(value):
            try:
                return datetime.strptime(value, cls.FORMAT)
            except ValueError:
                pass
        logger.warning("Could not parse datetime value %r", value)
        raise ParseError(str(value))


class DateCodec:
    """Encode calendar days as ``YYYYMMDD``."""

    FORMAT = "%Y%m%d"

    @classmethod
    def encode(cls, value: date | None) -> str | None:
        if value is None:
            return None
        return value.strftime(cls.FORMAT)


def _validate_datetime(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    return DateTimeCodec.decode(value)


def _validate_day(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    return value


IsoDateTime = Annotated[
    datetime,
    BeforeValidator(_validate_datetime),
    PlainSerializer(DateTimeCodec.encode, return_type=str),
]
Day = Annotated[
    date,
    BeforeValidator(_validate_day),
    PlainSerializer(DateCodec.encode, return_type=str),
]
