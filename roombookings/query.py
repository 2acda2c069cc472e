"""Turn option objects into URL query strings."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from .errors import EncodingError


def _is_unset(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, int) and value == 0)


def _to_text(key: str, value: Any) -> str:
    if isinstance(value, (str, int)):
        return str(value)
    raise EncodingError(f"cannot encode field {key!r} of type {type(value).__name__}")


def query_params(options: BaseModel) -> dict[str, str]:
    """Return the query parameters for an options object, keyed by wire name.

    Unset fields (None, empty string, zero) are left out entirely. Time
    fields go through their codec during the dump.
    """
    if not isinstance(options, BaseModel):
        raise EncodingError(f"cannot encode {type(options).__name__} as query parameters")
    try:
        raw = options.model_dump(mode="json", by_alias=True, exclude_none=True)
    except PydanticSerializationError as exc:
        raise EncodingError(str(exc)) from exc

    params: dict[str, str] = {}
    for key, value in raw.items():
        if _is_unset(value):
            continue
        params[key] = _to_text(key, value)
    return params


def encode_query(params: Mapping[str, str]) -> str:
    """Percent-encode parameters into a query string ordered by key."""
    return urlencode(sorted(params.items()))
