"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import parse_qs, urlsplit

import pytest

from roombookings.client import RoomBookingsClient
from roombookings.config import Settings

TEST_TOKEN = "test-token"


class RecordingTransport:
    """Transport double that replays canned bodies and records every call."""

    def __init__(self, bodies: Mapping[str, bytes] | None = None) -> None:
        self.bodies = dict(bodies or {})
        self.calls: list[tuple[str, dict[str, str]]] = []

    def get(self, url: str, headers: Mapping[str, str]) -> bytes:
        self.calls.append((url, dict(headers)))
        path = urlsplit(url).path.rsplit("/", 1)[-1]
        return self.bodies[path]

    def last_query(self) -> dict[str, list[str]]:
        url, _ = self.calls[-1]
        return parse_qs(urlsplit(url).query, keep_blank_values=True)


@pytest.fixture
def settings() -> Settings:
    """Settings that do not depend on the environment."""
    return Settings(
        base_url="https://uclapi.com/roombookings/",
        version_header="uclapi-roombookings-version",
        api_version="1",
        http_timeout_seconds=5,
        token=None,
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport, settings) -> RoomBookingsClient:
    """Client wired to the recording transport."""
    return RoomBookingsClient(TEST_TOKEN, transport=transport, settings=settings)
