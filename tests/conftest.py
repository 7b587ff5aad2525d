"""Shared fixtures for earningsdate tests."""

from __future__ import annotations

import sys
import threading
from datetime import date
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

import requests

from earningsdate.models.earnings import AnnounceTime, EarningsDateTime, SourcedEarningsTime
from earningsdate.sources.mock import MockSource


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class FakeSession:
    """Stands in for ``requests.Session``; maps URL -> response or exception.

    Unknown URLs get an empty 200 response.
    """

    def __init__(self, routes: dict[str, FakeResponse | Exception] | None = None) -> None:
        self.routes = routes or {}
        self.requested: list[str] = []
        self.timeouts: list[float | None] = []
        self.closed = False
        self._lock = threading.Lock()

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        with self._lock:
            self.requested.append(url)
            self.timeouts.append(timeout)
        route = self.routes.get(url, FakeResponse())
        if isinstance(route, Exception):
            raise route
        return route

    def close(self) -> None:
        self.closed = True


def sourced(
    source: str,
    d: date,
    time: AnnounceTime = AnnounceTime.UNKNOWN,
) -> SourcedEarningsTime:
    return SourcedEarningsTime(datetime=EarningsDateTime(date=d, time=time), source=source)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def mock_sources() -> list[MockSource]:
    """Three mock sources: two with dates, one with none."""
    return [
        MockSource("Alpha", EarningsDateTime(date(2024, 3, 7), AnnounceTime.AFTER_MARKET)),
        MockSource("Beta", EarningsDateTime(date(2024, 3, 8), AnnounceTime.BEFORE_MARKET)),
        MockSource("Gamma"),
    ]


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
