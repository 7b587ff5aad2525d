"""Yahoo Finance quote page: reads the embedded JSON bootstrap payload."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from earningsdate.errors import ExtractionError
from earningsdate.models.earnings import AnnounceTime, EarningsDateTime
from earningsdate.sources.base import BaseEarningsSource

PAYLOAD_PREFIX = "root.App.main = "

_EARNINGS_PATH: tuple[str | int, ...] = (
    "context", "dispatcher", "stores", "QuoteSummaryStore",
    "calendarEvents", "earnings", "earningsDate", 0, "raw",
)


def _dig(value: Any, path: tuple[str | int, ...]) -> Any:
    for key in path:
        try:
            value = value[key]
        except (KeyError, IndexError, TypeError):
            return None
    return value


class YahooSource(BaseEarningsSource):
    name = "Yahoo"
    url_template = "https://finance.yahoo.com/quote/{symbol}"

    def extract(self, content: str) -> EarningsDateTime | None:
        line = next(
            (ln for ln in content.splitlines() if ln.startswith(PAYLOAD_PREFIX)),
            None,
        )
        if line is None:
            raise ExtractionError("Yahoo: could not locate JSON bootstrap payload")

        # The assignment ends with a trailing semicolon.
        payload = line[len(PAYLOAD_PREFIX):].rstrip()
        if payload.endswith(";"):
            payload = payload[:-1]
        try:
            data = json.loads(payload)
        except ValueError as exc:
            raise ExtractionError("Yahoo: malformed JSON bootstrap payload") from exc

        raw = _dig(data, _EARNINGS_PATH)
        if not isinstance(raw, int) or isinstance(raw, bool):
            return None

        d = datetime.fromtimestamp(raw, tz=timezone.utc).date()
        return EarningsDateTime(date=d, time=AnnounceTime.UNKNOWN)
