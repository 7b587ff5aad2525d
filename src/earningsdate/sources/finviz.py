"""FinViz quote page.

The snapshot table shows the next earnings date as e.g. ``Mar 07 AMC`` with
no year, so the year is inferred relative to today.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from earningsdate.errors import ExtractionError
from earningsdate.models.earnings import AnnounceTime, EarningsDateTime
from earningsdate.sources.base import BaseEarningsSource

_EARNINGS_RE = re.compile(r"(\S+ \d{1,2})\s*(AMC|BMO)?")

# Dates this far in the past are assumed to belong to next year.
RECENT_BUFFER = timedelta(days=30)


class FinVizSource(BaseEarningsSource):
    """Reads the "Earnings" cell of the FinViz snapshot table."""

    name = "FinViz"
    url_template = "https://finviz.com/quote.ashx?t={symbol}"

    SELECTOR = "table.snapshot-table2 tr:nth-child(11) > td:nth-child(6) > b"

    def __init__(self, today: date | None = None) -> None:
        self._today = today

    @property
    def today(self) -> date:
        return self._today or date.today()

    def extract(self, content: str) -> EarningsDateTime | None:
        node = self._soup(content).select_one(self.SELECTOR)
        if node is None:
            return None
        text = node.find(string=True)
        if text is None:
            return None
        match = _EARNINGS_RE.search(text)
        if match is None:
            return None

        return EarningsDateTime(
            date=self._infer_date(match.group(1)),
            time=AnnounceTime.from_label(match.group(2)),
        )

    def _infer_date(self, month_day: str) -> date:
        today = self.today
        error: ValueError | None = None
        # "Feb 29" does not parse outside a leap year; fall through to next year.
        for year in (today.year, today.year + 1):
            try:
                d = datetime.strptime(f"{month_day} {year}", "%b %d %Y").date()
            except ValueError as exc:
                error = exc
                continue
            if year > today.year or d >= today - RECENT_BUFFER:
                return d
        raise ExtractionError(f"FinViz: parsing date {month_day!r}") from error
