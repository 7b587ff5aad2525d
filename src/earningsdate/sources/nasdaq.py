"""Nasdaq earnings report page.

Not part of the default source set: the site rejects most scrapers and its
figures are republished from Zacks anyway. Enable it explicitly through
``EarningsDateConfig.sources``.
"""

from __future__ import annotations

import re
from datetime import datetime

from earningsdate.errors import ExtractionError
from earningsdate.models.earnings import AnnounceTime, EarningsDateTime
from earningsdate.sources.base import BaseEarningsSource

_EARNINGS_RE = re.compile(
    r"earnings on\s*(\d{1,2}/\d{1,2}/\d{4})\s*(after market close|before market open)?"
)


class NasdaqSource(BaseEarningsSource):
    name = "NASDAQ"
    url_template = "http://www.nasdaq.com/earnings/report/{symbol}"

    SELECTOR = "#two_column_main_content_reportdata"

    def extract(self, content: str) -> EarningsDateTime | None:
        node = self._soup(content).select_one(self.SELECTOR)
        if node is None:
            return None
        match = _EARNINGS_RE.search(node.get_text(" ", strip=True))
        if match is None:
            return None

        try:
            d = datetime.strptime(match.group(1), "%m/%d/%Y").date()
        except ValueError as exc:
            raise ExtractionError(f"NASDAQ: parsing date {match.group(1)!r}") from exc
        return EarningsDateTime(date=d, time=AnnounceTime.from_label(match.group(2)))
