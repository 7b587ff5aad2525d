"""Bloomberg quote page: date only, no session timing."""

from __future__ import annotations

from datetime import datetime

from earningsdate.errors import ExtractionError
from earningsdate.models.earnings import AnnounceTime, EarningsDateTime
from earningsdate.sources.base import BaseEarningsSource


class BloombergSource(BaseEarningsSource):
    """Reads the "next announcement date" field of a Bloomberg quote page."""

    name = "Bloomberg"
    url_template = "https://www.bloomberg.com/quote/{symbol}:US"

    SELECTOR = 'span[class^="nextAnnouncementDate"]'
    DATE_FORMAT = "%m/%d/%Y"

    def extract(self, content: str) -> EarningsDateTime | None:
        node = self._soup(content).select_one(self.SELECTOR)
        if node is None:
            return None
        text = node.find(string=True)
        if text is None or not text.strip():
            return None

        try:
            d = datetime.strptime(text.strip(), self.DATE_FORMAT).date()
        except ValueError as exc:
            raise ExtractionError(f"Bloomberg: parsing date {text.strip()!r}") from exc
        return EarningsDateTime(date=d, time=AnnounceTime.UNKNOWN)
