"""Zacks quote page."""

from __future__ import annotations

from datetime import datetime

from bs4 import NavigableString

from earningsdate.errors import ExtractionError
from earningsdate.models.earnings import AnnounceTime, EarningsDateTime
from earningsdate.sources.base import BaseEarningsSource


class ZacksSource(BaseEarningsSource):
    """Reads the "Exp Earnings Date" row of the Zacks key-earnings table.

    The cell holds the date as a bare text node followed by an optional
    ``<sup>*AMC</sup>`` / ``<sup>*BMO</sup>`` marker. Unlike the other pages
    the table is always present, so a missing cell is treated as a layout
    change rather than "no date".
    """

    name = "Zacks"
    url_template = "https://www.zacks.com/stock/quote/{symbol}"

    SELECTOR = "#stock_key_earnings > table > tbody > tr:nth-child(5) > td:nth-child(2)"
    DATE_FORMAT = "%m/%d/%y"

    def extract(self, content: str) -> EarningsDateTime | None:
        cell = self._select_required(self._soup(content), self.SELECTOR)

        sup = cell.find("sup")
        label = sup.get_text(strip=True) if sup is not None else None
        announce_time = AnnounceTime.from_label(label)

        text = next(
            (child for child in cell.children if isinstance(child, NavigableString)),
            None,
        )
        if text is None or not text.strip():
            return None

        try:
            d = datetime.strptime(text.strip(), self.DATE_FORMAT).date()
        except ValueError as exc:
            raise ExtractionError(f"Zacks: parsing date {text.strip()!r}") from exc
        return EarningsDateTime(date=d, time=announce_time)
