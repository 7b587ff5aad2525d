"""Earnings announcement observation models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from earningsdate.calendar import last_session


class AnnounceTime(Enum):
    """Announcement timing relative to market hours."""

    BEFORE_MARKET = "BMO"
    AFTER_MARKET = "AMC"
    UNKNOWN = ""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str | None) -> AnnounceTime:
        """Map a site label ("BMO", "*AMC", "after market close", ...) to a member."""
        if not label:
            return cls.UNKNOWN
        text = label.strip().lstrip("*").lower()
        if text in ("bmo", "before market open"):
            return cls.BEFORE_MARKET
        if text in ("amc", "after market close"):
            return cls.AFTER_MARKET
        return cls.UNKNOWN


@dataclass(frozen=True)
class EarningsDateTime:
    """A single source's claim about the next announcement.

    Attributes:
        date: Announcement date.
        time: Announcement timing, ``UNKNOWN`` when the source does not say.
    """

    date: date
    time: AnnounceTime = AnnounceTime.UNKNOWN

    def last_session(self) -> tuple[date, bool]:
        """Return the last trading session before the announcement and a fuzzy flag."""
        return last_session(self)

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.time}"


@dataclass(frozen=True)
class SourcedEarningsTime:
    """An observation tagged with the name of the source that produced it."""

    datetime: EarningsDateTime
    source: str

    def __str__(self) -> str:
        return f"{self.source}: {self.datetime}"
