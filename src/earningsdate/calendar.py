"""Trading-day arithmetic used to group earnings observations by session.

Weekends are the only non-trading days considered here; exchange holidays
are not modelled.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from earningsdate.models.earnings import EarningsDateTime

# date.weekday() values
_MONDAY = 0
_FRIDAY = 4
_SATURDAY = 5
_SUNDAY = 6


def is_trading_day(d: date) -> bool:
    """Check if a date is a weekday."""
    return d.weekday() < _SATURDAY


def closest_trading_day(d: date) -> date:
    """Get the closest trading day, always stepping backwards off a weekend."""
    wd = d.weekday()
    if wd == _SATURDAY:
        return d - timedelta(days=1)
    if wd == _SUNDAY:
        return d - timedelta(days=2)
    return d


def next_trading_day(d: date) -> date:
    """Trading day after ``d``. Raises OverflowError past ``date.max``."""
    wd = d.weekday()
    if wd == _FRIDAY:
        return d + timedelta(days=3)
    if wd == _SATURDAY:
        return d + timedelta(days=2)
    return d + timedelta(days=1)


def prev_trading_day(d: date) -> date:
    """Trading day before ``d``. Raises OverflowError before ``date.min``."""
    wd = d.weekday()
    if wd == _MONDAY:
        return d - timedelta(days=3)
    if wd == _SUNDAY:
        return d - timedelta(days=2)
    return d - timedelta(days=1)


def last_session(observation: EarningsDateTime) -> tuple[date, bool]:
    """Last trading session before the announcement, plus a fuzzy flag.

    A before-market announcement is priced in by the previous session; an
    after-market one by the same day's session. With unknown timing the
    announcement date itself is returned and flagged fuzzy, since the real
    session may be either neighbour.

    Raises:
        OverflowError: A before-market announcement on the first
            representable trading day has no previous session.
    """
    from earningsdate.models.earnings import AnnounceTime

    if observation.time is AnnounceTime.BEFORE_MARKET:
        return prev_trading_day(observation.date), False
    if observation.time is AnnounceTime.AFTER_MARKET:
        return observation.date, False
    return observation.date, True
