"""Earnings date models."""

from earningsdate.models.earnings import AnnounceTime, EarningsDateTime, SourcedEarningsTime
from earningsdate.models.guess import EarningsGuess

__all__ = [
    "AnnounceTime",
    "EarningsDateTime",
    "SourcedEarningsTime",
    "EarningsGuess",
]
