"""Reconciled earnings date estimate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any

from earningsdate.models.earnings import SourcedEarningsTime

if TYPE_CHECKING:
    import pandas as pd

BUCKETS = ("concurrence", "close_disagreement", "far_disagreement")


@dataclass(frozen=True)
class EarningsGuess:
    """Best guess for the last trading session before the next announcement.

    Attributes:
        last_session: Selected trading session.
        concurrences: Observations that voted for ``last_session``.
        close_disagreements: Observations one trading day away.
        far_disagreements: Everything else.
        votes: Number of votes ``last_session`` received, spillover included.
    """

    last_session: date
    concurrences: list[SourcedEarningsTime] = field(default_factory=list)
    close_disagreements: list[SourcedEarningsTime] = field(default_factory=list)
    far_disagreements: list[SourcedEarningsTime] = field(default_factory=list)
    votes: int = 0

    @property
    def sources(self) -> set[str]:
        return {
            obs.source
            for bucket in (self.concurrences, self.close_disagreements, self.far_disagreements)
            for obs in bucket
        }

    def _rows(self) -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = []
        for bucket, observations in zip(
            BUCKETS,
            (self.concurrences, self.close_disagreements, self.far_disagreements),
        ):
            for obs in observations:
                rows.append({
                    "source": obs.source,
                    "date": obs.datetime.date,
                    "time": str(obs.datetime.time),
                    "bucket": bucket,
                })
        return rows

    def to_dict(self) -> dict:
        def _encode(observations: list[SourcedEarningsTime]) -> list[dict]:
            return [
                {
                    "source": obs.source,
                    "date": obs.datetime.date.isoformat(),
                    "time": str(obs.datetime.time),
                }
                for obs in observations
            ]

        return {
            "last_session": self.last_session.isoformat(),
            "votes": self.votes,
            "concurrences": _encode(self.concurrences),
            "close_disagreements": _encode(self.close_disagreements),
            "far_disagreements": _encode(self.far_disagreements),
        }

    def to_dataframe(self) -> "pd.DataFrame":
        """One row per bucketed observation, with a ``bucket`` column."""
        import pandas as pd

        return pd.DataFrame(self._rows(), columns=["source", "date", "time", "bucket"])
