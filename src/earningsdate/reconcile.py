"""Reconcile conflicting earnings dates into a single best guess.

Observations are grouped by the trading session they imply. An observation
with known timing votes for exactly one session; one with unknown timing
also votes for both neighbouring sessions, since it is unclear which side of
the session boundary the announcement falls on. The session on or after
today with the most votes wins, earliest date first on a tie.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Sequence

from earningsdate.calendar import next_trading_day, prev_trading_day
from earningsdate.errors import EarningsDateErrorCode, ReconciliationError
from earningsdate.models.earnings import SourcedEarningsTime
from earningsdate.models.guess import EarningsGuess


class Placement(Enum):
    """How a vote ended up at a session."""

    EXACT = "exact"  # timing known, own session
    FUZZY = "fuzzy"  # timing unknown, own session
    SPILLOVER = "spillover"  # timing unknown, neighbouring session


@dataclass(frozen=True)
class Vote:
    observation: SourcedEarningsTime
    placement: Placement


def _neighbours(session: date) -> list[date]:
    """Previous then next trading day, leaving out any outside the date range."""
    result: list[date] = []
    for step in (prev_trading_day, next_trading_day):
        try:
            result.append(step(session))
        except OverflowError:
            continue
    return result


def place_votes(
    observations: Iterable[SourcedEarningsTime],
) -> dict[date, list[Vote]]:
    """Group observations by implied session, spilling fuzzy ones to neighbours.

    An observation whose session falls outside the representable date range
    places no vote.
    """
    votes: dict[date, list[Vote]] = defaultdict(list)
    for obs in observations:
        try:
            session, fuzzy = obs.datetime.last_session()
        except OverflowError:
            continue
        if not fuzzy:
            votes[session].append(Vote(obs, Placement.EXACT))
            continue
        votes[session].append(Vote(obs, Placement.FUZZY))
        for neighbour in _neighbours(session):
            votes[neighbour].append(Vote(obs, Placement.SPILLOVER))
    return dict(votes)


def select_session(votes: dict[date, list[Vote]], today: date) -> tuple[date, int]:
    """Pick the most-voted session on or after ``today``.

    Returns:
        ``(session, vote_count)``.

    Raises:
        ReconciliationError: Every session lies in the past.
    """
    candidates = [(session, len(v)) for session, v in votes.items() if session >= today]
    if not candidates:
        latest = max(votes) if votes else None
        raise ReconciliationError(
            f"No earnings session on or after {today.isoformat()} "
            f"(latest candidate: {latest.isoformat() if latest else 'none'})",
            code=EarningsDateErrorCode.NO_CANDIDATE,
        )
    return min(candidates, key=lambda c: (-c[1], c[0]))


def _unique_by_source(
    votes: Iterable[Vote],
    exclude: set[str],
) -> list[SourcedEarningsTime]:
    seen = set(exclude)
    result: list[SourcedEarningsTime] = []
    for vote in votes:
        source = vote.observation.source
        if source in seen:
            continue
        seen.add(source)
        result.append(vote.observation)
    return result


def best_earnings_guess(
    observations: Sequence[SourcedEarningsTime],
    today: date,
) -> EarningsGuess:
    """Reconcile observations from several sources into one estimate.

    Args:
        observations: At most one observation per source.
        today: Sessions before this date are never selected.

    Returns:
        The winning session plus every source sorted into concurrences,
        close disagreements (one trading day off) and far disagreements.
        Each source lands in exactly one bucket.

    Raises:
        ReconciliationError: ``observations`` is empty (code ``NO_DATA``), or
            no session lies on or after ``today`` (code ``NO_CANDIDATE``).
    """
    if not observations:
        raise ReconciliationError(
            "No earnings observations to reconcile",
            code=EarningsDateErrorCode.NO_DATA,
        )

    votes = place_votes(observations)
    best, count = select_session(votes, today)

    concurrences = _unique_by_source(votes.pop(best), set())
    placed = {obs.source for obs in concurrences}

    close_votes = [vote for day in _neighbours(best) for vote in votes.pop(day, [])]
    close_disagreements = _unique_by_source(close_votes, placed)
    placed.update(obs.source for obs in close_disagreements)

    far_votes = (vote for session in sorted(votes) for vote in votes[session])
    far_disagreements = _unique_by_source(far_votes, placed)
    placed.update(obs.source for obs in far_disagreements)
    # Observations that placed no vote at all.
    far_disagreements += [obs for obs in observations if obs.source not in placed]

    return EarningsGuess(
        last_session=best,
        concurrences=concurrences,
        close_disagreements=close_disagreements,
        far_disagreements=far_disagreements,
        votes=count,
    )
