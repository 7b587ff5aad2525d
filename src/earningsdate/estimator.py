"""EarningsDateEstimator — gathers from all configured sources and reconciles."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import requests

from earningsdate.config import EarningsDateConfig
from earningsdate.models.earnings import SourcedEarningsTime
from earningsdate.models.guess import EarningsGuess
from earningsdate.orchestrator import gather
from earningsdate.reconcile import best_earnings_guess
from earningsdate.sources import create_source
from earningsdate.sources.base import BaseEarningsSource

logger = logging.getLogger(__name__)


class EarningsDateEstimator:
    """Central entry point: sources -> concurrent fetch -> reconcile.

    Usage::

        from earningsdate import create_estimator_from_env
        with create_estimator_from_env() as est:
            guess = est.best_guess("AAPL")
    """

    def __init__(
        self,
        config: EarningsDateConfig | None = None,
        session: Any = None,
        sources: list[BaseEarningsSource] | None = None,
    ) -> None:
        self.config = config or EarningsDateConfig()

        if sources is None:
            sources = [create_source(st) for st in self.config.sources]
        self.sources: list[BaseEarningsSource] = sources

        # Only sessions created here are closed by close().
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.config.user_agent
        self.session = session

    # ------------------------------------------------------------- lookups

    def gather(self, symbol: str) -> list[SourcedEarningsTime]:
        """Query every source concurrently; failed sources are logged and skipped."""
        return gather(
            symbol,
            self.sources,
            self.session,
            log=logger,
            timeout=self.config.timeout,
            max_workers=self.config.max_workers,
        )

    def best_guess(self, symbol: str, today: date | None = None) -> EarningsGuess:
        """Gather observations for ``symbol`` and reconcile them.

        Raises:
            ReconciliationError: No source reported a usable date.
        """
        observations = self.gather(symbol)
        guess = best_earnings_guess(observations, today or date.today())
        logger.info(
            "%s: last session %s (%d votes, %d concurring, %d close, %d far)",
            symbol.upper(),
            guess.last_session.isoformat(),
            guess.votes,
            len(guess.concurrences),
            len(guess.close_disagreements),
            len(guess.far_disagreements),
        )
        return guess

    # ------------------------------------------------------------ lifecycle

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> EarningsDateEstimator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
