"""earningsdate — next earnings date estimates for US equities.

Queries several public quote pages concurrently, extracts each one's idea
of the next earnings announcement and reconciles them into a best guess of
the last trading session before the announcement.

Quick start::

    from earningsdate import create_estimator_from_env
    with create_estimator_from_env() as est:
        guess = est.best_guess("AAPL")
        print(guess.last_session, [o.source for o in guess.concurrences])
"""

from __future__ import annotations

import os

from earningsdate.calendar import (
    closest_trading_day,
    is_trading_day,
    last_session,
    next_trading_day,
    prev_trading_day,
)
from earningsdate.config import DEFAULT_SOURCES, EarningsDateConfig, EarningsSourceType
from earningsdate.errors import (
    EarningsDateError,
    EarningsDateErrorCode,
    ExtractionError,
    ReconciliationError,
    TransportError,
)
from earningsdate.estimator import EarningsDateEstimator
from earningsdate.models.earnings import AnnounceTime, EarningsDateTime, SourcedEarningsTime
from earningsdate.models.guess import EarningsGuess
from earningsdate.orchestrator import OutcomeStatus, SourceOutcome, gather, gather_outcomes
from earningsdate.reconcile import best_earnings_guess
from earningsdate.sources import (
    SOURCE_CLASSES,
    BaseEarningsSource,
    create_source,
    source_type_for,
)

__version__ = "0.1.0"

__all__ = [
    # Estimator
    "EarningsDateEstimator",
    "create_estimator_from_env",
    # Pipeline
    "gather",
    "gather_outcomes",
    "SourceOutcome",
    "OutcomeStatus",
    "best_earnings_guess",
    # Sources
    "BaseEarningsSource",
    "SOURCE_CLASSES",
    "create_source",
    "source_type_for",
    # Config
    "EarningsDateConfig",
    "EarningsSourceType",
    "DEFAULT_SOURCES",
    # Errors
    "EarningsDateError",
    "EarningsDateErrorCode",
    "TransportError",
    "ExtractionError",
    "ReconciliationError",
    # Models
    "AnnounceTime",
    "EarningsDateTime",
    "SourcedEarningsTime",
    "EarningsGuess",
    # Calendar
    "closest_trading_day",
    "next_trading_day",
    "prev_trading_day",
    "is_trading_day",
    "last_session",
]


def create_estimator_from_env() -> EarningsDateEstimator:
    """Zero-config factory — reads source list and HTTP settings from env vars.

    Environment variables:
        EARNINGS_SOURCES: Comma-separated source list
            (default: "bloomberg,finviz,yahoo,zacks").
        EARNINGS_HTTP_TIMEOUT: Per-request timeout in seconds (default: 30).
        EARNINGS_USER_AGENT: User-Agent header (default: a desktop browser).
        EARNINGS_MAX_WORKERS: Thread pool size (default: one per source).
    """
    default_str = ",".join(st.value for st in DEFAULT_SOURCES)
    source_str = os.getenv("EARNINGS_SOURCES", default_str)
    source_types = [
        source_type_for(name)
        for name in source_str.split(",")
        if name.strip()
    ]

    config = EarningsDateConfig(
        sources=source_types,
        timeout=float(os.getenv("EARNINGS_HTTP_TIMEOUT", "30")),
    )
    user_agent = os.getenv("EARNINGS_USER_AGENT")
    if user_agent:
        config.user_agent = user_agent
    max_workers = os.getenv("EARNINGS_MAX_WORKERS")
    if max_workers:
        config.max_workers = int(max_workers)

    return EarningsDateEstimator(config)
