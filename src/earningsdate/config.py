"""Earnings date estimator configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EarningsSourceType(Enum):
    """Supported earnings date sources."""

    BLOOMBERG = "bloomberg"
    FINVIZ = "finviz"
    YAHOO = "yahoo"
    ZACKS = "zacks"
    NASDAQ = "nasdaq"
    MOCK = "mock"


# Nasdaq republishes Zacks data and blocks scrapers, so it is opt-in.
DEFAULT_SOURCES: tuple[EarningsSourceType, ...] = (
    EarningsSourceType.BLOOMBERG,
    EarningsSourceType.FINVIZ,
    EarningsSourceType.YAHOO,
    EarningsSourceType.ZACKS,
)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


@dataclass
class EarningsDateConfig:
    """Configuration for EarningsDateEstimator.

    Attributes:
        sources: Sources queried on every lookup.
        timeout: Per-request HTTP timeout in seconds.
        user_agent: User-Agent header sent with every request.
        max_workers: Thread pool size; ``None`` means one thread per source.
    """

    sources: list[EarningsSourceType] = field(
        default_factory=lambda: list(DEFAULT_SOURCES)
    )
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    max_workers: int | None = None
