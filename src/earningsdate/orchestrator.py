"""Concurrent fan-out over all earnings sources for one symbol.

Every source is fetched and parsed in its own worker thread. Each task
reports a tagged ``SourceOutcome`` instead of letting exceptions escape, so
one failing site never affects the others, and ``gather`` only returns once
every task has finished.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

import requests

from earningsdate.errors import EarningsDateError, ExtractionError, TransportError
from earningsdate.models.earnings import SourcedEarningsTime
from earningsdate.sources.base import BaseEarningsSource

logger = logging.getLogger(__name__)


class OutcomeStatus(Enum):
    OK = "ok"
    NO_DATA = "no_data"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceOutcome:
    """Result of querying a single source.

    Attributes:
        source: Source name.
        url: URL that was fetched.
        status: OK, NO_DATA or FAILED.
        observation: Set when ``status`` is OK.
        error: Set when ``status`` is FAILED.
    """

    source: str
    url: str
    status: OutcomeStatus
    observation: SourcedEarningsTime | None = None
    error: BaseException | None = None


def format_cause_chain(exc: BaseException) -> str:
    """Render an exception and its causes, one per line."""
    messages: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        messages.append(str(current) or type(current).__name__)
        current = current.__cause__ or current.__context__
    return "\n  ".join(messages)


def _fetch(client: Any, url: str, timeout: float | None) -> str:
    try:
        response = client.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"URL {url}", url=url) from exc
    except Exception as exc:
        raise TransportError(f"URL {url}: {exc}", url=url) from exc

    if not response.ok:
        raise TransportError(
            f"URL {url}: HTTP {response.status_code}", url=url,
        )
    return response.text


def _query_source(
    source: BaseEarningsSource,
    symbol: str,
    client: Any,
    timeout: float | None,
) -> SourceOutcome:
    url = source.url_template
    try:
        try:
            url = source.url_for(symbol)
        except Exception as exc:
            raise ExtractionError(
                f"{source.name}: building URL from {url!r}", url=url,
            ) from exc
        content = _fetch(client, url, timeout)
        try:
            observation = source.extract(content)
        except Exception as exc:
            raise ExtractionError(f"URL {url}", url=url) from exc
    except EarningsDateError as exc:
        return SourceOutcome(source.name, url, OutcomeStatus.FAILED, error=exc)

    if observation is None:
        return SourceOutcome(source.name, url, OutcomeStatus.NO_DATA)

    return SourceOutcome(
        source.name,
        url,
        OutcomeStatus.OK,
        observation=SourcedEarningsTime(datetime=observation, source=source.name),
    )


def gather_outcomes(
    symbol: str,
    sources: Sequence[BaseEarningsSource],
    client: Any,
    timeout: float | None = None,
    max_workers: int | None = None,
) -> list[SourceOutcome]:
    """Query every source concurrently and return one outcome per source.

    Outcomes are returned in ``sources`` order. Blocks until all tasks have
    completed.

    Raises:
        ValueError: Two sources share a name.
    """
    if not sources:
        return []
    names = [source.name for source in sources]
    if len(set(names)) != len(names):
        raise ValueError(f"Source names must be unique: {names}")

    workers = max_workers or len(sources)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="earnings") as pool:
        futures = [
            pool.submit(_query_source, source, symbol, client, timeout)
            for source in sources
        ]
        return [f.result() for f in futures]


def gather(
    symbol: str,
    sources: Sequence[BaseEarningsSource],
    client: Any,
    log: logging.Logger | None = None,
    timeout: float | None = None,
    max_workers: int | None = None,
) -> list[SourcedEarningsTime]:
    """Collect one observation per source that reported a date.

    Never raises for source failures: failed sources are logged at ERROR
    with their cause chain, sources without a date at WARNING, and both are
    left out of the result.

    Args:
        symbol: Ticker symbol.
        sources: Sources to query; names must be unique.
        client: Shared HTTP client exposing ``get(url, timeout=...)``,
            typically a ``requests.Session``.
        log: Logger override; defaults to this module's logger.
        timeout: Per-request timeout in seconds.
        max_workers: Thread pool size; defaults to one thread per source.

    Returns:
        Between 0 and ``len(sources)`` observations.
    """
    log = log or logger

    observations: list[SourcedEarningsTime] = []
    for outcome in gather_outcomes(symbol, sources, client, timeout, max_workers):
        if outcome.status is OutcomeStatus.FAILED:
            log.error("%s", format_cause_chain(outcome.error))
        elif outcome.status is OutcomeStatus.NO_DATA:
            log.warning("URL %s had no earnings date", outcome.url)
        else:
            log.debug("%s", outcome.observation)
            observations.append(outcome.observation)
    return observations
