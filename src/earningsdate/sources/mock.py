"""Mock source for testing and CI: ignores page content."""

from __future__ import annotations

from earningsdate.models.earnings import EarningsDateTime
from earningsdate.sources.base import BaseEarningsSource


class MockSource(BaseEarningsSource):
    """Source that returns a preset observation or raises a preset error.

    Use ``set_observation`` / ``set_error`` to change its behaviour between
    lookups. With neither set it reports "no date found".
    """

    def __init__(
        self,
        name: str = "Mock",
        observation: EarningsDateTime | None = None,
        error: Exception | None = None,
    ) -> None:
        self.name = name
        self.url_template = f"mock://{name.lower()}/{{symbol}}"
        self._observation = observation
        self._error = error
        self.calls: list[str] = []

    def set_observation(self, observation: EarningsDateTime | None) -> None:
        self._observation = observation
        self._error = None

    def set_error(self, error: Exception) -> None:
        self._error = error

    def extract(self, content: str) -> EarningsDateTime | None:
        self.calls.append(content)
        if self._error is not None:
            raise self._error
        return self._observation
