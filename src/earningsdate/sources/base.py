"""Abstract base class for earnings date sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, Tag

from earningsdate.errors import EarningsDateErrorCode, ExtractionError
from earningsdate.models.earnings import EarningsDateTime


class BaseEarningsSource(ABC):
    """Abstract base for all earnings date sources.

    A source knows where a symbol's page lives (``url_template``) and how to
    pull the next announcement out of that page (``extract``). Fetching is
    left to the orchestrator so sources can be tested against static content.
    """

    #: Stable, human-readable name; unique per source.
    name: str = ""

    #: URL with a ``{symbol}`` placeholder.
    url_template: str = ""

    def url_for(self, symbol: str) -> str:
        return self.url_template.format(symbol=symbol.upper())

    @abstractmethod
    def extract(self, content: str) -> EarningsDateTime | None:
        """Extract the next earnings date from a fetched page.

        Args:
            content: Response body.

        Returns:
            The observation, or ``None`` when the page carries no date.

        Raises:
            ExtractionError: The page could not be parsed.
        """
        ...

    # --- Helpers for HTML sources ---

    @staticmethod
    def _soup(content: str) -> BeautifulSoup:
        return BeautifulSoup(content, "html.parser")

    def _select_required(self, soup: BeautifulSoup, selector: str) -> Tag:
        node = soup.select_one(selector)
        if node is None:
            raise ExtractionError(
                f"{self.name}: could not find selector {selector!r}",
                code=EarningsDateErrorCode.SELECTOR_NOT_FOUND,
            )
        return node

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
