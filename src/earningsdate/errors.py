"""Earnings date error types."""

from __future__ import annotations

from enum import Enum


class EarningsDateErrorCode(Enum):
    """Error classification codes."""

    TRANSPORT_FAILED = "transport_failed"
    EXTRACTION_FAILED = "extraction_failed"
    SELECTOR_NOT_FOUND = "selector_not_found"
    NO_DATA = "no_data"
    NO_CANDIDATE = "no_candidate"


class EarningsDateError(Exception):
    """Earnings date exception with error code.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        url: Source URL the error relates to, if any.
    """

    def __init__(
        self,
        message: str,
        code: EarningsDateErrorCode = EarningsDateErrorCode.EXTRACTION_FAILED,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.url = url


class TransportError(EarningsDateError):
    """Connection failure or non-success HTTP status for one source."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, code=EarningsDateErrorCode.TRANSPORT_FAILED, url=url)


class ExtractionError(EarningsDateError):
    """A source page could not be parsed."""

    def __init__(
        self,
        message: str,
        code: EarningsDateErrorCode = EarningsDateErrorCode.EXTRACTION_FAILED,
        url: str | None = None,
    ) -> None:
        super().__init__(message, code=code, url=url)


class ReconciliationError(EarningsDateError):
    """No session on or after today could be selected."""

    def __init__(
        self,
        message: str,
        code: EarningsDateErrorCode = EarningsDateErrorCode.NO_CANDIDATE,
    ) -> None:
        super().__init__(message, code=code)
