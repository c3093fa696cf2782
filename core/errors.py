"""Error taxonomy for funding data acquisition."""

from __future__ import annotations

from core.policy import APPLICATION_ERROR_FALLBACK, TRANSPORT_ERROR_MESSAGE


class FundingDataError(Exception):
    """Base class for every non-fatal acquisition failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(FundingDataError):
    """The endpoint could not be reached (network, DNS, timeout, HTTP status)."""


class MalformedResponseError(TransportError):
    """The endpoint answered but the body does not have the expected shape."""


class ApplicationError(FundingDataError):
    """The endpoint reported ``success: false``."""

    def __init__(self, message: str, server_message: str | None = None) -> None:
        super().__init__(message)
        self.server_message = server_message


def user_message(exc: BaseException) -> str:
    """Map a fetch failure to the message shown in the dashboard."""
    if isinstance(exc, ApplicationError):
        return exc.server_message or APPLICATION_ERROR_FALLBACK
    return TRANSPORT_ERROR_MESSAGE
