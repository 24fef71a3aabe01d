"""Exception types raised by the Wowza API client."""

from typing import Optional


class WowzaAPIError(Exception):
    """Base exception for Wowza API errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class WowzaTransportError(WowzaAPIError):
    """Connection refused, DNS failure, reset or timeout."""


class WowzaHTTPError(WowzaAPIError):
    """Server answered with a status code of 300 or above.

    The message is the HTTP reason phrase; the response body is not kept.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        method: str = "",
        url: str = "",
    ) -> None:
        super().__init__(reason)
        self.status_code = status_code
        self.reason = reason
        self.method = method
        self.url = url

    def __repr__(self) -> str:
        return f"WowzaHTTPError({self.status_code}, {self.reason!r})"


class WowzaResponseError(WowzaAPIError):
    """Successful status, but the body is empty or not valid JSON."""

    def __init__(
        self,
        message: str,
        status_code: int,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code
