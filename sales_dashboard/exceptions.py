"""
Custom exceptions for the sales dashboard.

Provides a hierarchy of exceptions for clear error handling
and debugging of reporting API fetch cycles.
"""

from typing import List


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

    pass


class FetchError(DashboardError):
    """Base exception for transport failures against the reporting API."""

    def __init__(self, endpoint: str, message: str) -> None:
        self.endpoint = endpoint
        self.message = message
        super().__init__(f"{endpoint}: {message}")


class SourceUnavailableError(FetchError):
    """Raised when the API cannot be reached (DNS, connection, timeout)."""

    def __init__(self, endpoint: str, reason: str = "") -> None:
        super().__init__(endpoint, reason or "reporting API unreachable")


class SourceStatusError(FetchError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, endpoint: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(endpoint, f"API returned status code {status_code}")


class SourcePayloadError(FetchError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    def __init__(self, endpoint: str, reason: str = "") -> None:
        super().__init__(endpoint, reason or "malformed response payload")


class CycleFetchError(FetchError):
    """
    Raised when at least one source of a fetch cycle failed.

    Attributes:
        failures: Every source failure of the cycle, in endpoint order.
        cause: The first failure, used as the headline error.
    """

    def __init__(self, failures: List[FetchError]) -> None:
        if not failures:
            raise ValueError("CycleFetchError needs at least one failure")
        self.failures = failures
        self.cause = failures[0]
        extra = f" (+{len(failures) - 1} more)" if len(failures) > 1 else ""
        super().__init__(failures[0].endpoint, f"{failures[0].message}{extra}")
