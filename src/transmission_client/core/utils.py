"""
Utility functions for mapping HTTP client failures to client exceptions.
"""

import httpx

from ..exceptions import NetworkError, RequestTimeoutError, TransportError


def classify_request_exception(exception: Exception) -> str:
    """Classify exception type for error handling logic."""
    if isinstance(exception, httpx.TimeoutException):
        return "timeout"
    elif isinstance(exception, (httpx.NetworkError, ConnectionError, OSError)):
        return "network"
    else:
        return "unknown"


def map_request_exception(exception: Exception) -> TransportError:
    """Wrap a failed HTTP exchange in the matching transport error."""
    kind = classify_request_exception(exception)

    if kind == "timeout":
        return RequestTimeoutError(f"Request timed out: {exception}")
    elif kind == "network":
        return NetworkError(f"Network error: {exception}")
    else:
        return TransportError(f"Request failed: {exception}")
