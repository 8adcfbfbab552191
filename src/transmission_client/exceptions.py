"""
Custom exceptions for the Transmission RPC client.
"""

from typing import Dict, Any, Optional


class TransmissionError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(TransmissionError):
    """Raised when the request could not be delivered or the HTTP exchange failed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class NetworkError(TransportError):
    """Raised when network operations fail."""

    pass


class RequestTimeoutError(TransportError):
    """Raised when the daemon does not answer within the request timeout."""

    pass


class SessionConflictError(TransportError):
    """Raised when the daemon keeps rejecting the session token."""

    pass


class RPCError(TransmissionError):
    """Raised when the daemon explicitly rejects a request.

    The message and numeric code are passed through verbatim from the
    daemon's response envelope.
    """

    def __init__(
        self, message: str, code: Optional[int], details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.code = code
