"""
Transmission RPC client

Async Python client for the Transmission daemon's RPC interface.
"""

from .client import TransmissionClient
from .config import ClientSettings, get_settings
from .models import (
    RECENTLY_ACTIVE,
    AddTorrentArgs,
    GetTorrentArgs,
    TorrentSetArgs,
    TorrentStatus,
)
from .exceptions import (
    TransmissionError,
    TransportError,
    NetworkError,
    RequestTimeoutError,
    SessionConflictError,
    RPCError,
)

__version__ = "1.0.0"

__all__ = [
    "TransmissionClient",
    "ClientSettings",
    "get_settings",
    "RECENTLY_ACTIVE",
    "AddTorrentArgs",
    "GetTorrentArgs",
    "TorrentSetArgs",
    "TorrentStatus",
    "TransmissionError",
    "TransportError",
    "NetworkError",
    "RequestTimeoutError",
    "SessionConflictError",
    "RPCError",
]
