"""
Data models for RPC arguments and results.

Argument shapes are plain dataclasses whose field names follow Python
naming; the method table in ``core.methods`` maps them onto the daemon's
wire keys. Results are returned as dictionaries with camel-style keys.
"""

import base64
from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, Dict, List, Literal, Optional, TypedDict, Union

RECENTLY_ACTIVE = "recently-active"

Ids = Union[int, List[Union[int, str]], Literal["recently-active"]]


class TorrentStatus(IntEnum):
    """Torrent activity state as reported in the ``status`` field."""

    STOPPED = 0
    QUEUED_TO_VERIFY = 1
    VERIFYING = 2
    QUEUED_TO_DOWNLOAD = 3
    DOWNLOADING = 4
    QUEUED_TO_SEED = 5
    SEEDING = 6


class _Arguments:
    """Mixin turning a dataclass into an argument mapping."""

    def to_dict(self) -> Dict[str, Any]:
        """Return set fields keyed by their Python names."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if getattr(self, f.name) is not None
        }


@dataclass
class GetTorrentArgs(_Arguments):
    """
    Selection for ``torrent-get``.

    Attributes:
        ids: Torrents to fetch; all torrents when omitted
        fields: Torrent field names to return, e.g. ``["id", "hashString"]``
    """

    ids: Optional[Ids] = None
    fields: Optional[List[str]] = None


@dataclass
class AddTorrentArgs(_Arguments):
    """
    Arguments for ``torrent-add``.

    Exactly one of ``filename`` (path, URL or magnet link) or ``metainfo``
    (base64-encoded .torrent content) should be given.

    Example:
        >>> args = AddTorrentArgs(filename="magnet:?xt=urn:btih:...", paused=True)
        >>> result = await client.add_torrent(args)
        >>> print(result["torrentAdded"]["hashString"])
    """

    filename: Optional[str] = None
    metainfo: Optional[str] = None
    cookies: Optional[str] = None
    download_dir: Optional[str] = None
    labels: Optional[List[str]] = None
    paused: Optional[bool] = None
    peer_limit: Optional[int] = None
    bandwidth_priority: Optional[int] = None
    files_wanted: Optional[List[int]] = None
    files_unwanted: Optional[List[int]] = None
    priority_high: Optional[List[int]] = None
    priority_low: Optional[List[int]] = None
    priority_normal: Optional[List[int]] = None

    @classmethod
    def from_metainfo(cls, content: bytes, **kwargs: Any) -> "AddTorrentArgs":
        """Build arguments carrying raw .torrent bytes as ``metainfo``."""
        encoded = base64.b64encode(content).decode("ascii")
        return cls(metainfo=encoded, **kwargs)


@dataclass
class TorrentSetArgs(_Arguments):
    """Properties to change on one or more torrents via ``torrent-set``."""

    ids: Optional[Ids] = None
    bandwidth_priority: Optional[int] = None
    download_limit: Optional[int] = None
    download_limited: Optional[bool] = None
    files_unwanted: Optional[List[int]] = None
    files_wanted: Optional[List[int]] = None
    group: Optional[str] = None
    honors_session_limits: Optional[bool] = None
    labels: Optional[List[str]] = None
    location: Optional[str] = None
    peer_limit: Optional[int] = None
    priority_high: Optional[List[int]] = None
    priority_low: Optional[List[int]] = None
    priority_normal: Optional[List[int]] = None
    queue_position: Optional[int] = None
    seed_idle_limit: Optional[int] = None
    seed_idle_mode: Optional[int] = None
    seed_ratio_limit: Optional[float] = None
    seed_ratio_mode: Optional[int] = None
    sequential_download: Optional[bool] = None
    tracker_list: Optional[str] = None
    upload_limit: Optional[int] = None
    upload_limited: Optional[bool] = None


class TorrentRef(TypedDict):
    id: int
    name: str
    hashString: str


class AddTorrentResponse(TypedDict, total=False):
    torrentAdded: TorrentRef
    torrentDuplicate: TorrentRef


class GetTorrentResponse(TypedDict, total=False):
    torrents: List[Dict[str, Any]]
    removed: List[Dict[str, Any]]


class FreeSpaceResponse(TypedDict):
    path: str
    sizeBytes: int
    totalSize: int


class PortTestResponse(TypedDict, total=False):
    portIsOpen: bool
    ipProtocol: str


class SessionStatsResponse(TypedDict, total=False):
    activeTorrentCount: int
    downloadSpeed: int
    pausedTorrentCount: int
    torrentCount: int
    uploadSpeed: int
    cumulativeStats: Dict[str, int]
    currentStats: Dict[str, int]
