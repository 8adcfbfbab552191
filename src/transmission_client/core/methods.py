"""
Declarative table of the RPC methods exposed by the client.

Each entry maps a client operation to its wire method name and the
argument names that differ between Python and the wire. Names not listed
in ``renames`` are sent unchanged.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

_FILE_SELECTION = {
    "files_wanted": "files-wanted",
    "files_unwanted": "files-unwanted",
    "priority_high": "priority-high",
    "priority_low": "priority-low",
    "priority_normal": "priority-normal",
    "peer_limit": "peer-limit",
}


@dataclass(frozen=True)
class RpcMethod:
    """A wire method name plus its argument renames."""

    wire_name: str
    renames: Mapping[str, str] = field(default_factory=dict)


METHODS: Dict[str, RpcMethod] = {
    "get_session": RpcMethod("session-get"),
    "get_torrents": RpcMethod("torrent-get"),
    "add_torrent": RpcMethod(
        "torrent-add",
        {
            **_FILE_SELECTION,
            "download_dir": "download-dir",
            "bandwidth_priority": "bandwidthPriority",
        },
    ),
    "remove_torrents": RpcMethod(
        "torrent-remove", {"delete_local_data": "delete-local-data"}
    ),
    "move_torrents": RpcMethod("torrent-set-location"),
    "start_torrents": RpcMethod("torrent-start"),
    "stop_torrents": RpcMethod("torrent-stop"),
    "start_torrents_now": RpcMethod("torrent-start-now"),
    "verify_torrents": RpcMethod("torrent-verify"),
    "reannounce_torrents": RpcMethod("torrent-reannounce"),
    "queue_move_up": RpcMethod("queue-move-up"),
    "queue_move_down": RpcMethod("queue-move-down"),
    "queue_move_top": RpcMethod("queue-move-top"),
    "queue_move_bottom": RpcMethod("queue-move-bottom"),
    "free_space": RpcMethod("free-space"),
    "set_torrents": RpcMethod(
        "torrent-set",
        {
            **_FILE_SELECTION,
            "bandwidth_priority": "bandwidth-priority",
            "download_limit": "download-limit",
            "download_limited": "download-limited",
            "honors_session_limits": "honors-session-limits",
            "queue_position": "queue-position",
            "seed_idle_limit": "seed-idle-limit",
            "seed_idle_mode": "seed-idle-mode",
            "seed_ratio_limit": "seed-ratio-limit",
            "seed_ratio_mode": "seed-ratio-mode",
            "sequential_download": "sequential-download",
            "tracker_list": "tracker-list",
            "upload_limit": "upload-limit",
            "upload_limited": "upload-limited",
        },
    ),
    "session_stats": RpcMethod("session-stats"),
    "close_session": RpcMethod("session-close"),
    "test_port": RpcMethod("port-test"),
    "update_blocklist": RpcMethod("blocklist-update"),
    "rename_path": RpcMethod("torrent-rename-path"),
}


def build_method_call(
    name: str, arguments: Optional[Mapping[str, Any]] = None
) -> Tuple[str, Optional[Dict[str, Any]]]:
    """Resolve a client operation into its wire method name and arguments."""
    method = METHODS[name]
    if arguments is None:
        return method.wire_name, None

    wire_arguments = {
        method.renames.get(key, key): value for key, value in arguments.items()
    }
    return method.wire_name, wire_arguments
