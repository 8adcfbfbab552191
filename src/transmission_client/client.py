import asyncio
import threading
from typing import Any, Dict, Mapping, Optional

import httpx

from .config import (
    ClientSettings,
    DEFAULT_MAX_CONFLICT_RETRIES,
    DEFAULT_RPC_PATH,
    DEFAULT_TIMEOUT,
    get_logger,
    get_settings,
)
from .core.methods import build_method_call
from .core.rpc import (
    CONFLICT_STATUS,
    build_envelope,
    build_request_headers,
    extract_session_id,
    parse_envelope,
    resolve_endpoint,
    should_retry_conflict,
)
from .core.utils import map_request_exception
from .exceptions import RequestTimeoutError, SessionConflictError, TransportError
from .models import (
    AddTorrentArgs,
    AddTorrentResponse,
    FreeSpaceResponse,
    GetTorrentArgs,
    GetTorrentResponse,
    Ids,
    PortTestResponse,
    SessionStatsResponse,
    TorrentSetArgs,
)

logger = get_logger("client")


class TransmissionClient:
    """Async client for the Transmission daemon's RPC interface."""

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        *,
        rpc_path: str = DEFAULT_RPC_PATH,
        timeout: float = DEFAULT_TIMEOUT,
        max_conflict_retries: int = DEFAULT_MAX_CONFLICT_RETRIES,
    ):
        if max_conflict_retries < 0:
            raise ValueError("max_conflict_retries cannot be negative")

        self.url, self.credentials = resolve_endpoint(
            base_url, rpc_path, username, password
        )
        self.timeout = timeout
        self.max_conflict_retries = max_conflict_retries

        self._session_id: Optional[str] = None
        self._session_lock = threading.Lock()

        self._client = httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_settings(
        cls, settings: Optional[ClientSettings] = None
    ) -> "TransmissionClient":
        """Create a client from environment-driven settings."""
        settings = settings or get_settings()
        return cls(
            settings.url,
            settings.username,
            settings.password,
            rpc_path=settings.rpc_path,
            timeout=settings.timeout_seconds,
            max_conflict_retries=settings.max_conflict_retries,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self._client.aclose()

    @property
    def session_id(self) -> Optional[str]:
        """The session token currently held, if any."""
        with self._session_lock:
            return self._session_id

    def _set_session_id(self, session_id: str) -> None:
        with self._session_lock:
            if session_id != self._session_id:
                logger.debug("Session token rotated")
            self._session_id = session_id

    async def call(
        self, method: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """Invoke an RPC method and return its camel-cased result arguments.

        The session token is negotiated transparently: a 409 response
        carrying a fresh token causes the call to be re-issued, at most
        ``max_conflict_retries`` times.

        Raises:
            RPCError: The daemon rejected the request.
            TransportError: The exchange failed, timed out, returned an
                unexpected status, or kept hitting session conflicts.
        """
        envelope = build_envelope(method, arguments)
        logger.debug("Calling %s", method)

        attempt = 0
        while True:
            response = await self._send(envelope)

            session_id = extract_session_id(response.headers)
            if session_id:
                self._set_session_id(session_id)

            if not should_retry_conflict(
                response.status_code,
                attempt,
                self.max_conflict_retries,
                session_id is not None,
            ):
                break

            attempt += 1
            logger.info("Session token rejected for %s, retrying", method)

        if response.status_code == CONFLICT_STATUS:
            raise SessionConflictError(
                f"Session conflict not resolved for {method}",
                status_code=response.status_code,
            )

        if not response.is_success:
            raise TransportError(
                f"API request failed: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            response_data = response.json()
        except ValueError as e:
            raise TransportError(
                "Invalid response format: body is not JSON",
                status_code=response.status_code,
            ) from e

        return parse_envelope(response_data)

    async def _send(self, envelope: Dict[str, Any]) -> httpx.Response:
        headers = build_request_headers(self.credentials, self.session_id)
        try:
            return await asyncio.wait_for(
                self._client.post(str(self.url), json=envelope, headers=headers),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.warning("Request for %s timed out", envelope["method"])
            raise RequestTimeoutError(
                f"Request timed out after {self.timeout}s"
            ) from e
        except httpx.RequestError as e:
            logger.warning("Request for %s failed: %s", envelope["method"], e)
            raise map_request_exception(e) from e

    async def _invoke(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        method, wire_arguments = build_method_call(name, arguments)
        return await self.call(method, wire_arguments)

    async def get_session(self) -> Dict[str, Any]:
        """Retrieve the session settings and daemon version information."""
        return await self._invoke("get_session")

    async def get_torrents(
        self, args: Optional[GetTorrentArgs] = None
    ) -> GetTorrentResponse:
        """Retrieve torrents, optionally restricted to ``ids`` and ``fields``."""
        arguments = args.to_dict() if args is not None else None
        return await self._invoke("get_torrents", arguments)  # type: ignore[return-value]

    async def add_torrent(self, args: AddTorrentArgs) -> AddTorrentResponse:
        """Add a torrent from a file path, URL, magnet link or metainfo."""
        return await self._invoke("add_torrent", args.to_dict())  # type: ignore[return-value]

    async def remove_torrents(
        self, ids: Ids, delete_local_data: Optional[bool] = None
    ) -> None:
        await self._invoke(
            "remove_torrents", {"ids": ids, "delete_local_data": delete_local_data}
        )

    async def move_torrents(
        self, ids: Ids, location: str, move: Optional[bool] = None
    ) -> None:
        """Set a new data location, moving existing data when ``move`` is true."""
        await self._invoke(
            "move_torrents", {"ids": ids, "location": location, "move": move}
        )

    async def start_torrents(self, ids: Ids) -> None:
        await self._invoke("start_torrents", {"ids": ids})

    async def stop_torrents(self, ids: Ids) -> None:
        await self._invoke("stop_torrents", {"ids": ids})

    async def start_torrents_now(self, ids: Ids) -> None:
        """Start torrents immediately, bypassing the queue."""
        await self._invoke("start_torrents_now", {"ids": ids})

    async def verify_torrents(self, ids: Ids) -> None:
        await self._invoke("verify_torrents", {"ids": ids})

    async def reannounce_torrents(self, ids: Ids) -> None:
        await self._invoke("reannounce_torrents", {"ids": ids})

    async def queue_move_up(self, ids: Ids) -> None:
        await self._invoke("queue_move_up", {"ids": ids})

    async def queue_move_down(self, ids: Ids) -> None:
        await self._invoke("queue_move_down", {"ids": ids})

    async def queue_move_top(self, ids: Ids) -> None:
        await self._invoke("queue_move_top", {"ids": ids})

    async def queue_move_bottom(self, ids: Ids) -> None:
        await self._invoke("queue_move_bottom", {"ids": ids})

    async def free_space(self, path: str) -> FreeSpaceResponse:
        """Query free space in a directory on the daemon's host."""
        return await self._invoke("free_space", {"path": path})  # type: ignore[return-value]

    async def set_torrents(self, args: TorrentSetArgs) -> None:
        """Change properties of the torrents selected by ``args.ids``."""
        await self._invoke("set_torrents", args.to_dict())

    async def session_stats(self) -> SessionStatsResponse:
        return await self._invoke("session_stats")  # type: ignore[return-value]

    async def close_session(self) -> None:
        """Ask the daemon to shut down."""
        await self._invoke("close_session")

    async def test_port(self) -> PortTestResponse:
        """Check whether the incoming peer port is reachable."""
        return await self._invoke("test_port")  # type: ignore[return-value]

    async def update_blocklist(self) -> None:
        await self._invoke("update_blocklist")

    async def rename_path(self, ids: Ids, path: str, name: str) -> None:
        """Rename a file or directory inside a torrent."""
        await self._invoke("rename_path", {"ids": ids, "path": path, "name": name})
