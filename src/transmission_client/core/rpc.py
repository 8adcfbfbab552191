"""
Pure functions for Transmission RPC operations.

Functions for resolving the endpoint, building request headers and
envelopes, and discriminating response envelopes without I/O dependencies.
"""

import base64
from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional, Tuple

import httpx

from ..exceptions import RPCError, TransportError
from .casing import camelize_keys

SESSION_ID_HEADER = "X-Transmission-Session-Id"
CONFLICT_STATUS = 409


@dataclass(frozen=True)
class Credentials:
    """Username/password pair used for HTTP Basic authentication."""

    username: str = ""
    password: str = ""

    def __bool__(self) -> bool:
        return bool(self.username or self.password)


def resolve_endpoint(
    base_url: str,
    rpc_path: str,
    username: Optional[str] = None,
    password: Optional[str] = None,
) -> Tuple[httpx.URL, Credentials]:
    """Join the RPC path onto the base address and split off embedded credentials.

    Explicitly supplied values win over user-info embedded in the address.
    The returned URL never carries user-info.
    """
    url = httpx.URL(base_url).join(rpc_path)

    credentials = Credentials(
        username=username if username is not None else url.username,
        password=password if password is not None else url.password,
    )

    if url.userinfo:
        url = url.copy_with(username="", password="")

    return url, credentials


def build_auth_header(credentials: Credentials) -> Optional[str]:
    """Build the Basic auth header value, or None if no credentials are set."""
    if not credentials:
        return None
    token = f"{credentials.username}:{credentials.password}".encode("utf-8")
    return "Basic " + base64.b64encode(token).decode("ascii")


def build_request_headers(
    credentials: Credentials, session_id: Optional[str]
) -> Dict[str, str]:
    """Build headers for a single RPC exchange."""
    headers = {"Accept": "application/json"}

    auth_header = build_auth_header(credentials)
    if auth_header:
        headers["Authorization"] = auth_header

    if session_id:
        headers[SESSION_ID_HEADER] = session_id

    return headers


def build_envelope(
    method: str, arguments: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """Build the request envelope, dropping unset arguments."""
    envelope: Dict[str, Any] = {"method": method}
    if arguments is not None:
        envelope["arguments"] = {
            key: value for key, value in arguments.items() if value is not None
        }
    return envelope


def extract_session_id(headers: httpx.Headers) -> Optional[str]:
    """Return the session token carried by a response, if any."""
    return headers.get(SESSION_ID_HEADER) or None


def should_retry_conflict(
    status_code: int, attempt: int, max_retries: int, token_captured: bool
) -> bool:
    """Determine if a conflict response warrants re-issuing the call."""
    if status_code != CONFLICT_STATUS:
        return False
    return token_captured and attempt < max_retries


def parse_envelope(response_data: Any) -> Dict[str, Any]:
    """Discriminate a response envelope and return re-cased arguments.

    Raises:
        TransportError: The body is not an envelope object.
        RPCError: The daemon reported an error.
    """
    if not isinstance(response_data, dict):
        raise TransportError("Invalid response format: expected JSON object")

    if "result" not in response_data:
        raise TransportError("Invalid response format: missing 'result' field")

    result = response_data["result"]
    if result != "success":
        message = response_data.get("error") or str(result)
        raise RPCError(message, response_data.get("errorCode"))

    arguments = response_data.get("arguments")
    if arguments is None:
        return {}
    return camelize_keys(arguments)
