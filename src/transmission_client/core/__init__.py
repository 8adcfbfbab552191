"""
Core pure functions for the client.

This package contains I/O-free functions for key casing, request and
response envelopes, and the declarative method table.
"""

from .casing import (
    camelize,
    decamelize,
    camelize_keys,
    decamelize_keys,
)

from .rpc import (
    CONFLICT_STATUS,
    SESSION_ID_HEADER,
    Credentials,
    resolve_endpoint,
    build_auth_header,
    build_request_headers,
    build_envelope,
    extract_session_id,
    should_retry_conflict,
    parse_envelope,
)

from .methods import METHODS, RpcMethod, build_method_call

from .utils import classify_request_exception, map_request_exception

__all__ = [
    # Casing functions
    "camelize",
    "decamelize",
    "camelize_keys",
    "decamelize_keys",
    # RPC functions
    "CONFLICT_STATUS",
    "SESSION_ID_HEADER",
    "Credentials",
    "resolve_endpoint",
    "build_auth_header",
    "build_request_headers",
    "build_envelope",
    "extract_session_id",
    "should_retry_conflict",
    "parse_envelope",
    # Method table
    "METHODS",
    "RpcMethod",
    "build_method_call",
    # Error helpers
    "classify_request_exception",
    "map_request_exception",
]
