import json
import socket
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
import pytest_asyncio
import httpx

from transmission_client import TransmissionClient

SESSION_HEADER = "X-Transmission-Session-Id"


class TrickleRequestHandler(BaseHTTPRequestHandler):
    """Answers every RPC with a valid envelope sent a few bytes at a time."""

    chunk_size = 6
    chunk_delay = 0.5

    def do_POST(self):
        self.rfile.read(int(self.headers.get("Content-Length", 0)))
        body = json.dumps(
            {"result": "success", "arguments": {"version": "4.0.5"}}
        ).encode("utf-8")

        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()

        try:
            for start in range(0, len(body), self.chunk_size):
                self.wfile.write(body[start : start + self.chunk_size])
                self.wfile.flush()
                time.sleep(self.chunk_delay)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format, *args):
        pass


@pytest.fixture
def slow_server():
    """Local daemon stand-in that takes several seconds to finish a reply."""
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), TrickleRequestHandler)
    httpd.daemon_threads = True
    httpd.socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()

    host, port = httpd.server_address[:2]
    yield f"http://{host}:{port}"

    httpd.shutdown()
    httpd.server_close()


@pytest.fixture
def make_response():
    """Factory for real httpx responses returned by the patched client."""

    def _make(status_code=200, body=None, session_id=None, text=None):
        headers = {}
        if session_id is not None:
            headers[SESSION_HEADER] = session_id
        if body is not None:
            return httpx.Response(status_code, json=body, headers=headers)
        return httpx.Response(status_code, text=text or "", headers=headers)

    return _make


@pytest_asyncio.fixture
async def client():
    """Client pointed at an unreachable daemon; tests patch its HTTP layer."""
    client = TransmissionClient("http://127.0.0.1:9091")
    yield client
    await client.close()
