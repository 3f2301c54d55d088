"""
Relay HTTP server for the base fee sentinel.

Exposes the relay's broadcast operation to remote hosts. Any caller may post
any payload; the server only rejects requests it cannot turn into bytes.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

from basefee_sentinel.core.exceptions import DataValidationError
from basefee_sentinel.data.codec import from_hex
from basefee_sentinel.relay import AlertEvent, Relay

load_dotenv()

logger = logging.getLogger("backend")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

RELAY = Relay()


def _payload_from_request(content_type: str, body: bytes) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Extract the alert payload from a request body.

    Returns:
        (payload, None) on success, (None, error detail) otherwise
    """
    if "application/json" not in content_type:
        return body, None

    try:
        data = json.loads(body.decode("utf-8")) if body else {}
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None, "Invalid JSON body"

    if not isinstance(data, dict) or not isinstance(data.get("data"), str):
        return None, "Expected JSON object with a hex 'data' field"

    try:
        return from_hex(data["data"]), None
    except DataValidationError as e:
        return None, str(e)


class RelayHandler(BaseHTTPRequestHandler):
    server_version = "BasefeeRelay/1.0"
    relay: Relay = RELAY

    def _send_json(self, status: int, payload: Dict[str, object]) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._send_json(200, {"status": "ok"})
            return

        self._send_json(404, {"detail": "Not found"})

    def do_POST(self) -> None:
        if self.path == "/broadcast":
            self._handle_broadcast()
            return

        self._send_json(404, {"detail": "Not found"})

    def _handle_broadcast(self) -> None:
        try:
            length = int(self.headers.get("Content-Length", "0") or 0)
        except ValueError:
            self._send_json(400, {"detail": "Invalid Content-Length"})
            return
        body = self.rfile.read(length) if length > 0 else b""

        payload, error = _payload_from_request(self.headers.get("Content-Type", ""), body)
        if payload is None:
            self._send_json(400, {"detail": error})
            return

        self.relay.broadcast(payload)
        self._send_json(200, AlertEvent(data=payload).to_wire())


def create_server(host: str, port: int, relay: Optional[Relay] = None) -> ThreadingHTTPServer:
    """Build a server whose handler broadcasts through the given relay."""
    handler = type("BoundRelayHandler", (RelayHandler,), {"relay": relay or RELAY})
    return ThreadingHTTPServer((host, port), handler)


def run(host: str, port: int) -> None:
    logger.info("Starting relay server on %s:%s", host, port)
    server = create_server(host, port)
    try:
        server.serve_forever()
    finally:
        server.server_close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Base fee sentinel relay server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    run(args.host, args.port)


if __name__ == "__main__":
    main()
