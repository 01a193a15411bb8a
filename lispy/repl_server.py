"""
Simple TCP REPL server for Lispy.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(doall ...)"}
- Response: {"ok": true, "result": <printed value>} or {"ok": false, "error": <message>}

A single Evaluator is shared by every connection so that definitions persist
across requests; evaluation is serialised through a lock. A request line longer
than `max_request_bytes` gets an error response and is discarded unread.
"""

from __future__ import annotations

import json
import socketserver
import threading
from typing import Any

from loguru import logger

from lispy import config
from lispy.interpreter import Evaluator
from lispy.printer import to_lisp_str
from lispy.repl import EVAL_ERRORS, format_error


class _LineHandler(socketserver.StreamRequestHandler):
    """Reads newline-terminated requests and answers each with one JSON line."""

    server: _ThreadingServer

    def handle(self) -> None:
        repl = self.server.repl
        limit = repl.max_request_bytes
        logger.debug("client connected {}", self.client_address)
        while line := self.rfile.readline(limit + 1):
            if len(line) > limit and not line.endswith(b"\n"):
                logger.warning("request from {} exceeds {} bytes", self.client_address, limit)
                self._reply({"ok": False, "error": f"Request exceeds {limit} bytes"})
                self._discard_line(limit)
                continue
            line = line.strip()
            if line:
                self._reply(repl.handle_request(line))
        logger.debug("client disconnected {}", self.client_address)

    def _discard_line(self, chunk: int) -> None:
        while part := self.rfile.readline(chunk):
            if part.endswith(b"\n"):
                break

    def _reply(self, resp: dict[str, Any]) -> None:
        self.wfile.write((json.dumps(resp) + "\n").encode("utf-8"))


class _ThreadingServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, repl: ReplServer):
        self.repl = repl
        super().__init__((repl.host, repl.port), _LineHandler)


class ReplServer:
    max_request_bytes = 1 << 20

    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = config.get_server_address()
        self.host = default_host if host is None else host
        self.port = default_port if port is None else port
        self.evaluator = Evaluator()
        self._lock = threading.Lock()

    def handle_request(self, line: bytes | str) -> dict[str, Any]:
        """Decode one request line and return the response object."""
        try:
            req = json.loads(line)
        except ValueError as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else req
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        with self._lock:
            try:
                result = self.evaluator.evaluate(code)
            except EVAL_ERRORS as ex:
                return {"ok": False, "error": format_error(ex)}
        return {"ok": True, "result": to_lisp_str(result)}

    def make_server(self) -> socketserver.ThreadingTCPServer:
        """Bind the listening socket; the caller runs serve_forever() on it."""
        return _ThreadingServer(self)

    def serve_forever(self) -> None:
        with self.make_server() as server:
            logger.info("serve.start {}:{}", *server.server_address[:2])
            server.serve_forever()
