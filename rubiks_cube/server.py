"""HTTP API server for the cube engine."""

from __future__ import annotations

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from .engine import CubeEngine
from .errors import CubeError, StateValidationError
from .notation import validate_face, validate_notation

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

GET_ROUTES = ("/api/cube", "/health")
POST_ROUTES = ("/api/cube/rotate", "/api/cube/move", "/api/cube/reset")


class RequestValidationError(Exception):
    def __init__(self, errors: list[dict[str, str]]):
        super().__init__("; ".join(e["message"] for e in errors))
        self.errors = errors


class CubeHTTPServer:
    def __init__(
        self,
        engine: CubeEngine,
        host: str = "127.0.0.1",
        port: int = 8080,
        access_log: bool = False,
    ):
        self.engine = engine
        self.access_log = access_log
        self._lock = threading.RLock()

        handler_cls = self._build_handler()
        self.httpd = ThreadingHTTPServer((host, port), handler_cls)
        self.host, self.port = self.httpd.server_address[:2]

    def _build_handler(self):
        parent = self

        class Handler(BaseHTTPRequestHandler):
            server_version = "RubiksCube/1.0"

            def log_message(self, fmt: str, *args):
                if parent.access_log:
                    super().log_message(fmt, *args)

            def _send_json(self, code: int, payload: dict[str, Any]):
                body = json.dumps(payload).encode("utf-8")
                self.send_response(code)
                for name, value in CORS_HEADERS.items():
                    self.send_header(name, value)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def _read_json(self) -> dict[str, Any]:
                length = int(self.headers.get("Content-Length", "0"))
                if length == 0:
                    return {}
                data = self.rfile.read(length)
                try:
                    obj = json.loads(data.decode("utf-8"))
                except (UnicodeDecodeError, json.JSONDecodeError) as exc:
                    raise StateValidationError(f"Invalid request body: {exc}") from exc
                if not isinstance(obj, dict):
                    raise StateValidationError("Invalid request body: JSON body must be an object")
                return obj

            def _method_not_allowed(self):
                self._send_json(405, {"error": "Method not allowed"})

            def do_OPTIONS(self):
                if self.path in GET_ROUTES or self.path in POST_ROUTES:
                    self._send_json(200, {})
                    return
                self._send_json(404, {"error": "Not Found"})

            def do_GET(self):
                if self.path in POST_ROUTES:
                    self._method_not_allowed()
                    return

                with parent._lock:
                    if self.path == "/health":
                        self._send_json(200, {"ready": True})
                        return

                    if self.path == "/api/cube":
                        self._send_json(200, parent.engine.snapshot())
                        return

                self._send_json(404, {"error": "Not Found"})

            def do_POST(self):
                if self.path in GET_ROUTES:
                    self._method_not_allowed()
                    return

                try:
                    body = self._read_json()
                    with parent._lock:
                        if self.path == "/api/cube/rotate":
                            face = body.get("face", "")
                            clockwise = body.get("clockwise", False)
                            errors = []
                            try:
                                validate_face(face)
                            except CubeError as exc:
                                errors.append({"field": "face", "message": str(exc)})
                            if not isinstance(clockwise, bool):
                                errors.append({"field": "clockwise", "message": "clockwise must be a boolean"})
                            if errors:
                                raise RequestValidationError(errors)

                            parent.engine.rotate_face(face, clockwise)
                            self._send_json(200, {"success": True, "cube": parent.engine.snapshot()})
                            return

                        if self.path == "/api/cube/move":
                            notation = body.get("notation", "")
                            try:
                                validate_notation(notation)
                            except CubeError as exc:
                                raise RequestValidationError(
                                    [{"field": "notation", "message": str(exc)}]
                                ) from exc

                            parent.engine.move(notation)
                            self._send_json(200, {"success": True, "cube": parent.engine.snapshot()})
                            return

                        if self.path == "/api/cube/reset":
                            parent.engine.reset()
                            self._send_json(
                                200,
                                {
                                    "success": True,
                                    "message": "Cube has been reset to solved state",
                                    "cube": parent.engine.snapshot(),
                                },
                            )
                            return

                except RequestValidationError as exc:
                    self._send_json(400, {"success": False, "errors": exc.errors})
                    return
                except CubeError as exc:
                    self._send_json(400, {"error": str(exc)})
                    return

                self._send_json(404, {"error": "Not Found"})

        return Handler

    def serve_forever(self):
        self.httpd.serve_forever()

    def start_background(self, daemon: bool = True) -> threading.Thread:
        thread = threading.Thread(target=self.serve_forever, daemon=daemon)
        thread.start()
        return thread

    def shutdown(self):
        self.httpd.shutdown()
        self.httpd.server_close()
