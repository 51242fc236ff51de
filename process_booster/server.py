# -*- coding: utf-8 -*-
"""HTTP surface: Flask route table + a single-threaded accept loop.

Routes:
    GET  /                        static page
    GET  /api/processes           snapshot, newest first, as JSON
    GET  /api/logs                activity log as text
    POST /api/boost?pid=N         set priority High
    POST /api/log-top-processes?count=N
Everything else (including a known path with the wrong method) is 404.
"""

from __future__ import annotations

import enum
import json
import logging
import threading
import traceback
from importlib import resources

from flask import Flask, abort, request
from werkzeug.exceptions import HTTPException
from werkzeug.serving import BaseWSGIServer, WSGIRequestHandler, make_server

from .activity_log import ActivityLog
from .config import DEFAULT_CFG, host_port_from_url
from .models import PriorityLevel
from .processes import ProcessService
from .utils import clamp, parse_int

log = logging.getLogger(__name__)


def load_index_html() -> str:
    return resources.files("process_booster").joinpath("static/index.html").read_text(encoding="utf-8")


def create_app(
    service: ProcessService,
    activity_log: ActivityLog,
    index_html: str | None = None,
    top_count_default: int = DEFAULT_CFG["top_count_default"],
    top_count_max: int = DEFAULT_CFG["top_count_max"],
) -> Flask:
    app = Flask(__name__)
    page = index_html if index_html is not None else load_index_html()

    def json_response(payload, status: int = 200):
        body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        return app.response_class(body, status=status, mimetype="application/json")

    def result(success: bool, message: str):
        return json_response({"success": success, "message": message})

    def text_response(body: str):
        return app.response_class(body, mimetype="text/plain")

    # --- route table ---------------------------------------------------
    @app.before_request
    def get_only_means_get():
        # werkzeug answers HEAD on every GET rule; the route table does not
        if request.method == "HEAD":
            abort(404)

    @app.get("/", provide_automatic_options=False)
    def index():
        return app.response_class(page, mimetype="text/html")

    @app.get("/api/processes", provide_automatic_options=False)
    def processes():
        try:
            rows = service.list_all_sorted_by_descending(lambda r: r.start_time)
            return json_response([
                {
                    "id": r.id,
                    "name": r.name,
                    "memoryUsageMb": r.memory_usage_mb,
                    "cpuTime": r.cpu_time.total_seconds(),
                }
                for r in rows
            ])
        except Exception as e:
            return json_response({"error": str(e)}, status=500)

    @app.get("/api/logs", provide_automatic_options=False)
    def logs():
        try:
            text = activity_log.read_text()
            return text_response("No logs found." if text is None else text)
        except Exception as e:
            return text_response(f"Error reading log file: {e}")

    @app.post("/api/boost", provide_automatic_options=False)
    def boost():
        try:
            pid = parse_int(request.args.get("pid"))
            if pid is None:
                return result(False, "Invalid process ID")
            if service.set_priority(pid, PriorityLevel.HIGH):
                return result(True, f"Process {pid} priority set to {PriorityLevel.HIGH}")
            return result(False, f"Failed to set process {pid} priority")
        except Exception as e:
            return result(False, str(e))

    @app.post("/api/log-top-processes", provide_automatic_options=False)
    def log_top_processes():
        try:
            count = top_count_default
            requested = parse_int(request.args.get("count"))
            if requested is not None:
                count = clamp(requested, 1, top_count_max)
            top = service.list_all_sorted_by_descending(lambda r: r.memory_usage_mb)[:count]
            activity_log.log_processes(top)
            return result(True, f"Logged top {count} processes")
        except Exception as e:
            return result(False, str(e))

    # --- errors --------------------------------------------------------
    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(e):
        return app.response_class(b"", status=404)

    @app.errorhandler(Exception)
    def unhandled(e):
        if isinstance(e, HTTPException):
            return e
        stack = "".join(traceback.format_exception(type(e), e, e.__traceback__))
        activity_log.log_error(f"Error handling request: {e}\n\n{stack}")
        return app.response_class(b"", status=500)

    return app


class QuietRequestHandler(WSGIRequestHandler):
    """No per-request access lines; they would land in the console table."""

    def log_request(self, code="-", size="-"):
        pass


class ServerState(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class HttpServer:
    """Runs the Flask app on one background thread, one request at a time."""

    def __init__(self, service: ProcessService, activity_log: ActivityLog,
                 url: str = DEFAULT_CFG["url"], app: Flask | None = None):
        self.activity_log = activity_log
        self.app = app if app is not None else create_app(service, activity_log)
        self.host, self._port = host_port_from_url(url)
        self.state = ServerState.STOPPED
        self._server: BaseWSGIServer | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def port(self) -> int:
        if self._server is not None:
            return self._server.server_port
        return self._port

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    def start(self) -> None:
        with self._lock:
            if self.state is ServerState.RUNNING:
                return
            try:
                server = make_server(self.host, self._port, self.app, threaded=False,
                                     request_handler=QuietRequestHandler)
            except OSError as e:
                self.activity_log.log_error(f"HTTP server error: {e}")
                raise
            except SystemExit as e:
                # werkzeug reports a failed bind by exiting instead of raising
                msg = f"could not bind {self.host}:{self._port}"
                self.activity_log.log_error(f"HTTP server error: {msg}")
                raise OSError(msg) from e
            self._server = server
            self._thread = threading.Thread(target=server.serve_forever, name="http-accept", daemon=True)
            self._thread.start()
            self.state = ServerState.RUNNING
            log.info("HTTP server listening on %s", self.url)

    def stop(self) -> None:
        with self._lock:
            if self.state is ServerState.STOPPED:
                return
            # shutdown() returns once serve_forever has left its loop
            self._server.shutdown()
            self._thread.join()
            self._server.server_close()
            self._server = None
            self._thread = None
            self.state = ServerState.STOPPED
            log.info("HTTP server stopped")
