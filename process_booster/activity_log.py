# -*- coding: utf-8 -*-
"""Append-only activity log (boost_log.txt)

Both the HTTP thread and the console write here, so every append is done
under a single lock. A failed write is reported on the diagnostic logger
and swallowed: losing one activity line must never break a request.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Iterable

from .models import ProcessRecord
from .utils import fmt_mb

log = logging.getLogger(__name__)


class ActivityLog:
    def __init__(self, path: str | Path = "boost_log.txt"):
        self.path = Path(path)
        self._lock = threading.Lock()

    @staticmethod
    def _stamp() -> str:
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    def log_info(self, message: str) -> None:
        self._write(f"{self._stamp()} - INFO: {message}")

    def log_error(self, message: str) -> None:
        self._write(f"{self._stamp()} - ERROR: {message}")

    def log_processes(self, records: Iterable[ProcessRecord]) -> None:
        records = list(records)
        lines = [f"{self._stamp()} - Top {len(records)} processes by memory usage:"]
        for r in records:
            lines.append(f"  - {r.name} (PID: {r.id}): {fmt_mb(r.memory_usage_mb)} MB")
        self._write("\n".join(lines) + "\n")

    def read_text(self) -> str | None:
        """Whole log as text, None when nothing has been logged yet."""
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def _write(self, entry: str) -> None:
        try:
            with self._lock:
                with self.path.open("a", encoding="utf-8") as f:
                    f.write(entry + "\n")
        except OSError as e:
            log.error("Error writing to log file %s: %s", self.path, e)
