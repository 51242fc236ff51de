# -*- coding: utf-8 -*-
"""Console UI: print process table, ask for a PID, boost it."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from .activity_log import ActivityLog
from .config import APP_NAME
from .models import PriorityLevel
from .processes import ProcessService
from .utils import dt_str, fmt_duration, fmt_mb, parse_int, truncate

SEPARATOR = "-" * 126
ROW_FMT = "| {:<30} | {:<10} | {:<15} | {:<20} | {:<20} | {:<12} |"


class ConsoleUserInterface:
    def __init__(self, service: ProcessService, activity_log: ActivityLog, url: str,
                 input_fn: Callable[[str], str] = input, output: TextIO | None = None):
        self.service = service
        self.activity_log = activity_log
        self.url = url
        self.input_fn = input_fn
        self.out = output if output is not None else sys.stdout
        self.keep_running = True

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def run(self) -> None:
        self._print(APP_NAME)
        self._print("=" * len(APP_NAME))
        self._print(f"HTTP server started. Visit {self.url} in your browser.")

        while self.keep_running:
            try:
                self.display_process_list()
                self.process_user_input()
            except EOFError:
                break
            except Exception as e:
                self._print(f"Error: {e}")
                self.activity_log.log_error(str(e))

            if self.keep_running and not self.pause():
                break

    def pause(self) -> bool:
        """Wait for Enter between cycles; False on EOF."""
        try:
            self.input_fn("\nPress Enter to continue...")
        except EOFError:
            return False
        return True

    def display_process_list(self) -> None:
        self._print("\nCurrent Running Processes:")
        self._print(SEPARATOR)
        self._print(ROW_FMT.format("Process Name", "PID", "Memory (MB)", "Total CPU Time", "Start Time", "Priority"))
        self._print(SEPARATOR)
        for r in self.service.list_all_sorted_by_descending(lambda x: x.start_time):
            self._print(ROW_FMT.format(
                truncate(r.name),
                r.id,
                fmt_mb(r.memory_usage_mb),
                fmt_duration(r.cpu_time),
                dt_str(r.start_time),
                self._priority_label(r.id),
            ))
        self._print(SEPARATOR)

    def _priority_label(self, pid: int) -> str:
        level = self.service.get_priority(pid)
        return str(level) if level is not None else ""

    def process_user_input(self) -> None:
        raw = self.input_fn("\nEnter a PID to boost priority (or 'q' to quit): ").strip()
        if raw.lower() == "q":
            self.keep_running = False
            return

        pid = parse_int(raw)
        if pid is None:
            self._print("Invalid PID format. Please enter a valid number.")
            return

        if self.service.set_priority(pid, PriorityLevel.HIGH):
            self._print(f"Successfully boosted process with PID: {pid} to High priority")
            self._print(f"Action logged to {self.activity_log.path}")
        else:
            self._print(f"Failed to boost process with PID: {pid}")
