# -*- coding: utf-8 -*-
"""Process snapshot + priority change.

ProcessService is the capability the server and the console depend on;
PsutilProcessService is the real OS binding. Tests swap in a fake.
"""

from __future__ import annotations

import abc
from datetime import datetime, timedelta
from typing import Any, Callable

import psutil

from .activity_log import ActivityLog
from .config import BYTES_PER_MB
from .models import PriorityLevel, ProcessRecord
from .priority import level_from_os_value, os_value


class ProcessService(abc.ABC):
    @abc.abstractmethod
    def list_all(self) -> list[ProcessRecord]:
        """Every process we are allowed to inspect. Never raises."""

    @abc.abstractmethod
    def set_priority(self, pid: int, level: PriorityLevel) -> bool:
        """Change priority of pid. Failures are logged and reported as False."""

    def get_priority(self, pid: int) -> PriorityLevel | None:
        return None

    def list_all_sorted_by_descending(self, key: Callable[[ProcessRecord], Any]) -> list[ProcessRecord]:
        # sorted() is stable with reverse=True too: equal keys keep enumeration order
        return sorted(self.list_all(), key=key, reverse=True)


def _read_record(p: psutil.Process) -> ProcessRecord | None:
    try:
        with p.oneshot():
            name = p.name()
            rss = p.memory_info().rss
            ct = p.cpu_times()
            created = p.create_time()
    except (psutil.NoSuchProcess, psutil.AccessDenied, OSError):
        return None
    return ProcessRecord(
        id=p.pid,
        name=name,
        memory_usage_mb=rss / BYTES_PER_MB,
        cpu_time=timedelta(seconds=ct.user + ct.system),
        start_time=datetime.fromtimestamp(created),
    )


class PsutilProcessService(ProcessService):
    def __init__(self, activity_log: ActivityLog):
        self.log = activity_log

    def list_all(self) -> list[ProcessRecord]:
        try:
            records = (_read_record(p) for p in psutil.process_iter())
            return [r for r in records if r is not None]
        except Exception as e:
            self.log.log_error(f"Error getting process list: {e}")
            return []

    def set_priority(self, pid: int, level: PriorityLevel) -> bool:
        try:
            p = psutil.Process(pid)
        except (psutil.NoSuchProcess, ValueError):
            self.log.log_error(f"No process with PID {pid} was found")
            return False
        except Exception as e:
            self.log.log_error(f"Error changing process priority: {e}")
            return False

        try:
            name = p.name()
            p.nice(os_value(level))
        except Exception as e:
            self.log.log_error(f"Error changing process priority: {e}")
            return False

        self.log.log_info(f"Changed process PID: {pid} ({name}) priority to {level}")
        return True

    def get_priority(self, pid: int) -> PriorityLevel | None:
        try:
            return level_from_os_value(psutil.Process(pid).nice())
        except (psutil.NoSuchProcess, psutil.AccessDenied, ValueError):
            return None
