# -*- coding: utf-8 -*-
"""Data models"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


@dataclass(frozen=True)
class ProcessRecord:
    id: int
    name: str
    memory_usage_mb: float
    cpu_time: timedelta
    start_time: datetime


class PriorityLevel(Enum):
    IDLE = "Idle"
    BELOW_NORMAL = "BelowNormal"
    NORMAL = "Normal"
    ABOVE_NORMAL = "AboveNormal"
    HIGH = "High"
    REALTIME = "RealTime"

    def __str__(self) -> str:
        return self.value
