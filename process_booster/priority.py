# -*- coding: utf-8 -*-
"""PriorityLevel <-> OS priority value.

Windows has real priority classes (psutil exposes them as constants);
everywhere else a level is approximated with a nice value.
"""

from __future__ import annotations

import psutil

from .models import PriorityLevel

POSIX_NICE = {
    PriorityLevel.IDLE: 19,
    PriorityLevel.BELOW_NORMAL: 10,
    PriorityLevel.NORMAL: 0,
    PriorityLevel.ABOVE_NORMAL: -5,
    PriorityLevel.HIGH: -10,
    PriorityLevel.REALTIME: -20,
}

if psutil.WINDOWS:
    WINDOWS_CLASS = {
        PriorityLevel.IDLE: psutil.IDLE_PRIORITY_CLASS,
        PriorityLevel.BELOW_NORMAL: psutil.BELOW_NORMAL_PRIORITY_CLASS,
        PriorityLevel.NORMAL: psutil.NORMAL_PRIORITY_CLASS,
        PriorityLevel.ABOVE_NORMAL: psutil.ABOVE_NORMAL_PRIORITY_CLASS,
        PriorityLevel.HIGH: psutil.HIGH_PRIORITY_CLASS,
        PriorityLevel.REALTIME: psutil.REALTIME_PRIORITY_CLASS,
    }
else:
    WINDOWS_CLASS = {}


def os_value(level: PriorityLevel) -> int:
    if WINDOWS_CLASS:
        return int(WINDOWS_CLASS[level])
    return POSIX_NICE[level]


def level_from_os_value(value: int) -> PriorityLevel:
    """Map an OS value back to a level (nearest nice on POSIX)."""
    if WINDOWS_CLASS:
        for level, cls in WINDOWS_CLASS.items():
            if int(cls) == int(value):
                return level
        return PriorityLevel.NORMAL
    return min(POSIX_NICE, key=lambda lv: abs(POSIX_NICE[lv] - int(value)))
