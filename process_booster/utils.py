# -*- coding: utf-8 -*-
"""Shared helpers (formatting, parsing, etc.)"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1


def fmt_mb(mb: float) -> str:
    return f"{mb:,.2f}"


def fmt_duration(td: timedelta) -> str:
    """timedelta -> 'HH:MM:SS.fff' (hours wrap at 24, days are dropped)"""
    total_ms = td // timedelta(milliseconds=1)
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    seconds, ms = divmod(rem, 1000)
    return f"{hours % 24:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"


def dt_str(dt: datetime) -> str:
    try:
        return dt.strftime("%Y-%m-%d %H:%M:%S")
    except Exception:
        return ""


def parse_int(s: str | None) -> int | None:
    """Strict 32-bit integer parse: optional sign and surrounding blanks, digits only."""
    if s is None or not _INT_RE.match(s):
        return None
    n = int(s)
    if not INT32_MIN <= n <= INT32_MAX:
        return None
    return n


def clamp(value: int, lo: int, hi: int) -> int:
    if lo > hi:
        raise ValueError("lo must be less than or equal to hi")
    return max(lo, min(hi, value))


def truncate(name: str, keep: int = 27) -> str:
    """Shorten names longer than keep + 3 to keep chars + '...'."""
    if len(name) > keep + 3:
        return name[:keep] + "..."
    return name
