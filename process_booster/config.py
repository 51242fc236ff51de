# -*- coding: utf-8 -*-
"""Configuration (DEFAULT_CFG) + load/save config"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from urllib.parse import urlsplit

log = logging.getLogger(__name__)

APP_NAME = "Process Manager Application"
CFG_PATH = Path.home() / ".config" / "py_process_booster" / "config.json"

DEFAULT_CFG = {
    "url": "http://localhost:8080/",
    "log_path": "boost_log.txt",
    "top_count_default": 5,
    "top_count_max": 20,
}

BYTES_PER_MB = 1024.0 * 1024.0


def load_cfg(path: Path = CFG_PATH) -> dict:
    """Load config from path, merge into DEFAULT_CFG."""
    cfg = dict(DEFAULT_CFG)
    if not path.exists():
        return cfg
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable config %s: %s", path, e)
        return cfg
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: top level is not an object", path)
        return cfg
    cfg.update({k: v for k, v in data.items() if k in cfg})
    return cfg


def save_cfg(cfg: dict, path: Path = CFG_PATH) -> None:
    """Save config to path."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(cfg, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        log.warning("Could not save config %s: %s", path, e)


def host_port_from_url(url: str) -> tuple[str, int]:
    """'http://localhost:8080/' -> ('localhost', 8080)"""
    parts = urlsplit(url)
    host = parts.hostname or "localhost"
    port = parts.port if parts.port is not None else 80
    return host, port
