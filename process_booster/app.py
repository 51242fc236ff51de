# -*- coding: utf-8 -*-
"""Process Booster - psutil + Flask
Run: python -m process_booster.main
"""
from __future__ import annotations

from pathlib import Path

from .activity_log import ActivityLog
from .config import CFG_PATH, load_cfg, save_cfg
from .console import ConsoleUserInterface
from .processes import ProcessService, PsutilProcessService
from .server import HttpServer, create_app


class ProcessBoosterApp:
    def __init__(self, cfg: dict | None = None, service: ProcessService | None = None,
                 cfg_path: Path = CFG_PATH):
        self.cfg_path = cfg_path
        self.cfg = cfg if cfg is not None else load_cfg(cfg_path)

        self.activity_log = ActivityLog(self.cfg["log_path"])
        self.service = service if service is not None else PsutilProcessService(self.activity_log)

        app = create_app(
            self.service,
            self.activity_log,
            top_count_default=int(self.cfg["top_count_default"]),
            top_count_max=int(self.cfg["top_count_max"]),
        )
        self.server = HttpServer(self.service, self.activity_log, self.cfg["url"], app=app)
        self.console = ConsoleUserInterface(self.service, self.activity_log, self.cfg["url"])

    def run(self) -> None:
        self.server.start()
        self.console.url = self.server.url
        try:
            self.console.run()
        finally:
            self.server.stop()
            self._on_close()

    def _on_close(self) -> None:
        # writes the defaults out on first run so there is a file to edit
        save_cfg(self.cfg, self.cfg_path)
