# -*- coding: utf-8 -*-
from __future__ import annotations

import logging

from .app import ProcessBoosterApp

def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app = ProcessBoosterApp()
    app.run()

if __name__ == "__main__":
    main()
