#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os

from ui.breathing_window import BreathingWindow

from services.settings_service import SettingsService
from services.summary_service import PatternSummaryService
from storage.db import Database
from storage.repos import SettingsRepo


def _setup_logging() -> None:
    level = os.environ.get("EXHALE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    _setup_logging()

    db = Database(db_path=os.environ.get("EXHALE_DB", "exhale.db"))
    db.init_schema()

    settings_service = SettingsService(SettingsRepo(db))
    summary_service = PatternSummaryService(settings_service)

    app = BreathingWindow(settings_service, summary_service)
    try:
        app.run()
    finally:
        db.close()


if __name__ == "__main__":
    main()
