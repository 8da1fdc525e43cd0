#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os

from services.notification_service import DesktopNotifier
from services.timer_service import TimerService
from ui.main_window import MainWindow


def env_log_level(default: int = logging.INFO) -> int:
    name = os.environ.get("POMODORO_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=env_log_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return logging.getLogger("pomodoro")


def main():
    logger = setup_logging()

    notifier = DesktopNotifier(app_name="Pomodoro")
    timer_service = TimerService(notifier=notifier.notify)

    app = MainWindow(timer_service)
    logger.info("Pomodoro window ready")
    app.run()


if __name__ == "__main__":
    main()
