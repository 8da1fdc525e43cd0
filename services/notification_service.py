# -*- coding: utf-8 -*-

import logging
from pathlib import Path
from typing import Optional

from plyer import notification


class DesktopNotifier:
    """
    Native desktop toast via plyer.
    Fire-and-forget: delivery problems are logged, never raised.
    """

    def __init__(
        self,
        app_name: str = "Pomodoro",
        app_icon: Optional[str] = None,
        timeout: int = 10,
        logger: Optional[logging.Logger] = None,
    ):
        self.app_name = app_name
        self.app_icon = app_icon
        self.timeout = timeout
        self._logger = logger or logging.getLogger("pomodoro.notifications")

    def _icon_path(self) -> str:
        if self.app_icon and Path(self.app_icon).is_file():
            return str(self.app_icon)
        return ""

    def notify(self, title: str, message: str) -> None:
        try:
            notification.notify(
                title=title,
                message=message,
                app_name=self.app_name,
                app_icon=self._icon_path(),
                timeout=self.timeout,
            )
        except Exception as error:
            self._logger.error("Desktop notification failed: %s", error)
            return
        self._logger.debug("Notification sent: %s", title)
