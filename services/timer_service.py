# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from core.timer_engine import ConfigProvider, NotifyFn, PhaseTimer
from domain.models import Cue, DisplayState, TimerSnapshot


class TimerService:
    """
    Orchestrates:
    - PhaseTimer state
    - Desktop notifications at phase boundaries
    - Visual cue forwarding
    - Callbacks for UI
    """

    def __init__(
        self,
        notifier: Optional[NotifyFn] = None,
        config_provider: Optional[ConfigProvider] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._notifier = notifier
        self._logger = logger or logging.getLogger("pomodoro.service")

        self._on_tick: Optional[Callable[[TimerSnapshot], None]] = None
        self._on_phase_change: Optional[Callable[[TimerSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[TimerSnapshot], None]] = None
        self._on_cue: Optional[Callable[[Cue], None]] = None

        self.timer = PhaseTimer(
            config_provider=config_provider,
            notify=self._emit_notification,
            on_cue=self._emit_cue,
        )

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[TimerSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_phase_change(self, fn: Callable[[TimerSnapshot], None]) -> None:
        self._on_phase_change = fn

    def set_on_state_change(self, fn: Callable[[TimerSnapshot], None]) -> None:
        self._on_state_change = fn

    def set_on_cue(self, fn: Callable[[Cue], None]) -> None:
        self._on_cue = fn

    def set_config_provider(self, fn: ConfigProvider) -> None:
        self.timer.config_provider = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.timer.snapshot())

    def _emit_phase_change(self) -> None:
        if self._on_phase_change:
            self._on_phase_change(self.timer.snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.timer.snapshot())

    def _emit_cue(self, cue: Cue) -> None:
        self._logger.debug("Cue: %s", cue.value)
        if self._on_cue:
            self._on_cue(cue)

    def _emit_notification(self, title: str, message: str) -> None:
        self._logger.info("Notify: %s - %s", title, message)
        if not self._notifier:
            return
        try:
            self._notifier(title, message)
        except Exception as error:
            self._logger.error("Notification sink failed: %s", error)

    # ----- Public API -----
    def get_snapshot(self) -> TimerSnapshot:
        return self.timer.snapshot()

    def get_display(self) -> DisplayState:
        return self.timer.display()

    def start(self) -> None:
        self.timer.start()
        self._emit_state_change()

    def pause(self) -> None:
        self.timer.pause()
        self._emit_state_change()

    def reset(self) -> None:
        self.timer.reset()
        self._emit_state_change()

    def tick(self) -> None:
        """
        Should be called once per second by the UI loop while running.
        """
        if not self.timer.is_running:
            return

        phase_changed = self.timer.tick()

        # always emit tick
        self._emit_tick()

        if phase_changed:
            self._emit_phase_change()
