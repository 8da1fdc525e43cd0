# -*- coding: utf-8 -*-

from typing import Any, Callable

from services.timer_service import TimerService

TICK_MS = 1000


class TickLoop:
    """
    1 Hz tick source for TimerService, scheduled through Tk-style
    after()/after_cancel() callables.
    """

    def __init__(
        self,
        timer_service: TimerService,
        after: Callable[..., Any],
        after_cancel: Callable[[Any], None],
        interval_ms: int = TICK_MS,
    ):
        self.timer_service = timer_service
        self._after = after
        self._after_cancel = after_cancel
        self.interval_ms = interval_ms
        self._job = None

    @property
    def is_pending(self) -> bool:
        return self._job is not None

    def ensure(self) -> None:
        if self._job is None:
            self._job = self._after(self.interval_ms, self._tick_once)

    def stop(self) -> None:
        if self._job is not None:
            self._after_cancel(self._job)
            self._job = None

    def _tick_once(self) -> None:
        self._job = None
        if self.timer_service.get_snapshot().is_running:
            self.timer_service.tick()
        # a phase transition stops the timer; the next phase waits for Start
        if self._job is None and self.timer_service.get_snapshot().is_running:
            self._job = self._after(self.interval_ms, self._tick_once)
