# -*- coding: utf-8 -*-

import logging
import math
from typing import Callable, Optional

from core.constants import (
    DEFAULT_LONG_BREAK_INTERVAL,
    NOTIFY_BREAK_DONE_MESSAGE,
    NOTIFY_BREAK_DONE_TITLE,
    NOTIFY_WORK_DONE_TITLE,
    PHASE_LABELS,
    work_done_message,
)
from domain.models import Cue, DisplayState, Phase, TimerConfig, TimerSnapshot

NotifyFn = Callable[[str, str], None]
CueFn = Callable[[Cue], None]
ConfigProvider = Callable[[], TimerConfig]


def _noop_notify(title: str, message: str) -> None:
    pass


def _noop_cue(cue: Cue) -> None:
    pass


def progress_fraction(remaining_sec: int, phase_total_sec: int) -> float:
    if phase_total_sec <= 0:
        return 0.0
    progress = 1.0 - (remaining_sec / phase_total_sec)
    if math.isnan(progress) or math.isinf(progress):
        return 0.0
    return min(1.0, max(0.0, progress))


class PhaseTimer:
    """
    Work / break / long-break countdown (no Tkinter).
    The owner calls tick() once per second while running; cues and
    notifications are pushed through the callbacks given at construction.
    """

    def __init__(
        self,
        config_provider: Optional[ConfigProvider] = None,
        notify: NotifyFn = _noop_notify,
        on_cue: CueFn = _noop_cue,
        logger: Optional[logging.Logger] = None,
    ):
        self.config_provider: ConfigProvider = config_provider or TimerConfig
        self._notify = notify
        self._on_cue = on_cue
        self._logger = logger or logging.getLogger("pomodoro")

        self.completed_work_cycles = 0
        self.is_running = False
        self._enter_phase(Phase.WORK, self.config_provider())

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self.phase,
            remaining_sec=self.remaining_sec,
            phase_total_sec=self.phase_total_sec,
            is_running=self.is_running,
            completed_work_cycles=self.completed_work_cycles,
        )

    def display(self) -> DisplayState:
        remaining = max(0, self.remaining_sec)
        return DisplayState(
            minutes=f"{remaining // 60:02d}",
            seconds=f"{remaining % 60:02d}",
            progress=progress_fraction(remaining, self.phase_total_sec),
            label=PHASE_LABELS[self.phase],
        )

    def start(self) -> None:
        if self.is_running:
            return
        self.is_running = True
        self._logger.info(
            "Timer started: phase=%s remaining=%ss", self.phase.value, self.remaining_sec
        )
        self._on_cue(Cue.WORK_RUNNING if self.phase == Phase.WORK else Cue.BREAK_RUNNING)

    def pause(self) -> None:
        if not self.is_running:
            return
        self.is_running = False
        self._logger.info(
            "Timer paused: phase=%s remaining=%ss", self.phase.value, self.remaining_sec
        )
        self._on_cue(Cue.PAUSED)

    def reset(self) -> None:
        self.is_running = False
        self._on_cue(Cue.IDLE)
        self._enter_phase(Phase.WORK, self.config_provider())
        self._logger.info("Timer reset: work=%ss", self.phase_total_sec)

    def tick(self) -> bool:
        """
        Returns True if the phase changed on this tick.
        """
        if not self.is_running:
            return False

        if self.remaining_sec > 0:
            self.remaining_sec = max(0, self.remaining_sec - 1)
            return False

        self.is_running = False
        if self.phase == Phase.WORK:
            self._finish_work()
        else:
            self._finish_break()
        return True

    # ----- Transitions -----
    def _finish_work(self) -> None:
        self.completed_work_cycles += 1
        self._logger.info("Work phase completed: total=%s", self.completed_work_cycles)

        config = self.config_provider()
        interval = config.long_break_interval
        if interval <= 0:
            interval = DEFAULT_LONG_BREAK_INTERVAL

        if self.completed_work_cycles % interval == 0:
            self._enter_phase(Phase.LONG_BREAK, config)
            self._on_cue(Cue.LONG_BREAK)
        else:
            self._enter_phase(Phase.BREAK, config)
            self._on_cue(Cue.BREAK_RUNNING)

        # next phase is committed before the sink runs
        self._notify(NOTIFY_WORK_DONE_TITLE, work_done_message(self.completed_work_cycles))

    def _finish_break(self) -> None:
        self._logger.info("%s phase completed", PHASE_LABELS[self.phase])
        self._enter_phase(Phase.WORK, self.config_provider())
        self._notify(NOTIFY_BREAK_DONE_TITLE, NOTIFY_BREAK_DONE_MESSAGE)

    def _enter_phase(self, phase: Phase, config: TimerConfig) -> None:
        self.phase = phase
        self.phase_total_sec = max(0, int(config.phase_total(phase)))
        self.remaining_sec = self.phase_total_sec
