# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    WORK = "work"
    BREAK = "break"
    LONG_BREAK = "long_break"


class Cue(str, Enum):
    IDLE = "idle"
    WORK_RUNNING = "work-running"
    PAUSED = "paused"
    BREAK_RUNNING = "break-running"
    LONG_BREAK = "long-break"


@dataclass(frozen=True)
class TimerConfig:
    work_sec: int = 25 * 60
    break_sec: int = 5 * 60
    long_break_sec: int = 15 * 60
    long_break_interval: int = 4

    def phase_total(self, phase: Phase) -> int:
        if phase == Phase.WORK:
            return self.work_sec
        if phase == Phase.LONG_BREAK:
            return self.long_break_sec
        return self.break_sec


@dataclass(frozen=True)
class TimerSnapshot:
    phase: Phase
    remaining_sec: int
    phase_total_sec: int
    is_running: bool
    completed_work_cycles: int


@dataclass(frozen=True)
class DisplayState:
    minutes: str  # "25"
    seconds: str  # "00"
    progress: float  # 0.0 .. 1.0
    label: str

    @property
    def clock(self) -> str:
        return f"{self.minutes}:{self.seconds}"
