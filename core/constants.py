# -*- coding: utf-8 -*-

"""Defaults, labels and notification texts used by the phase timer."""

from domain.models import Phase

DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_LONG_BREAK_INTERVAL = 4

PHASE_LABELS = {
    Phase.WORK: "Work",
    Phase.BREAK: "Break",
    Phase.LONG_BREAK: "Long break",
}

NOTIFY_WORK_DONE_TITLE = "Pomodoro completed"
NOTIFY_BREAK_DONE_TITLE = "Starting work phase"
NOTIFY_BREAK_DONE_MESSAGE = "Let's focus on this session. You can do it!"


def work_done_message(completed: int) -> str:
    noun = "pomodoro" if completed == 1 else "pomodoros"
    return f"You have completed {completed} {noun}"
