# -*- coding: utf-8 -*-

from typing import Tuple

from domain.models import Cue

CUE_COLORS = {
    Cue.IDLE: "#011627",
    Cue.WORK_RUNNING: "#17615A",
    Cue.PAUSED: "#A05E00",
    Cue.BREAK_RUNNING: "#971020",
    Cue.LONG_BREAK: "#A05E00",
}

FG_COLOR = "white"
FADE_SECONDS = 0.6
FADE_STEP_MS = 30


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    c = color.lstrip("#")
    return int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = (max(0, min(255, int(round(v)))) for v in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def ease_in_out(t: float) -> float:
    """Quadratic ease-in-out on [0, 1]."""
    t = max(0.0, min(1.0, t))
    if t < 0.5:
        return 2 * t * t
    return 1 - ((-2 * t + 2) ** 2) / 2


def blend(start: str, end: str, t: float) -> str:
    a = hex_to_rgb(start)
    b = hex_to_rgb(end)
    k = ease_in_out(t)
    return rgb_to_hex(tuple(x + (y - x) * k for x, y in zip(a, b)))


def fade_steps(duration: float = FADE_SECONDS, step_ms: int = FADE_STEP_MS) -> int:
    return max(1, int(round(duration * 1000 / step_ms)))
