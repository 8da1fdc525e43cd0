# -*- coding: utf-8 -*-

import logging
from typing import Callable, Tuple, Union

from core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_LONG_BREAK_INTERVAL,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
)
from domain.models import TimerConfig

_log = logging.getLogger("pomodoro.config")

RawValue = Union[str, int, None]
RawConfig = Tuple[RawValue, RawValue, RawValue, RawValue]


def parse_positive_int(raw: RawValue, default: int) -> int:
    """
    Parse a user-typed field as a positive integer.
    Empty, unparseable, zero or negative input gives `default`.
    """
    if isinstance(raw, bool):
        value = None
    elif isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            value = None

    if value is None or value <= 0:
        _log.debug("Invalid config value %r, falling back to %s", raw, default)
        return default
    return value


def config_from_raw(
    work_minutes: RawValue,
    break_minutes: RawValue,
    long_break_minutes: RawValue,
    long_break_interval: RawValue,
) -> TimerConfig:
    return TimerConfig(
        work_sec=parse_positive_int(work_minutes, DEFAULT_WORK_MINUTES) * 60,
        break_sec=parse_positive_int(break_minutes, DEFAULT_BREAK_MINUTES) * 60,
        long_break_sec=parse_positive_int(
            long_break_minutes, DEFAULT_LONG_BREAK_MINUTES
        )
        * 60,
        long_break_interval=parse_positive_int(
            long_break_interval, DEFAULT_LONG_BREAK_INTERVAL
        ),
    )


def read_config(provider: Callable[[], RawConfig]) -> TimerConfig:
    """Fetch the four raw fields from `provider` and parse them."""
    return config_from_raw(*provider())
