# -*- coding: utf-8 -*-

import tkinter as tk

from core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_LONG_BREAK_INTERVAL,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
)
from core.timer_config import RawConfig, read_config
from domain.models import Cue, TimerConfig
from ui.theme import CUE_COLORS, FG_COLOR


class SettingsPanel(tk.Frame):
    """Editable durations. Values are read again at every phase start."""

    def __init__(self, master):
        super().__init__(master, bg=CUE_COLORS[Cue.IDLE], padx=8, pady=8)

        self.work_var = tk.StringVar(value=str(DEFAULT_WORK_MINUTES))
        self.break_var = tk.StringVar(value=str(DEFAULT_BREAK_MINUTES))
        self.long_break_var = tk.StringVar(value=str(DEFAULT_LONG_BREAK_MINUTES))
        self.interval_var = tk.StringVar(value=str(DEFAULT_LONG_BREAK_INTERVAL))

        rows = (
            ("Work (min)", self.work_var),
            ("Break (min)", self.break_var),
            ("Long break (min)", self.long_break_var),
            ("Long break every", self.interval_var),
        )
        for i, (text, var) in enumerate(rows):
            tk.Label(
                self, text=text, font=("Montserrat", 9), fg=FG_COLOR, bg=self.cget("bg")
            ).grid(row=i, column=0, sticky="w", pady=2)
            tk.Entry(self, textvariable=var, width=6, justify="center").grid(
                row=i, column=1, sticky="e", padx=(8, 0), pady=2
            )

    def raw_values(self) -> RawConfig:
        return (
            self.work_var.get(),
            self.break_var.get(),
            self.long_break_var.get(),
            self.interval_var.get(),
        )

    def read_config(self) -> TimerConfig:
        return read_config(self.raw_values)
