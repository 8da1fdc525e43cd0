# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

from domain.models import Cue, TimerSnapshot
from services.timer_service import TimerService
from ui.settings_panel import SettingsPanel
from ui.theme import CUE_COLORS, FADE_STEP_MS, FG_COLOR, blend, fade_steps
from ui.tick_loop import TickLoop

# these widget classes keep their own background
_NO_BG_CLASSES = ("Entry", "TProgressbar")


class PomodoroWidget(tk.Frame):
    def __init__(self, master, timer_service: TimerService):
        super().__init__(master, bg=CUE_COLORS[Cue.IDLE])

        self.timer_service = timer_service

        self._tick_loop = TickLoop(timer_service, self.after, self.after_cancel)
        self._fade_job = None
        self._bg_color = CUE_COLORS[Cue.IDLE]
        self._settings_open = False

        self._build_ui()

        # wire callbacks from service -> widget UI
        self.timer_service.set_config_provider(self.settings.read_config)
        self.timer_service.set_on_tick(self._on_tick)
        self.timer_service.set_on_phase_change(self._on_phase_change)
        self.timer_service.set_on_state_change(self._on_state_change)
        self.timer_service.set_on_cue(self._on_cue)

        # initial render
        self._render(self.timer_service.get_snapshot())
        self._update_buttons()

    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        self.phase_var = tk.StringVar(value="Phase: Work")
        self.time_var = tk.StringVar(value="25:00")
        self.count_var = tk.StringVar(value="Pomodoros completed: 0")
        self.progress_var = tk.DoubleVar(value=0.0)

        top = tk.Frame(self, bg=self._bg_color)
        top.grid(row=0, column=0, sticky="ew")
        top.columnconfigure(0, weight=1)

        tk.Label(
            top, textvariable=self.phase_var, font=("Montserrat", 10, "bold"), fg=FG_COLOR
        ).grid(row=0, column=0, sticky="w")

        self.settings_btn = tk.Button(
            top,
            text="⚙",
            command=self._toggle_settings,
            relief="flat",
            borderwidth=0,
            highlightthickness=0,
            fg=FG_COLOR,
        )
        self.settings_btn.grid(row=0, column=1, sticky="e")

        tk.Label(
            self, textvariable=self.time_var, font=("Montserrat", 46, "bold"), fg=FG_COLOR
        ).grid(row=1, column=0, pady=(4, 4))

        self.progress = ttk.Progressbar(
            self, variable=self.progress_var, maximum=1.0, mode="determinate"
        )
        self.progress.grid(row=2, column=0, sticky="ew", padx=10)

        tk.Label(
            self, textvariable=self.count_var, font=("Montserrat", 8), fg=FG_COLOR
        ).grid(row=3, column=0, pady=(6, 6))

        btns = tk.Frame(self)
        btns.grid(row=4, column=0)

        self.start_btn = tk.Button(btns, text="Start", command=self._start, fg=FG_COLOR)
        self.pause_btn = tk.Button(btns, text="Pause", command=self._pause, fg=FG_COLOR)
        self.reset_btn = tk.Button(btns, text="Reset", command=self._reset, fg=FG_COLOR)

        self.start_btn.grid(row=0, column=0, padx=(0, 6))
        self.pause_btn.grid(row=0, column=1, padx=(0, 6))
        self.reset_btn.grid(row=0, column=2)

        self.settings = SettingsPanel(self)
        self.settings.grid(row=5, column=0, sticky="ew", pady=(10, 0))
        self.settings.grid_remove()

        self._apply_bg(self, self._bg_color)

    def _update_buttons(self):
        snap = self.timer_service.get_snapshot()
        self.start_btn.config(state="disabled" if snap.is_running else "normal")
        self.pause_btn.config(state="normal" if snap.is_running else "disabled")

    def _toggle_settings(self):
        if self._settings_open:
            self.settings.grid_remove()
        else:
            self.settings.grid()
        self._settings_open = not self._settings_open

    def _start(self):
        self.timer_service.start()
        self._ensure_tick_loop()

    def _pause(self):
        self.timer_service.pause()
        self._stop_tick_loop()

    def _reset(self):
        self._stop_tick_loop()
        self.timer_service.reset()

    # ---- Tick loop (UI-driven) ----
    def _ensure_tick_loop(self):
        self._tick_loop.ensure()

    def _stop_tick_loop(self):
        self._tick_loop.stop()

    # ---- Service callbacks ----
    def _on_tick(self, snap: TimerSnapshot):
        self._render(snap)

    def _on_phase_change(self, snap: TimerSnapshot):
        self._stop_tick_loop()
        self._render(snap)
        self._update_buttons()

    def _on_state_change(self, snap: TimerSnapshot):
        self._render(snap)
        self._update_buttons()

    def _on_cue(self, cue: Cue):
        self._fade_to(CUE_COLORS[cue])

    def _render(self, snap: TimerSnapshot):
        display = self.timer_service.get_display()
        self.time_var.set(display.clock)
        self.phase_var.set(f"Phase: {display.label}")
        self.progress_var.set(display.progress)
        self.count_var.set(f"Pomodoros completed: {snap.completed_work_cycles}")

    # ---- Background cue ----
    def _fade_to(self, target: str):
        if self._fade_job is not None:
            self.after_cancel(self._fade_job)
            self._fade_job = None
        self._fade_step(self._bg_color, target, 1, fade_steps())

    def _fade_step(self, start: str, target: str, step: int, total: int):
        self._bg_color = blend(start, target, step / total)
        self._apply_bg(self, self._bg_color)
        if step < total:
            self._fade_job = self.after(
                FADE_STEP_MS, self._fade_step, start, target, step + 1, total
            )
        else:
            self._fade_job = None

    def _apply_bg(self, widget, color: str):
        if widget.winfo_class() not in _NO_BG_CLASSES:
            try:
                widget.configure(bg=color)
                if widget.winfo_class() == "Button":
                    widget.configure(activebackground=color)
            except tk.TclError:
                pass
        for child in widget.winfo_children():
            self._apply_bg(child, color)
