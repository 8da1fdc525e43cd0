# -*- coding: utf-8 -*-

import tkinter as tk

from services.timer_service import TimerService
from ui.pomodoro_widget import PomodoroWidget


class MainWindow:
    def __init__(self, timer_service: TimerService):
        self.timer_service = timer_service

        self.root = tk.Tk()
        self.root.title("Pomodoro")
        self.root.geometry("320x300")
        self.root.minsize(280, 240)

        self._build_ui()

    def _build_ui(self):
        # widget fills the window so its cue colour is the window background
        self.pomodoro = PomodoroWidget(self.root, timer_service=self.timer_service)
        self.pomodoro.pack(expand=True, fill="both")

    def run(self):
        self.root.mainloop()
