# -*- coding: utf-8 -*-

import tkinter as tk
from typing import Callable

from core.phase_timer import Scheduler


class TkScheduler(Scheduler):
    """One-shot callbacks on the Tk event loop (widget.after)."""

    def __init__(self, widget: tk.Misc):
        self.widget = widget

    def schedule(self, delay_sec: float, callback: Callable[[], None]) -> str:
        ms = max(0, int(round(delay_sec * 1000)))
        return self.widget.after(ms, callback)

    def cancel(self, handle: str) -> None:
        try:
            self.widget.after_cancel(handle)
        except tk.TclError:
            # window already torn down
            pass
