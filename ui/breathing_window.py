# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from typing import Optional

from PIL import ImageTk

from core.phase_timer import PhaseStep
from domain.models import Settings
from services.breathing_service import BreathingService
from services.settings_service import SettingsService
from services.summary_service import PatternSummaryService
from ui.fill_painter import FillPainter
from ui.settings_panel import SettingsPanel
from ui.tk_scheduler import TkScheduler

logger = logging.getLogger(__name__)


class BreathingWindow:
    FRAME_MS = 16  # ~60 FPS

    def __init__(
        self,
        settings_service: SettingsService,
        summary_service: PatternSummaryService,
    ):
        self.settings_service = settings_service
        self.summary_service = summary_service

        self.root = tk.Tk()
        self.root.title("exhale")
        self.root.geometry("800x600")
        self.root.minsize(200, 150)

        self.breathing = BreathingService(settings_service, TkScheduler(self.root))
        self.breathing.set_on_phase_change(self._on_phase_change)
        self.painter = FillPainter()

        self._frame_job = None
        self._photo: Optional[ImageTk.PhotoImage] = None
        self._settings_panel: Optional[SettingsPanel] = None

        self._build_ui()
        self._apply_window_settings(settings_service.get())
        self._unsubscribe = settings_service.subscribe(self._apply_window_settings)

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        # start breathing once the window is on screen
        self.root.after_idle(self._start)

    def _build_ui(self):
        root = self.root

        self.canvas = tk.Canvas(root, highlightthickness=0, borderwidth=0)
        self.canvas.pack(fill="both", expand=True)
        self._image_id = self.canvas.create_image(0, 0, anchor="nw")

        menubar = tk.Menu(root)
        app_menu = tk.Menu(menubar, tearoff=False)
        app_menu.add_command(
            label="Preferences...", accelerator="Ctrl+,", command=self.show_settings
        )
        app_menu.add_command(label="Restart cycle", command=self.restart)
        app_menu.add_separator()
        app_menu.add_command(label="Quit exhale", accelerator="Ctrl+Q", command=self.quit)
        menubar.add_cascade(label="exhale", menu=app_menu)
        root.config(menu=menubar)

        root.bind_all("<Control-comma>", lambda e: self.show_settings())
        root.bind_all("<Control-q>", lambda e: self.quit())
        if root.tk.call("tk", "windowingsystem") == "aqua":
            root.bind_all("<Command-comma>", lambda e: self.show_settings())
            root.bind_all("<Command-q>", lambda e: self.quit())

    def run(self):
        self.root.mainloop()

    # ----- Actions -----
    def show_settings(self):
        panel = self._settings_panel
        if panel is not None and panel.winfo_exists():
            panel.deiconify()
            panel.lift()
            panel.focus_set()
            return
        self._settings_panel = SettingsPanel(
            self.root,
            settings_service=self.settings_service,
            summary_service=self.summary_service,
            on_restart=self.restart,
        )

    def restart(self):
        self.breathing.restart()
        self._ensure_frame_loop()

    def quit(self):
        self._on_close()

    # ----- Settings -----
    def _apply_window_settings(self, settings: Settings):
        self.canvas.configure(bg=settings.background_color.to_hex(with_alpha=False))
        try:
            self.root.attributes("-alpha", settings.overlay_opacity)
            self.root.attributes("-topmost", True)
        except tk.TclError:
            # some window managers reject alpha
            logger.debug("window alpha not supported")

    def _on_phase_change(self, step: PhaseStep):
        self.root.title(f"exhale · {step.phase.label}")

    # ----- Frame loop -----
    def _start(self):
        self.breathing.start()
        self._ensure_frame_loop()

    def _ensure_frame_loop(self):
        if self._frame_job is None:
            self._frame_job = self.root.after(self.FRAME_MS, self._render_frame)

    def _stop_frame_loop(self):
        if self._frame_job is not None:
            try:
                self.root.after_cancel(self._frame_job)
            except tk.TclError:
                pass
            self._frame_job = None

    def _render_frame(self):
        self._frame_job = None
        w = self.canvas.winfo_width()
        h = self.canvas.winfo_height()
        if w > 1 and h > 1:
            frame = self.breathing.frame(w, h)
            self._photo = ImageTk.PhotoImage(self.painter.render(frame, w, h))
            self.canvas.itemconfig(self._image_id, image=self._photo)

        if self.breathing.is_running:
            self._frame_job = self.root.after(self.FRAME_MS, self._render_frame)

    def _on_close(self):
        self._stop_frame_loop()
        self.breathing.stop()
        self._unsubscribe()
        self.root.destroy()
