# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import colorchooser, ttk
from typing import Any, Callable, Dict, Optional

from tkinterweb import HtmlFrame

from domain.models import (
    RGBA,
    AnimationMode,
    AnimationShape,
    ColorFillType,
    Settings,
)
from services.settings_service import SettingsError, SettingsService
from services.summary_service import PatternSummaryService
from ui.markdown_renderer import MarkdownRenderer

# field, label, min, max
_SLIDERS = (
    ("inhale_duration", "Inhale (s)", 0.5, 20.0),
    ("post_inhale_hold_duration", "Hold after inhale (s)", 0.0, 20.0),
    ("exhale_duration", "Exhale (s)", 0.5, 20.0),
    ("post_exhale_hold_duration", "Hold after exhale (s)", 0.0, 20.0),
    ("drift", "Drift", 0.9, 1.1),
    ("overlay_opacity", "Overlay opacity", 0.05, 1.0),
)

_COLORS = (
    ("inhale_color", "Inhale color"),
    ("exhale_color", "Exhale color"),
    ("background_color", "Background color"),
)


class SettingsPanel(tk.Toplevel):
    SAVE_DEBOUNCE_MS = 150

    def __init__(
        self,
        master,
        settings_service: SettingsService,
        summary_service: PatternSummaryService,
        on_restart: Callable[[], None],
    ):
        super().__init__(master)
        self.title("Preferences")
        self.geometry("460x720")

        self.settings_service = settings_service
        self.summary_service = summary_service
        self.on_restart = on_restart
        self._md = MarkdownRenderer()

        self._slider_vars: Dict[str, tk.DoubleVar] = {}
        self._slider_labels: Dict[str, tk.StringVar] = {}
        self._swatches: Dict[str, tk.Label] = {}
        self._pending: Dict[str, Any] = {}
        self._save_job = None
        self._block_programmatic = False

        self._build_ui()
        self._fill_from(settings_service.get())
        self._unsubscribe = settings_service.subscribe(self._fill_from)

        self.bind("<Escape>", lambda e: self.destroy())
        self.bind("<Destroy>", self._on_destroy)

    def _build_ui(self):
        outer = ttk.Frame(self, padding=10)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(0, weight=1)

        # colors
        colors = ttk.Labelframe(outer, text="Colors", padding=8)
        colors.grid(row=0, column=0, sticky="ew")
        colors.columnconfigure(0, weight=1)
        for i, (name, label) in enumerate(_COLORS):
            ttk.Label(colors, text=label).grid(row=i, column=0, sticky="w")
            sw = tk.Label(colors, width=4, relief="groove")
            sw.grid(row=i, column=1, padx=6, pady=2)
            self._swatches[name] = sw
            ttk.Button(
                colors, text="Choose...", command=lambda n=name: self._pick_color(n)
            ).grid(row=i, column=2)

        # fill
        look = ttk.Labelframe(outer, text="Appearance", padding=8)
        look.grid(row=1, column=0, sticky="ew", pady=(8, 0))

        self.fill_var = tk.StringVar()
        self.shape_var = tk.StringVar()
        self.mode_var = tk.StringVar()
        self.transition_var = tk.BooleanVar()

        self._radio_row(look, 0, "Fill", self.fill_var, ColorFillType, "color_fill_type")
        self._radio_row(look, 1, "Shape", self.shape_var, AnimationShape, "shape")
        self._radio_row(look, 2, "Animation", self.mode_var, AnimationMode, "animation_mode")
        ttk.Checkbutton(
            look,
            text="Blend between inhale and exhale colors",
            variable=self.transition_var,
            command=lambda: self._apply(color_transition_enabled=self.transition_var.get()),
        ).grid(row=3, column=0, columnspan=3, sticky="w", pady=(4, 0))

        # timing
        timing = ttk.Labelframe(outer, text="Timing", padding=8)
        timing.grid(row=2, column=0, sticky="ew", pady=(8, 0))
        timing.columnconfigure(1, weight=1)
        for i, (name, label, lo, hi) in enumerate(_SLIDERS):
            ttk.Label(timing, text=label).grid(row=i, column=0, sticky="w")
            var = tk.DoubleVar()
            ttk.Scale(
                timing,
                from_=lo,
                to=hi,
                variable=var,
                command=lambda _v, n=name: self._on_slider(n),
            ).grid(row=i, column=1, sticky="ew", padx=6)
            text = tk.StringVar()
            ttk.Label(timing, textvariable=text, width=6).grid(row=i, column=2, sticky="e")
            self._slider_vars[name] = var
            self._slider_labels[name] = text

        self.err_var = tk.StringVar(value="")
        ttk.Label(outer, textvariable=self.err_var, foreground="red").grid(
            row=3, column=0, sticky="w", pady=(6, 0)
        )

        # summary
        outer.rowconfigure(4, weight=1)
        self.summary_view = HtmlFrame(outer, horizontal_scrollbar="auto")
        self.summary_view.grid(row=4, column=0, sticky="nsew", pady=(6, 6))

        btns = ttk.Frame(outer)
        btns.grid(row=5, column=0, sticky="ew")
        ttk.Button(btns, text="Restart cycle", command=self.on_restart).pack(side="left")
        ttk.Button(btns, text="Reset to defaults", command=self._reset).pack(
            side="left", padx=(6, 0)
        )
        ttk.Button(btns, text="Close", command=self.destroy).pack(side="right")

    def _radio_row(self, parent, row: int, label: str, var: tk.StringVar, enum_cls, field: str):
        ttk.Label(parent, text=label).grid(row=row, column=0, sticky="w", padx=(0, 8))
        for col, member in enumerate(enum_cls, start=1):
            ttk.Radiobutton(
                parent,
                text=member.value.capitalize(),
                value=member.value,
                variable=var,
                command=lambda: self._apply(**{field: enum_cls(var.get())}),
            ).grid(row=row, column=col, sticky="w")

    # ----- Fill -----
    def _fill_from(self, settings: Settings):
        self._block_programmatic = True
        try:
            for name, _label in _COLORS:
                color: RGBA = getattr(settings, name)
                self._swatches[name].configure(bg=color.to_hex(with_alpha=False))
            for name, *_ in _SLIDERS:
                if name not in self._pending:
                    value = float(getattr(settings, name))
                    self._slider_vars[name].set(value)
                    self._slider_labels[name].set(self._fmt(name, value))
            self.fill_var.set(settings.color_fill_type.value)
            self.shape_var.set(settings.shape.value)
            self.mode_var.set(settings.animation_mode.value)
            self.transition_var.set(settings.color_transition_enabled)
        finally:
            self._block_programmatic = False
        self._render_summary(settings)

    def _render_summary(self, settings: Settings):
        html = self._md.to_html(self.summary_service.to_markdown(settings))
        try:
            self.summary_view.load_html(html)
        except AttributeError:
            # older tkinterweb
            self.summary_view.set_content(html)

    @staticmethod
    def _fmt(name: str, value: float) -> str:
        if name == "drift":
            return f"{value:.3f}"
        if name == "overlay_opacity":
            return f"{value:.2f}"
        return f"{value:.1f}"

    # ----- Edits -----
    def _apply(self, **changes: Any) -> bool:
        if self._block_programmatic:
            return False
        try:
            self.settings_service.update(**changes)
            self.err_var.set("")
            return True
        except SettingsError as e:
            self.err_var.set(str(e))
            return False

    def _on_slider(self, name: str):
        if self._block_programmatic:
            return
        value = round(float(self._slider_vars[name].get()), 3)
        self._slider_labels[name].set(self._fmt(name, value))
        self._pending[name] = value

        # debounce: sliders fire on every pixel of movement
        if self._save_job is not None:
            self.after_cancel(self._save_job)
        self._save_job = self.after(self.SAVE_DEBOUNCE_MS, self._flush_pending)

    def _flush_pending(self):
        self._save_job = None
        changes, self._pending = self._pending, {}
        if changes:
            self._apply(**changes)

    def _pick_color(self, name: str):
        current: RGBA = getattr(self.settings_service.get(), name)
        rgb, _hex = colorchooser.askcolor(
            color=current.to_hex(with_alpha=False), parent=self, title="Pick a color"
        )
        if rgb is None:
            return
        r, g, b = (int(c) for c in rgb)
        self._apply(**{name: RGBA(r / 255.0, g / 255.0, b / 255.0, current.a)})

    def _reset(self):
        self._pending.clear()
        self.settings_service.reset_to_defaults()
        self.err_var.set("")

    def _on_destroy(self, event: Optional[tk.Event] = None):
        # <Destroy> also fires for every child widget
        if event is not None and event.widget is not self:
            return
        if self._save_job is not None:
            try:
                self.after_cancel(self._save_job)
            except tk.TclError:
                pass
            self._save_job = None
        self._unsubscribe()
