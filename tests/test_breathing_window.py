# -*- coding: utf-8 -*-

import tkinter as tk

import pytest

from services.settings_service import SettingsService
from services.summary_service import PatternSummaryService


@pytest.fixture
def window():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.destroy()

    from ui.breathing_window import BreathingWindow

    settings = SettingsService()
    win = BreathingWindow(settings, PatternSummaryService(settings))
    yield win
    try:
        win._on_close()
    except tk.TclError:
        pass


def test_shortcuts_are_bound_application_wide(window):
    root = window.root
    assert root.bind_all("<Control-comma>")
    assert root.bind_all("<Control-q>")
    # window-local bindings would not fire while Preferences has focus
    assert not root.bind("<Control-comma>")
    assert not root.bind("<Control-q>")
