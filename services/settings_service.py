# -*- coding: utf-8 -*-

import logging
from dataclasses import fields, replace
from typing import Any, Callable, List, Optional

from domain.models import Settings
from storage.repos import SettingsRepo

logger = logging.getLogger(__name__)

Listener = Callable[[Settings], None]


class SettingsError(ValueError):
    pass


def validate_settings(settings: Settings) -> None:
    for name in ("inhale_duration", "exhale_duration"):
        if getattr(settings, name) <= 0:
            raise SettingsError(f"{name.replace('_', ' ').capitalize()} must be positive.")
    for name in ("post_inhale_hold_duration", "post_exhale_hold_duration"):
        if getattr(settings, name) < 0:
            raise SettingsError(f"{name.replace('_', ' ').capitalize()} cannot be negative.")
    if settings.drift <= 0:
        raise SettingsError("Drift must be positive.")
    if not (0.0 < settings.overlay_opacity <= 1.0):
        raise SettingsError("Overlay opacity must be within (0, 1].")


def sanitize_settings(settings: Settings) -> Settings:
    """
    Replace each field that fails validation with its default.
    Used for records read back from storage.
    """
    defaults = Settings()
    clean = defaults
    for f in fields(Settings):
        candidate = replace(clean, **{f.name: getattr(settings, f.name)})
        try:
            validate_settings(candidate)
        except SettingsError as e:
            logger.warning(
                "ignoring stored setting %s=%r: %s", f.name, getattr(settings, f.name), e
            )
            continue
        clean = candidate
    return clean


class SettingsService:
    """
    Observable holder of the current Settings.
    - update() validates, persists and notifies subscribers
    - readers take get() as a snapshot; records are immutable
    """

    def __init__(self, repo: Optional[SettingsRepo] = None, initial: Optional[Settings] = None):
        self.repo = repo
        if initial is None:
            initial = sanitize_settings(repo.load()) if repo else Settings()
        self._settings = initial
        self._listeners: List[Listener] = []

    def get(self) -> Settings:
        return self._settings

    def subscribe(self, fn: Listener) -> Callable[[], None]:
        self._listeners.append(fn)

        def _unsubscribe() -> None:
            if fn in self._listeners:
                self._listeners.remove(fn)

        return _unsubscribe

    def update(self, **changes: Any) -> Settings:
        known = {f.name for f in fields(Settings)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise SettingsError(f"Unknown setting(s): {', '.join(unknown)}")

        new = replace(self._settings, **changes)
        validate_settings(new)
        if new == self._settings:
            return new

        self._apply(new)
        logger.info("settings updated: %s", ", ".join(sorted(changes)))
        return new

    def reset_to_defaults(self) -> Settings:
        self._apply(Settings())
        logger.info("settings reset to defaults")
        return self._settings

    def _apply(self, new: Settings) -> None:
        self._settings = new
        if self.repo:
            self.repo.save(new)
        for fn in list(self._listeners):
            fn(new)
