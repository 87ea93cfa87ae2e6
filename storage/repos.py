# storage/repos.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import json
import logging
import time
from dataclasses import fields, replace
from enum import Enum
from typing import Any, Dict, Optional

from domain.models import (
    RGBA,
    AnimationMode,
    AnimationShape,
    ColorFillType,
    Settings,
)
from storage.db import Database

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"


def _now_ts() -> int:
    return int(time.time())


class AppStateRepo:
    def __init__(self, db: Database):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.conn.execute(
            "SELECT value FROM app_state WHERE key=?",
            (key,),
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        self.db.conn.execute(
            """
            INSERT INTO app_state(key, value, updated_at) VALUES(?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                value=excluded.value, updated_at=excluded.updated_at
            """,
            (key, value, _now_ts()),
        )
        self.db.conn.commit()

    def delete(self, key: str) -> None:
        self.db.conn.execute("DELETE FROM app_state WHERE key=?", (key,))
        self.db.conn.commit()

    def get_json(self, key: str) -> Optional[Any]:
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("app_state[%s] is not valid JSON, ignoring", key)
            return None

    def set_json(self, key: str, value: Any) -> None:
        self.set(key, json.dumps(value, sort_keys=True))


# ---------- Settings codec ----------
_ENUM_FIELDS = {
    "color_fill_type": ColorFillType,
    "shape": AnimationShape,
    "animation_mode": AnimationMode,
}
_COLOR_FIELDS = ("inhale_color", "exhale_color", "background_color")
_FLOAT_FIELDS = (
    "inhale_duration",
    "post_inhale_hold_duration",
    "exhale_duration",
    "post_exhale_hold_duration",
    "drift",
    "overlay_opacity",
)


def settings_to_dict(settings: Settings) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for f in fields(Settings):
        v = getattr(settings, f.name)
        if isinstance(v, RGBA):
            v = v.to_hex()
        elif isinstance(v, Enum):
            v = v.value
        out[f.name] = v
    return out


def _decode_field(name: str, raw: Any) -> Any:
    if name in _COLOR_FIELDS:
        return RGBA.from_hex(raw)
    if name in _ENUM_FIELDS:
        return _ENUM_FIELDS[name](raw)
    if name in _FLOAT_FIELDS:
        if isinstance(raw, bool):
            raise ValueError(f"expected a number, got {raw!r}")
        return float(raw)
    if name == "color_transition_enabled":
        if not isinstance(raw, bool):
            raise ValueError(f"expected a boolean, got {raw!r}")
        return raw
    raise KeyError(name)


def settings_from_dict(data: Dict[str, Any], base: Optional[Settings] = None) -> Settings:
    """
    Overlay stored values on `base` (defaults when omitted).
    Unknown keys and values that do not decode are skipped.
    """
    known = {f.name for f in fields(Settings)}
    values: Dict[str, Any] = {}
    for key, raw in (data or {}).items():
        if key not in known:
            logger.warning("ignoring unknown setting %r", key)
            continue
        try:
            values[key] = _decode_field(key, raw)
        except (ValueError, TypeError) as e:
            logger.warning("ignoring stored setting %s=%r: %s", key, raw, e)

    return replace(base or Settings(), **values)


class SettingsRepo:
    def __init__(self, db: Database):
        self.state = AppStateRepo(db)

    def load(self) -> Settings:
        data = self.state.get_json(SETTINGS_KEY)
        if not isinstance(data, dict):
            return Settings()
        return settings_from_dict(data)

    def save(self, settings: Settings) -> None:
        self.state.set_json(SETTINGS_KEY, settings_to_dict(settings))
