# -*- coding: utf-8 -*-

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class BreathingPhase(str, Enum):
    INHALE = "inhale"
    HOLD_AFTER_INHALE = "hold_after_inhale"
    EXHALE = "exhale"
    HOLD_AFTER_EXHALE = "hold_after_exhale"

    def next(self) -> "BreathingPhase":
        order = list(BreathingPhase)
        return order[(order.index(self) + 1) % len(order)]

    @property
    def is_inhale_side(self) -> bool:
        return self in (BreathingPhase.INHALE, BreathingPhase.HOLD_AFTER_INHALE)

    @property
    def is_hold(self) -> bool:
        return self in (
            BreathingPhase.HOLD_AFTER_INHALE,
            BreathingPhase.HOLD_AFTER_EXHALE,
        )

    @property
    def label(self) -> str:
        return {
            BreathingPhase.INHALE: "Inhale",
            BreathingPhase.HOLD_AFTER_INHALE: "Hold",
            BreathingPhase.EXHALE: "Exhale",
            BreathingPhase.HOLD_AFTER_EXHALE: "Hold",
        }[self]


class ColorFillType(str, Enum):
    CONSTANT = "constant"
    GRADIENT = "gradient"


class AnimationShape(str, Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


class AnimationMode(str, Enum):
    LINEAR = "linear"
    EASED = "eased"


def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, float(v)))


@dataclass(frozen=True)
class RGBA:
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> "RGBA":
        """
        Accepts "#RRGGBB" or "#RRGGBBAA" (leading # optional).
        """
        s = (value or "").strip().lstrip("#")
        if len(s) == 6:
            s += "ff"
        if len(s) != 8:
            raise ValueError(f"Invalid color: {value!r}")
        try:
            parts = [int(s[i : i + 2], 16) for i in range(0, 8, 2)]
        except ValueError:
            raise ValueError(f"Invalid color: {value!r}") from None
        return cls(*(p / 255.0 for p in parts))

    def to_hex(self, with_alpha: bool = True) -> str:
        r, g, b, a = self.to_rgba255()
        if with_alpha:
            return f"#{r:02X}{g:02X}{b:02X}{a:02X}"
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_rgba255(self) -> Tuple[int, int, int, int]:
        return tuple(
            int(round(_clamp01(c) * 255)) for c in (self.r, self.g, self.b, self.a)
        )


@dataclass(frozen=True)
class Settings:
    inhale_duration: float = 5.0
    post_inhale_hold_duration: float = 0.0
    exhale_duration: float = 10.0
    post_exhale_hold_duration: float = 0.0

    inhale_color: RGBA = field(default_factory=lambda: RGBA.from_hex("#EF5959FF"))
    exhale_color: RGBA = field(default_factory=lambda: RGBA.from_hex("#3B82F6FF"))
    background_color: RGBA = field(default_factory=lambda: RGBA.from_hex("#000000FF"))

    color_fill_type: ColorFillType = ColorFillType.CONSTANT
    color_transition_enabled: bool = False
    shape: AnimationShape = AnimationShape.RECTANGLE
    animation_mode: AnimationMode = AnimationMode.EASED
    drift: float = 1.0  # multiplicative decay per cycle
    overlay_opacity: float = 0.1  # window alpha


@dataclass(frozen=True)
class CycleState:
    phase: BreathingPhase = BreathingPhase.INHALE
    progress: float = 0.0  # 0..1
    cycle_count: int = 0
