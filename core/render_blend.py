# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import Union

from domain.models import (
    RGBA,
    AnimationShape,
    BreathingPhase,
    ColorFillType,
    Settings,
)


@dataclass(frozen=True)
class SolidFill:
    color: RGBA


@dataclass(frozen=True)
class LinearGradientFill:
    top: RGBA
    bottom: RGBA


@dataclass(frozen=True)
class RadialGradientFill:
    inner: RGBA  # at center
    outer: RGBA  # at radius
    radius: float


Fill = Union[SolidFill, LinearGradientFill, RadialGradientFill]


@dataclass(frozen=True)
class ShapeGeometry:
    x0: float
    y0: float
    x1: float
    y1: float
    radius: float = 0.0

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, float(v)))


def lerp_color(src: RGBA, dst: RGBA, fraction: float) -> RGBA:
    f = float(fraction)
    return RGBA(
        src.r + (dst.r - src.r) * f,
        src.g + (dst.g - src.g) * f,
        src.b + (dst.b - src.b) * f,
        src.a + (dst.a - src.a) * f,
    )


def blend_color(phase: BreathingPhase, progress: float, settings: Settings) -> RGBA:
    inhale_side = phase.is_inhale_side
    initial = settings.inhale_color if inhale_side else settings.exhale_color
    secondary = settings.exhale_color if inhale_side else settings.inhale_color

    if not settings.color_transition_enabled:
        return initial

    p = _clamp01(progress)
    fraction = p if inhale_side else 1.0 - p
    return lerp_color(secondary, initial, fraction)


def compute_fill(
    phase: BreathingPhase,
    progress: float,
    settings: Settings,
    radius: float = 0.0,
) -> Fill:
    color = blend_color(phase, progress, settings)

    if settings.color_fill_type == ColorFillType.CONSTANT:
        return SolidFill(color)

    if settings.shape == AnimationShape.RECTANGLE:
        return LinearGradientFill(top=color, bottom=settings.background_color)
    return RadialGradientFill(
        inner=settings.background_color, outer=color, radius=max(0.0, radius)
    )


# ---------- geometry ----------
def max_circle_scale(width: float, height: float) -> float:
    """Scale at which the circle reaches the viewport corners."""
    lo = min(width, height)
    if lo <= 0:
        return 1.0
    return max(width, height) / lo


def shape_geometry(
    shape: AnimationShape, width: float, height: float, progress: float
) -> ShapeGeometry:
    p = _clamp01(progress)

    if shape == AnimationShape.CIRCLE:
        diameter = min(width, height) * p * max_circle_scale(width, height)
        r = diameter / 2.0
        cx, cy = width / 2.0, height / 2.0
        return ShapeGeometry(cx - r, cy - r, cx + r, cy + r, radius=r)

    # rectangle anchored at the bottom edge
    h = height * p
    return ShapeGeometry(0.0, height - h, float(width), float(height))
