# -*- coding: utf-8 -*-

import pytest

from core.render_blend import (
    LinearGradientFill,
    RadialGradientFill,
    SolidFill,
    blend_color,
    compute_fill,
    lerp_color,
    max_circle_scale,
    shape_geometry,
)
from domain.models import (
    RGBA,
    AnimationShape,
    BreathingPhase,
    ColorFillType,
    Settings,
)

P = BreathingPhase
RED = RGBA(1.0, 0.0, 0.0, 1.0)
BLUE = RGBA(0.0, 0.0, 1.0, 1.0)
BLACK = RGBA(0.0, 0.0, 0.0, 1.0)


def settings(**kw):
    base = dict(inhale_color=RED, exhale_color=BLUE, background_color=BLACK)
    base.update(kw)
    return Settings(**base)


def as_tuple(c: RGBA):
    return (c.r, c.g, c.b, c.a)


def test_lerp_color_midpoint():
    mid = lerp_color(RED, BLUE, 0.5)
    assert as_tuple(mid) == pytest.approx((0.5, 0.0, 0.5, 1.0))


def test_without_transition_color_is_phase_color():
    s = settings(color_transition_enabled=False)
    for progress in (0.0, 0.3, 1.0):
        assert blend_color(P.INHALE, progress, s) == RED
        assert blend_color(P.HOLD_AFTER_INHALE, progress, s) == RED
        assert blend_color(P.EXHALE, progress, s) == BLUE
        assert blend_color(P.HOLD_AFTER_EXHALE, progress, s) == BLUE


@pytest.mark.parametrize(
    "phase, progress, expected",
    [
        (P.INHALE, 0.0, BLUE),
        (P.INHALE, 1.0, RED),
        (P.EXHALE, 1.0, RED),
        (P.EXHALE, 0.0, BLUE),
        (P.HOLD_AFTER_INHALE, 1.0, RED),
        (P.HOLD_AFTER_EXHALE, 0.0, BLUE),
    ],
)
def test_transition_blends_between_colors(phase, progress, expected):
    s = settings(color_transition_enabled=True)
    got = blend_color(phase, progress, s)
    assert as_tuple(got) == pytest.approx(as_tuple(expected))


def test_constant_fill_is_always_solid():
    for shape in AnimationShape:
        s = settings(
            color_fill_type=ColorFillType.CONSTANT,
            shape=shape,
            color_transition_enabled=True,
        )
        for phase in BreathingPhase:
            for progress in (0.0, 0.5, 1.0):
                fill = compute_fill(phase, progress, s, radius=40.0)
                assert isinstance(fill, SolidFill)


def test_gradient_rectangle_runs_top_to_background():
    s = settings(color_fill_type=ColorFillType.GRADIENT, shape=AnimationShape.RECTANGLE)
    fill = compute_fill(P.INHALE, 0.5, s)
    assert fill == LinearGradientFill(top=RED, bottom=BLACK)


def test_gradient_circle_is_radial_from_background():
    s = settings(color_fill_type=ColorFillType.GRADIENT, shape=AnimationShape.CIRCLE)
    fill = compute_fill(P.EXHALE, 0.5, s, radius=120.0)
    assert fill == RadialGradientFill(inner=BLACK, outer=BLUE, radius=120.0)


def test_max_circle_scale_for_full_hd():
    assert max_circle_scale(1920, 1080) == pytest.approx(1920 / 1080)
    assert max_circle_scale(1080, 1920) == pytest.approx(1920 / 1080)
    assert max_circle_scale(500, 500) == 1.0


def test_circle_radius_at_full_progress():
    g = shape_geometry(AnimationShape.CIRCLE, 1920, 1080, 1.0)
    assert g.radius == pytest.approx(1080 * 1.0 * (1920 / 1080) / 2)
    assert (g.x0 + g.x1) / 2 == pytest.approx(960)
    assert (g.y0 + g.y1) / 2 == pytest.approx(540)


def test_circle_collapses_at_zero_progress():
    g = shape_geometry(AnimationShape.CIRCLE, 800, 600, 0.0)
    assert g.radius == 0.0
    assert g.width == 0.0


def test_rectangle_grows_from_bottom():
    g = shape_geometry(AnimationShape.RECTANGLE, 1920, 1080, 0.25)
    assert (g.x0, g.x1) == (0.0, 1920.0)
    assert g.y1 == 1080.0
    assert g.height == pytest.approx(270.0)

    full = shape_geometry(AnimationShape.RECTANGLE, 1920, 1080, 1.0)
    assert full.y0 == 0.0
