# -*- coding: utf-8 -*-

import pytest

from core.easing import EASE_IN_OUT, CubicBezier, curve_for, linear
from domain.models import AnimationMode


def test_linear_is_identity_clamped():
    assert linear(0.3) == 0.3
    assert linear(-1.0) == 0.0
    assert linear(2.0) == 1.0


def test_ease_in_out_endpoints_and_symmetry():
    assert EASE_IN_OUT(0.0) == 0.0
    assert EASE_IN_OUT(1.0) == 1.0
    assert EASE_IN_OUT(0.5) == pytest.approx(0.5, abs=1e-4)
    for t in (0.1, 0.2, 0.35):
        assert EASE_IN_OUT(t) + EASE_IN_OUT(1.0 - t) == pytest.approx(1.0, abs=1e-4)


def test_ease_in_out_is_monotonic():
    values = [EASE_IN_OUT(i / 50.0) for i in range(51)]
    assert values == sorted(values)
    assert EASE_IN_OUT(0.1) < 0.1


def test_cubic_bezier_with_linear_control_points():
    curve = CubicBezier(0.25, 0.25, 0.75, 0.75)
    for t in (0.1, 0.4, 0.9):
        assert curve(t) == pytest.approx(t, abs=1e-4)


def test_curve_for_mode():
    assert curve_for(AnimationMode.LINEAR) is linear
    assert curve_for(AnimationMode.EASED) is EASE_IN_OUT
