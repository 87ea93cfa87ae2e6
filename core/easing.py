# -*- coding: utf-8 -*-

from typing import Callable

from domain.models import AnimationMode

Curve = Callable[[float], float]


def linear(t: float) -> float:
    return max(0.0, min(1.0, t))


class CubicBezier:
    """
    Timing curve through (0,0), (x1,y1), (x2,y2), (1,1).
    Given time fraction t, solves x(s) = t for s, returns y(s).
    """

    EPSILON = 1e-6

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2

        # polynomial coefficients
        self._cx = 3.0 * x1
        self._bx = 3.0 * (x2 - x1) - self._cx
        self._ax = 1.0 - self._cx - self._bx
        self._cy = 3.0 * y1
        self._by = 3.0 * (y2 - y1) - self._cy
        self._ay = 1.0 - self._cy - self._by

    def _x(self, s: float) -> float:
        return ((self._ax * s + self._bx) * s + self._cx) * s

    def _y(self, s: float) -> float:
        return ((self._ay * s + self._by) * s + self._cy) * s

    def _dx(self, s: float) -> float:
        return (3.0 * self._ax * s + 2.0 * self._bx) * s + self._cx

    def _solve_s(self, t: float) -> float:
        # newton first
        s = t
        for _ in range(8):
            err = self._x(s) - t
            if abs(err) < self.EPSILON:
                return s
            d = self._dx(s)
            if abs(d) < self.EPSILON:
                break
            s -= err / d

        # bisection fallback
        lo, hi = 0.0, 1.0
        s = t
        while lo < hi:
            x = self._x(s)
            if abs(x - t) < self.EPSILON:
                return s
            if t > x:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2.0
            if hi - lo < self.EPSILON:
                break
        return s

    def __call__(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return self._y(self._solve_s(t))


EASE_IN_OUT = CubicBezier(0.42, 0.0, 0.58, 1.0)


def curve_for(mode: AnimationMode) -> Curve:
    if mode == AnimationMode.LINEAR:
        return linear
    return EASE_IN_OUT
