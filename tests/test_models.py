# -*- coding: utf-8 -*-

import pytest

from domain.models import RGBA, BreathingPhase, CycleState


def test_phase_cycle_order():
    p = BreathingPhase.INHALE
    seen = []
    for _ in range(5):
        seen.append(p)
        p = p.next()
    assert seen == [
        BreathingPhase.INHALE,
        BreathingPhase.HOLD_AFTER_INHALE,
        BreathingPhase.EXHALE,
        BreathingPhase.HOLD_AFTER_EXHALE,
        BreathingPhase.INHALE,
    ]


def test_phase_flags():
    assert BreathingPhase.HOLD_AFTER_INHALE.is_inhale_side
    assert not BreathingPhase.EXHALE.is_inhale_side
    assert BreathingPhase.HOLD_AFTER_EXHALE.is_hold
    assert not BreathingPhase.INHALE.is_hold


def test_rgba_hex_roundtrip():
    c = RGBA.from_hex("#FF800040")
    assert c.r == 1.0
    assert c.a == pytest.approx(64 / 255)
    assert c.to_hex() == "#FF800040"
    assert RGBA.from_hex("00ff00").to_hex(with_alpha=False) == "#00FF00"


@pytest.mark.parametrize("bad", ["", "#12345", "#GGGGGG", "#1234567890"])
def test_rgba_rejects_bad_hex(bad):
    with pytest.raises(ValueError):
        RGBA.from_hex(bad)


def test_rgba255_clamps():
    assert RGBA(1.5, -0.2, 0.5, 1.0).to_rgba255() == (255, 0, 128, 255)


def test_fresh_cycle_state():
    assert CycleState() == CycleState(BreathingPhase.INHALE, 0.0, 0)
