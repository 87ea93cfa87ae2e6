# -*- coding: utf-8 -*-

import pytest

from core.render_blend import RadialGradientFill, SolidFill
from domain.models import (
    AnimationMode,
    AnimationShape,
    BreathingPhase,
    ColorFillType,
    Settings,
)
from services.breathing_service import BreathingService
from services.settings_service import SettingsService


@pytest.fixture
def service(scheduler, clock):
    settings = SettingsService(
        initial=Settings(
            inhale_duration=4.0,
            exhale_duration=4.0,
            animation_mode=AnimationMode.LINEAR,
        )
    )
    return BreathingService(settings, scheduler, clock=clock)


def test_start_is_idempotent(service, scheduler):
    service.start()
    service.start()
    assert service.is_running
    assert len(scheduler.pending) == 1


def test_phase_change_callback(service, scheduler):
    phases = []
    service.set_on_phase_change(lambda step: phases.append(step.phase))
    service.start()
    scheduler.advance(4.0)
    # zero-length hold passes straight through to exhale
    assert phases == [
        BreathingPhase.INHALE,
        BreathingPhase.HOLD_AFTER_INHALE,
        BreathingPhase.EXHALE,
    ]


def test_restart_resets_cycle(service, scheduler):
    service.start()
    scheduler.advance(9.0)
    assert service.state().cycle_count == 1

    service.restart()
    st = service.state()
    assert (st.phase, st.progress, st.cycle_count) == (BreathingPhase.INHALE, 0.0, 0)


def test_stop(service, scheduler):
    service.start()
    service.stop()
    assert not service.is_running
    assert scheduler.pending == {}


def test_frame_rectangle_solid(service, clock):
    service.start()
    clock.now = 2.0
    frame = service.frame(400, 300)

    assert frame.phase == BreathingPhase.INHALE
    assert frame.progress == pytest.approx(0.5)
    assert isinstance(frame.fill, SolidFill)
    assert frame.shape == AnimationShape.RECTANGLE
    assert frame.geometry.height == pytest.approx(150.0)
    assert frame.background == service.settings_service.get().background_color


def test_frame_circle_gradient_uses_current_radius(service, clock):
    service.settings_service.update(
        shape=AnimationShape.CIRCLE, color_fill_type=ColorFillType.GRADIENT
    )
    service.start()
    clock.now = 4.0
    frame = service.frame(1920, 1080)

    assert isinstance(frame.fill, RadialGradientFill)
    assert frame.fill.radius == pytest.approx(960.0)
    assert frame.geometry.radius == pytest.approx(960.0)
