# -*- coding: utf-8 -*-

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from core.phase_timer import PhaseStep, PhaseTimer, Scheduler
from core.render_blend import Fill, ShapeGeometry, compute_fill, shape_geometry
from domain.models import RGBA, AnimationShape, BreathingPhase, CycleState
from services.settings_service import SettingsService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameSnapshot:
    phase: BreathingPhase
    progress: float
    cycle_count: int
    fill: Fill
    geometry: ShapeGeometry
    shape: AnimationShape
    background: RGBA


class BreathingService:
    """
    Orchestrates:
    - PhaseTimer lifecycle (start / restart / stop)
    - per-frame fill + geometry for the window
    - phase-change callback for the UI
    """

    def __init__(self, settings_service: SettingsService, scheduler: Scheduler, clock=None):
        self.settings_service = settings_service

        kwargs = {"clock": clock} if clock is not None else {}
        self.timer = PhaseTimer(scheduler, settings_service.get, **kwargs)
        self.timer.set_on_phase(self._emit_phase_change)

        self._started = False
        self._on_phase_change: Optional[Callable[[PhaseStep], None]] = None

    # ----- Callbacks -----
    def set_on_phase_change(self, fn: Callable[[PhaseStep], None]) -> None:
        self._on_phase_change = fn

    def _emit_phase_change(self, step: PhaseStep) -> None:
        if self._on_phase_change:
            self._on_phase_change(step)

    # ----- Public API -----
    @property
    def is_running(self) -> bool:
        return self._started

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self.timer.start()
        logger.info("breathing cycle started")

    def restart(self) -> None:
        self._started = True
        self.timer.start()
        logger.info("breathing cycle restarted")

    def stop(self) -> None:
        self._started = False
        self.timer.stop()

    def state(self, now: Optional[float] = None) -> CycleState:
        return self.timer.state(now)

    def frame(self, width: float, height: float, now: Optional[float] = None) -> FrameSnapshot:
        """
        Snapshot for painting one frame at viewport (width, height).
        """
        settings = self.settings_service.get()
        st = self.timer.state(now)

        geometry = shape_geometry(settings.shape, width, height, st.progress)
        fill = compute_fill(st.phase, st.progress, settings, radius=geometry.radius)
        return FrameSnapshot(
            phase=st.phase,
            progress=st.progress,
            cycle_count=st.cycle_count,
            fill=fill,
            geometry=geometry,
            shape=settings.shape,
            background=settings.background_color,
        )
