# -*- coding: utf-8 -*-

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from core.easing import curve_for
from domain.models import AnimationMode, BreathingPhase, CycleState, Settings

logger = logging.getLogger(__name__)

# inhale/exhale never animate faster than this
MIN_BREATH_DURATION = 0.5

_DURATION_FIELDS: Dict[BreathingPhase, str] = {
    BreathingPhase.INHALE: "inhale_duration",
    BreathingPhase.HOLD_AFTER_INHALE: "post_inhale_hold_duration",
    BreathingPhase.EXHALE: "exhale_duration",
    BreathingPhase.HOLD_AFTER_EXHALE: "post_exhale_hold_duration",
}

# (start progress, target progress) per phase
_PROGRESS_TARGETS: Dict[BreathingPhase, tuple] = {
    BreathingPhase.INHALE: (0.0, 1.0),
    BreathingPhase.HOLD_AFTER_INHALE: (1.0, 1.0),
    BreathingPhase.EXHALE: (1.0, 0.0),
    BreathingPhase.HOLD_AFTER_EXHALE: (0.0, 0.0),
}


def base_duration(phase: BreathingPhase, settings: Settings) -> float:
    return float(getattr(settings, _DURATION_FIELDS[phase]))


def phase_duration(phase: BreathingPhase, settings: Settings, cycle_count: int) -> float:
    duration = base_duration(phase, settings) * (settings.drift ** cycle_count)
    if phase.is_hold:
        return duration
    return max(duration, MIN_BREATH_DURATION)


@dataclass(frozen=True)
class PhaseStep:
    phase: BreathingPhase
    start_progress: float
    target_progress: float
    duration: float
    cycle_count: int
    animation_mode: AnimationMode
    started_at: float


class Scheduler:
    """
    One-shot delayed callbacks on the owning event loop.
    schedule() returns an opaque handle accepted by cancel().
    """

    def schedule(self, delay_sec: float, callback: Callable[[], None]) -> Any:
        raise NotImplementedError

    def cancel(self, handle: Any) -> None:
        raise NotImplementedError


class PhaseTimer:
    """
    Four-phase breathing state machine.

    Each phase entry snapshots the settings, computes its duration and
    schedules a single completion callback. Restarting or stopping cancels
    the outstanding callback; a generation counter drops any callback that
    still fires after that.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        get_settings: Callable[[], Settings],
        clock: Callable[[], float] = time.monotonic,
    ):
        self.scheduler = scheduler
        self.get_settings = get_settings
        self.clock = clock

        self.phase = BreathingPhase.INHALE
        self.cycle_count = 0
        self.step: Optional[PhaseStep] = None

        self._handle: Any = None
        self._generation = 0
        self._on_phase: Optional[Callable[[PhaseStep], None]] = None

    def set_on_phase(self, fn: Optional[Callable[[PhaseStep], None]]) -> None:
        self._on_phase = fn

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    # ----- Public API -----
    def start(self) -> None:
        self._cancel_pending()
        self.phase = BreathingPhase.INHALE
        self.cycle_count = 0
        self.step = None
        self._enter(BreathingPhase.INHALE)

    def stop(self) -> None:
        self._cancel_pending()

    def progress(self, now: Optional[float] = None) -> float:
        step = self.step
        if step is None:
            return 0.0
        if step.start_progress == step.target_progress or step.duration <= 0:
            return step.target_progress

        now = self.clock() if now is None else now
        t = (now - step.started_at) / step.duration
        eased = curve_for(step.animation_mode)(max(0.0, min(1.0, t)))
        value = step.start_progress + (step.target_progress - step.start_progress) * eased
        return max(0.0, min(1.0, value))

    def state(self, now: Optional[float] = None) -> CycleState:
        return CycleState(
            phase=self.phase,
            progress=self.progress(now),
            cycle_count=self.cycle_count,
        )

    # ----- internals -----
    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._handle is not None:
            handle, self._handle = self._handle, None
            self.scheduler.cancel(handle)

    def _enter(self, phase: BreathingPhase) -> None:
        settings = self.get_settings()
        duration = phase_duration(phase, settings, self.cycle_count)
        start, target = _PROGRESS_TARGETS[phase]

        self.phase = phase
        self.step = PhaseStep(
            phase=phase,
            start_progress=start,
            target_progress=target,
            duration=duration,
            cycle_count=self.cycle_count,
            animation_mode=settings.animation_mode,
            started_at=self.clock(),
        )
        logger.debug(
            "phase %s cycle=%d duration=%.3fs", phase.value, self.cycle_count, duration
        )

        generation = self._generation
        self._handle = self.scheduler.schedule(
            duration, lambda: self._on_complete(generation)
        )

        if self._on_phase:
            self._on_phase(self.step)

    def _on_complete(self, generation: int) -> None:
        if generation != self._generation:
            logger.debug("dropping stale phase callback")
            return
        self._handle = None

        nxt = self.phase.next()
        if self.phase == BreathingPhase.HOLD_AFTER_EXHALE:
            self.cycle_count += 1
        self._enter(nxt)
