# -*- coding: utf-8 -*-

from typing import List, Optional

from core.phase_timer import phase_duration
from domain.models import BreathingPhase, Settings
from services.settings_service import SettingsService


def _fmt_sec(sec: float) -> str:
    return f"{sec:.1f}s"


class PatternSummaryService:
    """
    Human-readable overview of the configured pattern, shown in Preferences.
    """

    def __init__(
        self,
        settings_service: SettingsService,
        cycles: int = 5,
    ):
        self.settings_service = settings_service
        self.cycles = max(1, int(cycles))

    def cycle_length(self, settings: Settings, cycle_count: int = 0) -> float:
        return sum(phase_duration(p, settings, cycle_count) for p in BreathingPhase)

    def to_markdown(self, settings: Optional[Settings] = None) -> str:
        s = settings or self.settings_service.get()
        first = self.cycle_length(s, 0)

        lines: List[str] = [
            "## Current pattern",
            "",
            " · ".join(
                f"**{p.label}** {_fmt_sec(phase_duration(p, s, 0))}" for p in BreathingPhase
            ),
            "",
            f"One cycle takes **{_fmt_sec(first)}** "
            f"(about {60.0 / first:.1f} breaths per minute)." if first > 0 else "",
            "",
        ]

        if s.drift == 1.0:
            lines.append("Drift is off: every cycle has the same rhythm.")
            return "\n".join(lines)

        trend = "shortens" if s.drift < 1.0 else "lengthens"
        lines += [
            f"Drift **{s.drift:g}** {trend} each cycle.",
            "",
            "| Cycle | Inhale | Hold | Exhale | Hold | Total |",
            "|---|---|---|---|---|---|",
        ]
        for n in range(self.cycles):
            cells = [_fmt_sec(phase_duration(p, s, n)) for p in BreathingPhase]
            lines.append(
                f"| {n + 1} | " + " | ".join(cells) + f" | {_fmt_sec(self.cycle_length(s, n))} |"
            )
        return "\n".join(lines)
