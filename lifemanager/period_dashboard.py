"""Summary figures and banners shown at the top of the cycle tracker."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from lifemanager.cycle import (
    Cycle,
    CyclePhase,
    CycleSettings,
    PhaseInfo,
    birth_control_phase,
    current_phase,
    cycle_variance,
    predict_next_start,
)

MOOD_EMOJIS = ("\U0001F622", "\U0001F615", "\U0001F610", "\U0001F642", "\U0001F60A")
"""Faces for mood scores 1 to 5."""

IRREGULAR_THRESHOLD = 3.0
"""Standard deviation of cycle lengths, in days, above which cycles count as irregular."""

PMS_WINDOW = 5
"""Days before a predicted period in which the care banner appears."""

PMS_TIPS = (
    "Hot tea \u2615",
    "Chocolate \U0001F36B",
    "Warm bath \U0001F6C1",
    "Rest \U0001F4A4",
)

_STAT_LEVELS = {
    "Low": 1,
    "Introspective": 1,
    "Sensitive": 1,
    "Warming Up": 2,
    "Rising": 2,
    "Stable": 2,
    "Steady": 2,
    "Baseline": 3,
    "Moderate": 3,
    "Calm & Nesting": 3,
    "Upbeat & Sociable": 3,
    "High": 4,
    "Confident & Magnetic": 4,
    "Peak": 5,
}
_DEFAULT_STAT_LEVEL = 3


def mood_emoji(score: int) -> str:
    """Face for a mood score; scores outside 1-5 fall on the nearest face.

    A negative score shows the happiest face, as an unsigned index would.
    """
    if score < 0:
        return MOOD_EMOJIS[-1]
    return MOOD_EMOJIS[min(max(score - 1, 0), len(MOOD_EMOJIS) - 1)]


@dataclass(frozen=True)
class PeriodSummary:
    """What the dashboard knows about the current cycle."""

    phase_info: Optional[PhaseInfo]
    prediction: Optional[date]
    countdown: Optional[int]
    variance: Optional[float]
    is_irregular: bool
    is_overdue: bool
    cycle_count: int

    @property
    def shows_checkin(self) -> bool:
        """Whether the daily check-in card is offered."""
        return self.phase_info is not None or self.cycle_count > 0


def summarize(
    cycles: Sequence[Cycle], settings: CycleSettings, today: date
) -> PeriodSummary:
    """Phase, prediction and warnings for today from the history (newest first)."""
    phase_info: Optional[PhaseInfo] = None
    is_overdue = False
    if cycles:
        start = cycles[0].start_date
        if settings.on_birth_control:
            phase_info = birth_control_phase(start, today, settings)
        else:
            phase_info = current_phase(start, today, settings)
        is_overdue = (today - start).days + 1 > settings.average_cycle_length

    prediction = predict_next_start(cycles, settings)
    countdown = (prediction - today).days if prediction is not None else None
    variance = cycle_variance(cycles)
    return PeriodSummary(
        phase_info=phase_info,
        prediction=prediction,
        countdown=countdown,
        variance=variance,
        is_irregular=variance is not None and variance > IRREGULAR_THRESHOLD,
        is_overdue=is_overdue,
        cycle_count=len(cycles),
    )


def countdown_text(countdown: Optional[int]) -> str:
    """Words for the days until the next period; empty when unknown."""
    if countdown is None:
        return ""
    if countdown == 0:
        return "today"
    if countdown == 1:
        return "tomorrow"
    if countdown > 0:
        return f"in {countdown}d"
    return f"{abs(countdown)}d ago"


def stat_level(value: str) -> int:
    """Pip level from 1 to 5 for a mood, energy or drive description."""
    return _STAT_LEVELS.get(value, _DEFAULT_STAT_LEVEL)


@dataclass(frozen=True)
class PmsBanner:
    """The care banner shown in the sensitive phase or just before a period."""

    in_phase: bool
    days: int

    @property
    def headline(self) -> str:
        if self.in_phase:
            return "Sensitive phase \u2014 be extra gentle"
        return f"Period in ~{self.days} days"

    @property
    def detail(self) -> str:
        if self.in_phase:
            return (
                "Hormones are dropping \u2014 irritability and fog are normal. "
                "Be kind to yourself."
            )
        return "A good time to stock up on snacks and schedule some self-care."

    @property
    def tips(self) -> tuple[str, ...]:
        return PMS_TIPS


def pms_banner(
    phase_info: Optional[PhaseInfo],
    settings: CycleSettings,
    countdown: Optional[int],
) -> Optional[PmsBanner]:
    """The care banner to show, or None when neither condition holds."""
    in_phase = (
        phase_info is not None
        and phase_info.phase is CyclePhase.LATE_LUTEAL
        and not settings.on_birth_control
    )
    near_period = (
        not in_phase and countdown is not None and 1 <= countdown <= PMS_WINDOW
    )
    if not (in_phase or near_period):
        return None
    return PmsBanner(in_phase=in_phase, days=countdown if countdown is not None else 0)