"""Menstrual cycle history, phase estimation and mood insights."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Optional, Sequence


@dataclass
class Cycle:
    """One logged cycle, most recent first in any list of cycles."""

    id: str
    start_date: date
    end_date: Optional[date] = None
    symptoms: list[str] = field(default_factory=list)

    def duration_days(self) -> Optional[int]:
        """Days from start to end, or None while the cycle is open."""
        if self.end_date is None:
            return None
        return (self.end_date - self.start_date).days


@dataclass
class CycleSettings:
    """User settings for cycle estimation."""

    average_cycle_length: int = 28
    average_period_duration: int = 5
    on_birth_control: bool = False


class CyclePhase(Enum):
    """Phases of a cycle, in the order they occur."""

    MENSTRUATION = "Menstruation"
    FOLLICULAR = "Follicular"
    OVULATION = "Ovulation"
    EARLY_LUTEAL = "EarlyLuteal"
    LATE_LUTEAL = "LateLuteal"

    def label(self) -> str:
        return _LABELS[self]

    def icon(self) -> str:
        return _ICONS[self]

    def color_class(self) -> str:
        return _COLORS[self]

    def baseline_scores(self) -> tuple[float, float, float]:
        """Textbook (mood, energy, libido) scores on a 1-5 scale."""
        return _BASELINES[self]


_LABELS = {
    CyclePhase.MENSTRUATION: "Rest & Reset",
    CyclePhase.FOLLICULAR: "Energetic & Outgoing",
    CyclePhase.OVULATION: "Peak Magnetism",
    CyclePhase.EARLY_LUTEAL: "Winding Down",
    CyclePhase.LATE_LUTEAL: "Sensitive",
}

_ICONS = {
    CyclePhase.MENSTRUATION: "\U0001F319",
    CyclePhase.FOLLICULAR: "\U0001F331",
    CyclePhase.OVULATION: "\u2728",
    CyclePhase.EARLY_LUTEAL: "\U0001F343",
    CyclePhase.LATE_LUTEAL: "\U0001F30A",
}

_COLORS = {
    CyclePhase.MENSTRUATION: "neon-pink",
    CyclePhase.FOLLICULAR: "neon-green",
    CyclePhase.OVULATION: "neon-orange",
    CyclePhase.EARLY_LUTEAL: "neon-purple",
    CyclePhase.LATE_LUTEAL: "neon-magenta",
}

_BASELINES = {
    CyclePhase.MENSTRUATION: (2.0, 1.5, 1.5),
    CyclePhase.FOLLICULAR: (4.0, 3.5, 3.0),
    CyclePhase.OVULATION: (5.0, 5.0, 5.0),
    CyclePhase.EARLY_LUTEAL: (3.0, 3.0, 2.5),
    CyclePhase.LATE_LUTEAL: (2.0, 2.0, 1.5),
}

_DESCRIPTIONS = {
    CyclePhase.MENSTRUATION: (
        "Introspective",
        "Low",
        "Low",
        "Hormones at their lowest. Rest, recharge, and be gentle with yourself.",
    ),
    CyclePhase.FOLLICULAR: (
        "Upbeat & Sociable",
        "Rising",
        "Warming Up",
        "Estrogen climbing steadily. Great time for new plans, workouts, and socializing.",
    ),
    CyclePhase.OVULATION: (
        "Confident & Magnetic",
        "Peak",
        "High",
        "Estrogen peaks with a testosterone surge. Peak physical and mental energy.",
    ),
    CyclePhase.EARLY_LUTEAL: (
        "Calm & Nesting",
        "Moderate",
        "Baseline",
        "Progesterone rises \u2014 a calming, slower pace. Good for cozy routines.",
    ),
    CyclePhase.LATE_LUTEAL: (
        "Sensitive",
        "Low",
        "Low",
        "Hormones dropping \u2014 may feel irritable or foggy. Extra self-care helps.",
    ),
}


@dataclass(frozen=True)
class PhaseInfo:
    """Where in the cycle a given day falls, with its expected feel."""

    phase: CyclePhase
    cycle_day: int
    days_in_phase_remaining: int
    mood: str
    energy: str
    libido: str
    description: str


@dataclass
class MoodEntry:
    """A daily check-in with 1-5 scores."""

    id: str
    date: date
    mood: int
    energy: int
    libido: int
    notes: Optional[str] = None


@dataclass
class PhaseInsight:
    """Personal averages for a phase compared with the textbook baseline."""

    phase: CyclePhase
    sample_count: int
    avg_mood: float
    avg_energy: float
    avg_libido: float
    baseline_mood: float
    baseline_energy: float
    baseline_libido: float
    mood_deviation: float
    energy_deviation: float
    libido_deviation: float
    insight_text: str


def _cycle_lengths(cycles: Sequence[Cycle]) -> list[int]:
    lengths = (
        (newer.start_date - older.start_date).days
        for newer, older in zip(cycles, cycles[1:])
    )
    return [length for length in lengths if length > 0]


def predict_next_start(cycles: Sequence[Cycle], settings: CycleSettings) -> Optional[date]:
    """Predict the next period start from the history (newest first)."""
    if not cycles:
        return None
    most_recent = cycles[0].start_date
    lengths = _cycle_lengths(cycles)
    if not lengths:
        return most_recent + timedelta(days=settings.average_cycle_length)
    return most_recent + timedelta(days=sum(lengths) // len(lengths))


def cycle_variance(cycles: Sequence[Cycle]) -> Optional[float]:
    """Standard deviation of cycle lengths in days; None with fewer than two lengths."""
    lengths = [float(length) for length in _cycle_lengths(cycles)]
    if len(lengths) < 2:
        return None
    mean = sum(lengths) / len(lengths)
    variance = sum((length - mean) ** 2 for length in lengths) / len(lengths)
    return variance ** 0.5


def current_phase(
    last_period_start: date, today: date, settings: CycleSettings
) -> Optional[PhaseInfo]:
    """Phase for today, or None before the start or past the expected cycle length."""
    cycle_day = (today - last_period_start).days + 1
    acl = settings.average_cycle_length
    pd = settings.average_period_duration
    if cycle_day < 1 or cycle_day > acl:
        return None

    # Ovulation almost always occurs 14 days before the next period.
    ovulation_day = max(acl - 14, pd + 1)
    ovulation_end = min(ovulation_day + 2, acl)
    late_luteal_start = max(acl - 4, ovulation_end + 1)

    if cycle_day <= pd:
        phase, phase_end = CyclePhase.MENSTRUATION, pd
    elif cycle_day < ovulation_day:
        phase, phase_end = CyclePhase.FOLLICULAR, ovulation_day - 1
    elif cycle_day <= ovulation_end:
        phase, phase_end = CyclePhase.OVULATION, ovulation_end
    elif cycle_day < late_luteal_start:
        phase, phase_end = CyclePhase.EARLY_LUTEAL, late_luteal_start - 1
    else:
        phase, phase_end = CyclePhase.LATE_LUTEAL, acl

    mood, energy, libido, description = _DESCRIPTIONS[phase]
    return PhaseInfo(
        phase=phase,
        cycle_day=cycle_day,
        days_in_phase_remaining=phase_end - cycle_day,
        mood=mood,
        energy=energy,
        libido=libido,
        description=description,
    )


def birth_control_phase(
    last_period_start: date, today: date, settings: CycleSettings
) -> Optional[PhaseInfo]:
    """A flat, stable phase for users on hormonal birth control."""
    cycle_day = (today - last_period_start).days + 1
    if cycle_day < 1 or cycle_day > settings.average_cycle_length:
        return None
    return PhaseInfo(
        phase=CyclePhase.FOLLICULAR,
        cycle_day=cycle_day,
        days_in_phase_remaining=settings.average_cycle_length - cycle_day,
        mood="Stable",
        energy="Steady",
        libido="Steady",
        description="Hormonal BC active \u2014 natural phase fluctuations are suppressed.",
    )


def _containing_cycle(
    day: date, cycles: Sequence[Cycle], settings: CycleSettings
) -> Optional[int]:
    """Index of the cycle covering the day, given cycles newest first."""
    for index, cycle in enumerate(cycles):
        if day >= cycle.start_date:
            offset = (day - cycle.start_date).days + 1
            if 1 <= offset <= settings.average_cycle_length:
                return index
            return None
    return None


def phase_for_date(
    date: date, cycles: Sequence[Cycle], settings: CycleSettings
) -> Optional[CyclePhase]:
    """Phase a date falls in according to the cycle history, or None in a gap."""
    index = _containing_cycle(date, cycles, settings)
    if index is None:
        return None
    info = current_phase(cycles[index].start_date, date, settings)
    return info.phase if info is not None else None


def _insight_text(label: str, count: int, deviations: Sequence[tuple[str, float]]) -> str:
    if count < 3:
        return f"Only {count} entries for {label} \u2014 keep logging for better insights."
    parts = []
    for name, dev in deviations:
        if dev > 0.8:
            parts.append(f"Your {name} is higher than typical during {label}. (+{dev:.1f})")
        elif dev < -0.8:
            parts.append(f"Your {name} tends to dip more than expected during {label}. ({dev:.1f})")
    if not parts:
        parts.append(f"Your {label} phase matches the typical pattern.")
    return " ".join(parts)


def compute_insights(
    mood_logs: Sequence[MoodEntry], cycles: Sequence[Cycle], settings: CycleSettings
) -> list[PhaseInsight]:
    """Compare mood logs against phase baselines, weighting recent cycles more."""
    if not mood_logs or not cycles:
        return []

    by_phase: dict[CyclePhase, list[tuple[float, float, float, float]]] = defaultdict(list)
    for entry in mood_logs:
        index = _containing_cycle(entry.date, cycles, settings)
        if index is None:
            continue
        phase = phase_for_date(entry.date, cycles, settings)
        if phase is None:
            continue
        weight = 0.8 ** index
        by_phase[phase].append(
            (float(entry.mood), float(entry.energy), float(entry.libido), weight)
        )

    insights = []
    for phase in CyclePhase:
        entries = by_phase.get(phase)
        if not entries:
            continue
        total_weight = sum(w for *_, w in entries)
        avg_mood = sum(m * w for m, _, _, w in entries) / total_weight
        avg_energy = sum(e * w for _, e, _, w in entries) / total_weight
        avg_libido = sum(l * w for _, _, l, w in entries) / total_weight

        bm, be, bl = phase.baseline_scores()
        mood_dev = avg_mood - bm
        energy_dev = avg_energy - be
        libido_dev = avg_libido - bl

        text = _insight_text(
            phase.label(),
            len(entries),
            [("mood", mood_dev), ("energy", energy_dev), ("drive", libido_dev)],
        )
        insights.append(
            PhaseInsight(
                phase=phase,
                sample_count=len(entries),
                avg_mood=avg_mood,
                avg_energy=avg_energy,
                avg_libido=avg_libido,
                baseline_mood=bm,
                baseline_energy=be,
                baseline_libido=bl,
                mood_deviation=mood_dev,
                energy_deviation=energy_dev,
                libido_deviation=libido_dev,
                insight_text=text,
            )
        )
    return insights