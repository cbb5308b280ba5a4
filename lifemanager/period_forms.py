"""Form state and small calculations behind the cycle tracker's inputs and panels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from lifemanager.cycle import Cycle, PhaseInsight

SYMPTOM_CHIPS = (
    "Cramps",
    "Headache",
    "Fatigue",
    "Bloating",
    "Mood Swings",
    "Back Pain",
    "Nausea",
)

CYCLE_LENGTH_RANGE = (21, 45)
"""Accepted average cycle length, in days, inclusive."""

PERIOD_DURATION_RANGE = (2, 10)
"""Accepted average period duration, in days, inclusive."""

HISTORY_PREVIEW = 3
"""Cycles shown in the history before it is expanded."""

NOTES_PREVIEW_LENGTH = 15

_BAR_LIMIT = 50.0


@dataclass
class CheckIn:
    """The daily mood check-in being filled in.

    ``saved`` is true once the current values have been stored; changing any
    value should clear it.
    """

    mood: Optional[int] = None
    energy: Optional[int] = None
    libido: Optional[int] = None
    notes: str = ""
    saved: bool = False
    editing: bool = False

    def can_save(self) -> bool:
        """All three scores are chosen and something changed since saving."""
        return (
            self.mood is not None
            and self.energy is not None
            and self.libido is not None
            and not self.saved
        )

    def notes_preview(self) -> str:
        """The start of the notes, with an ellipsis when they run longer.

        The length check counts UTF-8 bytes, so short notes in wide scripts
        may still get an ellipsis.
        """
        preview = self.notes[:NOTES_PREVIEW_LENGTH]
        too_long = len(self.notes.encode("utf-8")) > NOTES_PREVIEW_LENGTH
        return preview + ("\u2026" if too_long else "")

    @property
    def notes_or_none(self) -> Optional[str]:
        """Notes as stored: None when left empty."""
        return self.notes if self.notes else None

    @property
    def save_label(self) -> str:
        return "UPDATE" if self.editing else "SAVE CHECK-IN"


def _format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return repr(value)


def deviation_bar(deviation: float) -> tuple[str, str]:
    """(inline style, colour class) of a bar centred on the baseline.

    A deviation of two points fills one half of the bar; larger ones are capped.
    """
    pct = max(-_BAR_LIMIT, min(_BAR_LIMIT, deviation / 2.0 * _BAR_LIMIT))
    width = _format_number(abs(pct))
    if pct >= 0.0:
        return f"left: 50%; width: {width}%;", "bg-neon-green/50"
    left = _format_number(_BAR_LIMIT + pct)
    return f"left: {left}%; width: {width}%;", "bg-neon-pink/50"


def toggle_symptom(selected: Iterable[str], symptom: str) -> list[str]:
    """The selection with the symptom removed if present, otherwise appended."""
    current = list(selected)
    if symptom in current:
        return [item for item in current if item != symptom]
    return [*current, symptom]


def _clamp(value: Union[int, str], bounds: tuple[int, int]) -> int:
    number = int(value)
    low, high = bounds
    return max(low, min(high, number))


def clamp_cycle_length(value: Union[int, str]) -> int:
    """Cycle length entered in the settings, kept within 21-45 days.

    Raises ValueError for text that is not a whole number.
    """
    return _clamp(value, CYCLE_LENGTH_RANGE)


def clamp_period_duration(value: Union[int, str]) -> int:
    """Period duration entered in the settings, kept within 2-10 days.

    Raises ValueError for text that is not a whole number.
    """
    return _clamp(value, PERIOD_DURATION_RANGE)


def visible_history(
    cycles: Sequence[Cycle], show_all: bool
) -> tuple[list[Cycle], int]:
    """(cycles to show, how many are hidden behind "show all")."""
    visible = list(cycles) if show_all else list(cycles[:HISTORY_PREVIEW])
    return visible, len(cycles) - len(visible)


def total_entries(insights: Iterable[PhaseInsight]) -> int:
    """Mood entries analysed across all phase insights."""
    return sum(insight.sample_count for insight in insights)