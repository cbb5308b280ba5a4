"""Month calendar of the cycle tracker: grid layout, phase tints and logged moods."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from lifemanager.cycle import Cycle, CyclePhase, CycleSettings, MoodEntry, phase_for_date
from lifemanager.period_dashboard import mood_emoji

MONTH_NAMES = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)

WEEKDAY_NAMES = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")

LEGEND = (
    ("Period", "neon-pink"),
    ("Follicular", "neon-green"),
    ("Ovulation", "neon-orange"),
    ("Luteal", "neon-purple"),
)

_TINTS = {
    CyclePhase.MENSTRUATION: "bg-neon-pink/8",
    CyclePhase.FOLLICULAR: "bg-neon-green/8",
    CyclePhase.OVULATION: "bg-neon-orange/8",
    CyclePhase.EARLY_LUTEAL: "bg-neon-purple/8",
    CyclePhase.LATE_LUTEAL: "bg-neon-magenta/8",
}


def _first_of_month(day: date) -> date:
    return day.replace(day=1)


def month_label(month_start: date) -> str:
    """Header text for a month, such as "MAR 2024"."""
    return f"{MONTH_NAMES[month_start.month - 1]} {month_start.year}"


def shift_month(month_start: date, delta: int) -> date:
    """First day of the month ``delta`` months away from the given one."""
    index = month_start.year * 12 + (month_start.month - 1) + delta
    year, month = divmod(index, 12)
    return date(year, month + 1, 1)


def _days_in_month(month_start: date) -> int:
    first = _first_of_month(month_start)
    return (shift_month(first, 1) - first).days


def month_grid(month_start: date) -> list[Optional[date]]:
    """Cells of the month in whole Monday-first weeks; blanks are None."""
    first = _first_of_month(month_start)
    lead = first.weekday()
    count = _days_in_month(first)
    rows = (lead + count + 6) // 7
    cells: list[Optional[date]] = [None] * (rows * 7)
    for offset in range(count):
        cells[lead + offset] = first + timedelta(days=offset)
    return cells


def phase_tint(phase: Optional[CyclePhase]) -> str:
    """Background class tinting a calendar day by its phase; empty for none."""
    if phase is None:
        return ""
    return _TINTS[phase]


@dataclass(frozen=True)
class CalendarDay:
    """One day shown on the calendar."""

    date: date
    is_today: bool
    is_future: bool
    phase: Optional[CyclePhase]
    entry: Optional[MoodEntry]

    @property
    def day_number(self) -> int:
        return self.date.day

    @property
    def selectable(self) -> bool:
        """Only today and earlier days can be opened."""
        return not self.is_future

    @property
    def tint(self) -> str:
        """Phase tint; future days are never tinted."""
        return "" if self.is_future else phase_tint(self.phase)

    @property
    def emoji(self) -> Optional[str]:
        """Face of the logged mood, if a mood was logged."""
        return mood_emoji(self.entry.mood) if self.entry is not None else None

    def border(self, selected: bool) -> str:
        """Border class, highlighting the selected day and today."""
        if selected:
            return "border border-neon-cyan/60"
        if self.is_today:
            return "border border-neon-cyan/30"
        return "border border-transparent"


def _mood_map(mood_logs: Iterable[MoodEntry]) -> dict[date, MoodEntry]:
    # A later entry for the same day replaces an earlier one.
    return {entry.date: entry for entry in mood_logs}


def calendar_days(
    month_start: date,
    today: date,
    mood_logs: Iterable[MoodEntry],
    cycles: Sequence[Cycle],
    settings: CycleSettings,
) -> list[Optional[CalendarDay]]:
    """The month grid filled in with phases and logged moods."""
    moods = _mood_map(mood_logs)
    return [
        None
        if cell is None
        else CalendarDay(
            date=cell,
            is_today=cell == today,
            is_future=cell > today,
            phase=phase_for_date(cell, cycles, settings),
            entry=moods.get(cell),
        )
        for cell in month_grid(month_start)
    ]