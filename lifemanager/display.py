"""Presentation helpers: sync indicator, progress bar and quick-add chips."""

from __future__ import annotations

import time
from enum import Enum
from typing import Optional


class SyncStatus(Enum):
    """State of the last attempt to fetch data from the server."""

    SYNCED = "synced"
    SYNCING = "syncing"
    CACHED_ONLY = "cached_only"


def _now_millis() -> int:
    return int(time.time() * 1000)


def format_sync_time(millis: Optional[int], now: Optional[int] = None) -> str:
    """Describe how long ago the last sync happened; times are in milliseconds."""
    if millis is None:
        return "SYNCED"
    if now is None:
        now = _now_millis()
    diff_secs = max(int(now) - int(millis), 0) // 1000
    if diff_secs < 10:
        return "JUST NOW"
    if diff_secs < 60:
        return f"{diff_secs}s AGO"
    if diff_secs < 3600:
        return f"{diff_secs // 60}m AGO"
    return f"{diff_secs // 3600}h AGO"


def sync_label(
    status: SyncStatus, last_sync: Optional[int], now: Optional[int] = None
) -> str:
    """Text shown next to the sync dot."""
    if status is SyncStatus.SYNCED:
        return format_sync_time(last_sync, now)
    if status is SyncStatus.SYNCING:
        return "SYNCING..."
    return "OFFLINE"


_DOTS = {
    SyncStatus.SYNCED: ("bg-neon-green", ""),
    SyncStatus.SYNCING: ("bg-neon-cyan", "animate-pulse"),
    SyncStatus.CACHED_ONLY: ("bg-neon-orange", ""),
}


def sync_dot(status: SyncStatus) -> tuple[str, str]:
    """(colour class, animation class) of the sync dot."""
    return _DOTS[status]


def progress_percent(watched: int, total: int) -> float:
    """Share watched as a percentage capped at 100; 0 when the total is unknown."""
    if total > 0:
        return min(watched / total * 100.0, 100.0)
    return 0.0


def progress_color(pct: float) -> str:
    """Bar colour class for a progress percentage."""
    if pct >= 100.0:
        return "bg-neon-green shadow-[0_0_6px_theme(colors.neon-green)]"
    if pct >= 50.0:
        return "bg-neon-cyan shadow-[0_0_6px_theme(colors.neon-cyan)]"
    return "bg-neon-purple shadow-[0_0_6px_theme(colors.neon-purple)]"


_PALETTES = {
    "green": ("bg-neon-green/10", "text-neon-green", "border-neon-green/30"),
    "orange": ("bg-neon-orange/10", "text-neon-orange", "border-neon-orange/30"),
    "purple": ("bg-neon-purple/10", "text-neon-purple", "border-neon-purple/30"),
}
_DEFAULT_PALETTE = ("bg-neon-cyan/10", "text-neon-cyan", "border-neon-cyan/30")


def chip_palette(accent: str = "cyan") -> tuple[str, str, str]:
    """(background, text, border) classes for quick-add chips; cyan by default."""
    return _PALETTES.get(accent, _DEFAULT_PALETTE)