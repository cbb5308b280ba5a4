import pytest

from lifemanager.display import (
    SyncStatus,
    chip_palette,
    format_sync_time,
    progress_color,
    progress_percent,
    sync_dot,
    sync_label,
)

BASE = 1_700_000_000_000


def test_format_sync_time_none():
    assert format_sync_time(None, BASE) == "SYNCED"


def test_format_sync_time_just_now():
    assert format_sync_time(BASE, BASE + 9_999) == "JUST NOW"


def test_format_sync_time_future_is_just_now():
    assert format_sync_time(BASE + 50_000, BASE) == "JUST NOW"


def test_format_sync_time_seconds():
    assert format_sync_time(BASE, BASE + 30_000) == "30s AGO"


def test_format_sync_time_minutes():
    assert format_sync_time(BASE, BASE + 150_000) == "2m AGO"


def test_format_sync_time_hours():
    assert format_sync_time(BASE, BASE + 3 * 3_600_000 + 5_000) == "3h AGO"


def test_sync_label_by_status():
    assert sync_label(SyncStatus.SYNCING, BASE, BASE) == "SYNCING..."
    assert sync_label(SyncStatus.CACHED_ONLY, BASE, BASE) == "OFFLINE"
    assert sync_label(SyncStatus.SYNCED, None) == "SYNCED"
    assert sync_label(SyncStatus.SYNCED, BASE, BASE + 1_000) == "JUST NOW"


def test_sync_dot():
    assert sync_dot(SyncStatus.SYNCING) == ("bg-neon-cyan", "animate-pulse")
    assert sync_dot(SyncStatus.SYNCED) == ("bg-neon-green", "")
    assert sync_dot(SyncStatus.CACHED_ONLY) == ("bg-neon-orange", "")


@pytest.mark.parametrize("watched,total,expected", [
    (0, 0, 0.0),
    (5, -1, 0.0),
    (1, 2, 50.0),
    (4, 4, 100.0),
    (9, 4, 100.0),
])
def test_progress_percent(watched, total, expected):
    assert progress_percent(watched, total) == expected


def test_progress_percent_stays_in_range():
    for watched in range(0, 30):
        pct = progress_percent(watched, 12)
        assert 0.0 <= pct <= 100.0


def test_progress_color_thresholds():
    assert progress_color(100.0).startswith("bg-neon-green")
    assert progress_color(50.0).startswith("bg-neon-cyan")
    assert progress_color(49.9).startswith("bg-neon-purple")


def test_chip_palette():
    assert chip_palette("green") == ("bg-neon-green/10", "text-neon-green", "border-neon-green/30")
    assert chip_palette("orange")[1] == "text-neon-orange"
    assert chip_palette("purple")[2] == "border-neon-purple/30"
    assert chip_palette("unknown") == chip_palette()
    assert chip_palette()[0] == "bg-neon-cyan/10"