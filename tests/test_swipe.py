from lifemanager.swipe import THRESHOLD, SwipeOutcome, SwipeTracker


def _drag(tracker, points):
    tracker.start(0.0, 0.0)
    return [tracker.move(x, y) for x, y in points]


def test_right_swipe_past_threshold():
    tracker = SwipeTracker()
    _drag(tracker, [(20.0, 0.0), (THRESHOLD + 10.0, 0.0)])
    assert tracker.background == "bg-neon-green/80"
    assert tracker.end() is SwipeOutcome.RIGHT
    assert tracker.translate_x == 0.0
    assert tracker.animating is True


def test_left_swipe_past_threshold():
    tracker = SwipeTracker()
    _drag(tracker, [(-20.0, 0.0), (-(THRESHOLD + 1.0), 0.0)])
    assert tracker.background == "bg-neon-magenta/80"
    assert tracker.end() is SwipeOutcome.LEFT


def test_short_swipe_does_nothing():
    tracker = SwipeTracker()
    _drag(tracker, [(20.0, 0.0), (THRESHOLD, 0.0)])
    assert tracker.end() is SwipeOutcome.NONE


def test_first_move_only_locks_direction():
    tracker = SwipeTracker()
    tracker.start(0.0, 0.0)
    assert tracker.move(100.0, 0.0) is False
    assert tracker.direction_locked is True
    assert tracker.translate_x == 0.0
    assert tracker.end() is SwipeOutcome.NONE


def test_small_move_does_not_lock():
    tracker = SwipeTracker()
    tracker.start(0.0, 0.0)
    assert tracker.move(5.0, 5.0) is False
    assert tracker.direction_locked is False


def test_vertical_scroll_is_ignored():
    tracker = SwipeTracker()
    results = _drag(tracker, [(2.0, 30.0), (200.0, 40.0)])
    assert results == [False, False]
    assert tracker.is_horizontal is False
    assert tracker.end() is SwipeOutcome.NONE


def test_right_blocked_without_action():
    tracker = SwipeTracker(has_right_action=False)
    results = _drag(tracker, [(20.0, 0.0), (200.0, 0.0)])
    assert results == [False, False]
    assert tracker.background == "bg-transparent"
    assert tracker.end() is SwipeOutcome.NONE


def test_left_allowed_without_right_action():
    tracker = SwipeTracker(has_right_action=False)
    _drag(tracker, [(-20.0, 0.0), (-200.0, 0.0)])
    assert tracker.end() is SwipeOutcome.LEFT


def test_move_without_start_is_ignored():
    tracker = SwipeTracker()
    assert tracker.move(300.0, 0.0) is False
    assert tracker.end() is SwipeOutcome.NONE


def test_start_resets_state():
    tracker = SwipeTracker()
    _drag(tracker, [(20.0, 0.0), (-200.0, 0.0)])
    tracker.end()
    tracker.start(50.0, 50.0)
    assert tracker.swiping is True
    assert tracker.direction_locked is False
    assert tracker.animating is False