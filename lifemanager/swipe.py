"""Touch gesture tracking for swipe-to-complete and swipe-to-delete rows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

THRESHOLD = 72.0
"""Distance in pixels a row must travel before a swipe counts."""

_LOCK_DISTANCE = 10.0


class SwipeOutcome(Enum):
    """What a finished gesture asks for."""

    NONE = "none"
    RIGHT = "right"
    LEFT = "left"


@dataclass
class SwipeTracker:
    """Follows one finger across a row and decides what the swipe means.

    With ``has_right_action`` false the row cannot be dragged to the right.
    """

    has_right_action: bool = True
    translate_x: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0
    swiping: bool = False
    direction_locked: bool = False
    is_horizontal: bool = False
    animating: bool = False

    def start(self, x: float, y: float) -> None:
        """A finger touched the row."""
        self.start_x = x
        self.start_y = y
        self.swiping = True
        self.direction_locked = False
        self.is_horizontal = False
        self.animating = False

    def move(self, x: float, y: float) -> bool:
        """The finger moved; return True when the row follows it horizontally."""
        if not self.swiping:
            return False
        dx = x - self.start_x
        dy = y - self.start_y
        if not self.direction_locked:
            if abs(dx) > _LOCK_DISTANCE or abs(dy) > _LOCK_DISTANCE:
                self.direction_locked = True
                self.is_horizontal = abs(dx) > abs(dy)
            return False
        if not self.is_horizontal:
            return False
        if dx > 0.0 and not self.has_right_action:
            return False
        self.translate_x = dx
        return True

    def end(self) -> SwipeOutcome:
        """The finger lifted; snap back and report the outcome."""
        self.swiping = False
        self.animating = True
        tx = self.translate_x
        self.translate_x = 0.0
        if tx > THRESHOLD:
            return SwipeOutcome.RIGHT if self.has_right_action else SwipeOutcome.NONE
        if tx < -THRESHOLD:
            return SwipeOutcome.LEFT
        return SwipeOutcome.NONE

    @property
    def background(self) -> str:
        """Colour class revealed behind the row while it is dragged."""
        if self.translate_x > 0.0:
            return "bg-neon-green/80"
        if self.translate_x < 0.0:
            return "bg-neon-magenta/80"
        return "bg-transparent"