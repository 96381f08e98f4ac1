"""Focus-session clock used by the focus game mode.

The clock runs on its own one-second timer, independent of the simulation
tick.  The economy engine only reads it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .constants import (
    BREAK_TIME,
    FOCUS_COMPLETION_BONUS,
    FOCUS_MULTIPLIER_TIERS,
    FOCUS_TIME,
    Channel,
    TimerMode,
    Tone,
)
from .narrative import Notification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FocusTimer:
    mode: TimerMode = TimerMode.IDLE
    time_left: int = FOCUS_TIME

    @property
    def focusing(self) -> bool:
        return self.mode is TimerMode.FOCUS

    @property
    def elapsed(self) -> int:
        """Seconds spent in the current focus session."""
        return FOCUS_TIME - self.time_left

    def toggled(self) -> "FocusTimer":
        if self.mode is TimerMode.IDLE:
            return FocusTimer(TimerMode.FOCUS, FOCUS_TIME)
        return FocusTimer()

    def tick(self) -> Tuple["FocusTimer", bool]:
        """Advance one second.

        Returns the new timer and whether a focus session just completed.
        """
        if self.mode is TimerMode.IDLE:
            return self, False
        if self.time_left <= 1:
            if self.mode is TimerMode.FOCUS:
                return FocusTimer(TimerMode.BREAK, BREAK_TIME), True
            return FocusTimer(TimerMode.IDLE, FOCUS_TIME), False
        return FocusTimer(self.mode, self.time_left - 1), False


def focus_multiplier(elapsed: int) -> int:
    """Income multiplier for a focus session ``elapsed`` seconds in."""
    multiplier = 1
    for threshold, value in FOCUS_MULTIPLIER_TIERS:
        if elapsed > threshold:
            multiplier = value
    return multiplier


def focus_completion_notifications() -> List[Notification]:
    return [
        Notification(
            Channel.NEWS,
            "Focus session complete! Large Bonus awarded.",
            Tone.POSITIVE,
        )
    ]

