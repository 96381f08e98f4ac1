from __future__ import annotations

import logging
import math

from .constants import MIN_EFFICIENCY, GameMode
from .focus import FocusTimer, focus_multiplier
from .modifiers import NEUTRAL, Modifier

logger = logging.getLogger(__name__)


def prestige_multiplier(population: float) -> float:
    return 1 + population / 100


def compute_income(
    mode: GameMode,
    pending_income: float,
    wellbeing: float,
    population: float,
    timer: FocusTimer,
    modifier: Modifier = NEUTRAL,
) -> int:
    """Return the money earned this tick from visitor income.

    Standard and creative campaigns always accrue, scaled by wellbeing.  The
    focus mode only pays while a session is running and scales with how long
    it has been going.
    """
    prestige = prestige_multiplier(population)
    if mode is GameMode.FOCUS:
        if not timer.focusing:
            return 0
        tier = focus_multiplier(timer.elapsed)
        income = math.ceil(
            pending_income * tier * prestige * modifier.income_multiplier
        )
    else:
        efficiency = max(MIN_EFFICIENCY, wellbeing / 100)
        income = math.floor(
            pending_income * efficiency * prestige * modifier.income_multiplier
        )
    if income:
        logger.debug(
            "Income %d from %.1f pending (wellbeing %.1f, population %.1f)",
            income,
            pending_income,
            wellbeing,
            population,
        )
    return income
