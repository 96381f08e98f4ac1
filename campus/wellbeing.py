"""Student wellbeing: amenity coverage for housing and long-term health."""

from __future__ import annotations

import math
from typing import Mapping

from .constants import (
    HARMFUL,
    HEALTH_PENALTY_DECAY,
    HEALTH_PENALTY_PER_UNIT,
    HOUSING,
    BuildingType,
)

# Amenity demand per housing unit.  Each entry maps an amenity to a function
# of the housing count giving the number of units required for full coverage.
AMENITY_DEMAND = {
    # 1 lecture hall per 2 dorms
    BuildingType.LECTURE_HALL: lambda housing: math.ceil(housing / 2),
    # 2 study spots per dorm
    BuildingType.STUDY_SPOT: lambda housing: housing * 2,
    # 1 cafe per 3 dorms
    BuildingType.COUPA_CAFE: lambda housing: math.ceil(housing / 3),
}


def compute_wellbeing(counts: Mapping[BuildingType, int]) -> float:
    """Return the base wellbeing score in ``[0, 100]``.

    With no housing there is no demand and the score is a flat 100.
    """
    housing = counts.get(HOUSING, 0)
    if housing <= 0:
        return 100.0

    scores = []
    for amenity, demand in AMENITY_DEMAND.items():
        required = max(1, demand(housing))
        have = counts.get(amenity, 0)
        scores.append(min(have / required, 1) * 100)
    score = sum(scores) / len(scores)
    return max(0.0, min(100.0, score))


def step_health_penalty(penalty: float, counts: Mapping[BuildingType, int]) -> float:
    """Advance the cumulative health penalty by one tick.

    Harmful buildings push the penalty up; once they are gone it only
    recovers slowly.
    """
    harmful = counts.get(HARMFUL, 0)
    if harmful > 0:
        penalty += harmful * HEALTH_PENALTY_PER_UNIT
    elif penalty > 0:
        penalty -= HEALTH_PENALTY_DECAY
    return max(0.0, penalty)


def final_wellbeing(base: float, penalty: float, offset: float = 0.0) -> float:
    """Combine the base score, the penalty and any hooked offset."""
    value = max(0.0, base - penalty)
    if offset:
        value = max(0.0, min(100.0, value + offset))
    return value
