from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .constants import BuildingType

logger = logging.getLogger(__name__)


class TargetType(Enum):
    MONEY = "money"
    POPULATION = "population"
    WELLBEING = "wellbeing"
    BUILDING_COUNT = "building_count"


@dataclass(frozen=True)
class Mission:
    """A single campaign goal."""

    id: str
    description: str
    target_type: TargetType
    target_value: float
    reward: int
    building: Optional[BuildingType] = None
    completed: bool = False

    def __post_init__(self) -> None:
        needs_building = self.target_type is TargetType.BUILDING_COUNT
        if needs_building != (self.building is not None):
            raise ValueError(
                f"mission {self.id}: building qualifier is required only for "
                "building-count targets"
            )


MISSIONS: Tuple[Mission, ...] = (
    Mission(
        "m1",
        "Plant 3 Oak Trees to start your forest.",
        TargetType.BUILDING_COUNT,
        3,
        50_000,
        BuildingType.OAK_TREE,
    ),
    Mission(
        "m2",
        "Build a Path network of 10 tiles.",
        TargetType.BUILDING_COUNT,
        10,
        20_000,
        BuildingType.PATH,
    ),
    Mission(
        "m3",
        "Create 2 Study Spots for students.",
        TargetType.BUILDING_COUNT,
        2,
        100_000,
        BuildingType.STUDY_SPOT,
    ),
    Mission("m4", "Reach 100 Nature Score.", TargetType.POPULATION, 100, 75_000),
    Mission(
        "m5",
        "Build a Student Dorm for residents.",
        TargetType.BUILDING_COUNT,
        1,
        250_000,
        BuildingType.STUDENT_DORM,
    ),
    Mission(
        "m6",
        "Build a Lecture Hall for classes.",
        TargetType.BUILDING_COUNT,
        1,
        300_000,
        BuildingType.LECTURE_HALL,
    ),
    Mission("m7", "Maintain 90% Student Well-being.", TargetType.WELLBEING, 90, 200_000),
    Mission(
        "m8",
        "Build a Coupa Cafe to serve coffee.",
        TargetType.BUILDING_COUNT,
        1,
        200_000,
        BuildingType.COUPA_CAFE,
    ),
    Mission("m9", "Reach $2,000,000 in Revenue.", TargetType.MONEY, 2_000_000, 500_000),
    Mission(
        "m10",
        "Expand the forest to 30 Pine Trees.",
        TargetType.BUILDING_COUNT,
        30,
        250_000,
        BuildingType.PINE_TREE,
    ),
)

# Building-count targets that also accept immature stages
COUNT_ALIASES: Dict[BuildingType, Tuple[BuildingType, ...]] = {
    BuildingType.OAK_TREE: (BuildingType.OAK_SAPLING,),
}


def next_mission(
    completed_ids: Iterable[str], catalog: Tuple[Mission, ...] = MISSIONS
) -> Optional[Mission]:
    """Return the first catalog mission not yet claimed, fresh and pending."""
    done = set(completed_ids)
    for mission in catalog:
        if mission.id not in done:
            return replace(mission, completed=False)
    return None


def qualifying_count(building: BuildingType, counts: Mapping[BuildingType, int]) -> int:
    total = counts.get(building, 0)
    for alias in COUNT_ALIASES.get(building, ()):
        total += counts.get(alias, 0)
    return total


def is_met(
    mission: Mission,
    *,
    money: float,
    population: float,
    wellbeing: float,
    counts: Mapping[BuildingType, int],
) -> bool:
    """Evaluate the completion predicate of ``mission``."""
    if mission.target_type is TargetType.MONEY:
        return money >= mission.target_value
    if mission.target_type is TargetType.POPULATION:
        return population >= mission.target_value
    if mission.target_type is TargetType.WELLBEING:
        return wellbeing >= mission.target_value
    assert mission.building is not None
    return qualifying_count(mission.building, counts) >= mission.target_value
