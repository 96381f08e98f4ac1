from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .constants import BuildingType, Color, SchoolType, StatCategory


@dataclass(frozen=True)
class BuildingBlueprint:
    """Static catalog entry for a building type."""

    type: BuildingType
    name: str
    cost: int
    pop_gen: int
    income_gen: int
    unlock_day: int
    glyph: str
    color: Color
    school: Optional[SchoolType] = None
    stat_bonuses: Dict[StatCategory, int] = field(default_factory=dict)
    # Saplings, grown trees and the centerpiece only appear on the map
    # through growth or the starting layout.
    placeable: bool = True

    def unlocked(self, day: int) -> bool:
        return day >= self.unlock_day


# Species chains: every seed grows into a sapling and then a tree.
SPECIES_CHAINS: Dict[str, Tuple[BuildingType, BuildingType, BuildingType]] = {
    "oak": (BuildingType.OAK_SEED, BuildingType.OAK_SAPLING, BuildingType.OAK_TREE),
    "pine": (
        BuildingType.PINE_SEED,
        BuildingType.PINE_SAPLING,
        BuildingType.PINE_TREE,
    ),
    "palm": (
        BuildingType.PALM_SEED,
        BuildingType.PALM_SAPLING,
        BuildingType.PALM_TREE,
    ),
}

# Growing stage -> the stage it promotes into
NEXT_STAGE: Dict[BuildingType, BuildingType] = {
    stage: chain[idx + 1]
    for chain in SPECIES_CHAINS.values()
    for idx, stage in enumerate(chain[:-1])
}
