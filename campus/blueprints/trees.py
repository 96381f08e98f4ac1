from __future__ import annotations

from ..building import BuildingBlueprint
from ..constants import YEAR_1, YEAR_4, BuildingType, Color, SchoolType, StatCategory

# Seeds are bought; saplings and trees only arrive through growth.
BLUEPRINTS = (
    BuildingBlueprint(
        type=BuildingType.OAK_SEED,
        name="Acorn",
        cost=500,
        pop_gen=1,
        income_gen=0,
        unlock_day=YEAR_1,
        glyph=",",
        color=Color.GREENERY,
        school=SchoolType.SUSTAINABILITY,
        stat_bonuses={StatCategory.NATURE: 1},
    ),
    BuildingBlueprint(
        type=BuildingType.OAK_SAPLING,
        name="Oak Sapling",
        cost=0,
        pop_gen=2,
        income_gen=0,
        unlock_day=YEAR_1,
        glyph="o",
        color=Color.GREENERY,
        stat_bonuses={StatCategory.NATURE: 2},
        placeable=False,
    ),
    BuildingBlueprint(
        type=BuildingType.OAK_TREE,
        name="Oak Tree",
        cost=0,
        pop_gen=10,
        income_gen=10,
        unlock_day=YEAR_1,
        glyph="Q",
        color=Color.GREENERY,
        school=SchoolType.SUSTAINABILITY,
        stat_bonuses={StatCategory.NATURE: 5},
        placeable=False,
    ),
    BuildingBlueprint(
        type=BuildingType.PINE_SEED,
        name="Pine Cone",
        cost=500,
        pop_gen=1,
        income_gen=0,
        unlock_day=YEAR_1,
        glyph=":",
        color=Color.GREENERY,
        school=SchoolType.SUSTAINABILITY,
        stat_bonuses={StatCategory.NATURE: 1},
    ),
    BuildingBlueprint(
        type=BuildingType.PINE_SAPLING,
        name="Pine Sapling",
        cost=0,
        pop_gen=2,
        income_gen=0,
        unlock_day=YEAR_1,
        glyph="^",
        color=Color.GREENERY,
        stat_bonuses={StatCategory.NATURE: 2},
        placeable=False,
    ),
    BuildingBlueprint(
        type=BuildingType.PINE_TREE,
        name="Pine Tree",
        cost=0,
        pop_gen=8,
        income_gen=10,
        unlock_day=YEAR_1,
        glyph="P",
        color=Color.GREENERY,
        school=SchoolType.SUSTAINABILITY,
        stat_bonuses={StatCategory.NATURE: 4},
        placeable=False,
    ),
    BuildingBlueprint(
        type=BuildingType.PALM_SEED,
        name="Coconut",
        cost=600,
        pop_gen=1,
        income_gen=0,
        # Exotic unlock
        unlock_day=YEAR_4,
        glyph="'",
        color=Color.GREENERY,
        school=SchoolType.SUSTAINABILITY,
        stat_bonuses={StatCategory.NATURE: 1},
    ),
    BuildingBlueprint(
        type=BuildingType.PALM_SAPLING,
        name="Palm Sapling",
        cost=0,
        pop_gen=2,
        income_gen=0,
        unlock_day=YEAR_4,
        glyph="y",
        color=Color.GREENERY,
        stat_bonuses={StatCategory.NATURE: 2},
        placeable=False,
    ),
    BuildingBlueprint(
        type=BuildingType.PALM_TREE,
        name="Palm Tree",
        cost=0,
        pop_gen=8,
        income_gen=10,
        unlock_day=YEAR_4,
        glyph="Y",
        color=Color.GREENERY,
        school=SchoolType.SUSTAINABILITY,
        stat_bonuses={StatCategory.NATURE: 4},
        placeable=False,
    ),
)
