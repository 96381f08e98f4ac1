from __future__ import annotations

from ..building import BuildingBlueprint
from ..constants import (
    YEAR_4,
    YEAR_6,
    YEAR_8,
    YEAR_9,
    BuildingType,
    Color,
    SchoolType,
    StatCategory,
)

BLUEPRINTS = (
    BuildingBlueprint(
        type=BuildingType.HOOVER_TOWER,
        name="Hoover Tower",
        cost=300_000,
        pop_gen=50,
        income_gen=400,
        unlock_day=YEAR_9,
        glyph="T",
        color=Color.LANDMARK,
        stat_bonuses={StatCategory.PRESTIGE: 50, StatCategory.INNOVATION: 10},
    ),
    BuildingBlueprint(
        type=BuildingType.CLAW_FOUNTAIN,
        name="The Claw",
        cost=45_000,
        pop_gen=25,
        income_gen=60,
        unlock_day=YEAR_4,
        glyph="w",
        color=Color.ART,
        school=SchoolType.HUMANITIES,
        stat_bonuses={StatCategory.CULTURE: 15, StatCategory.PRESTIGE: 5},
    ),
    BuildingBlueprint(
        type=BuildingType.RODIN_SCULPTURE,
        name="Rodin Sculpture",
        cost=60_000,
        pop_gen=35,
        income_gen=50,
        unlock_day=YEAR_6,
        glyph="r",
        color=Color.ART,
        school=SchoolType.HUMANITIES,
        stat_bonuses={StatCategory.CULTURE: 25, StatCategory.PRESTIGE: 10},
    ),
    BuildingBlueprint(
        type=BuildingType.TOTEM_SCULPTURE,
        name="PNG Totem",
        cost=35_000,
        pop_gen=20,
        income_gen=40,
        unlock_day=YEAR_8,
        glyph="i",
        color=Color.ART,
        school=SchoolType.HUMANITIES,
        stat_bonuses={StatCategory.CULTURE: 15, StatCategory.NATURE: 5},
    ),
)
