from __future__ import annotations

from ..building import BuildingBlueprint
from ..constants import YEAR_1, BuildingType, Color, SchoolType, StatCategory

BLUEPRINT = BuildingBlueprint(
    type=BuildingType.STANFORD,
    name="Mem. Church",
    cost=0,
    pop_gen=50,
    income_gen=200,
    unlock_day=YEAR_1,
    glyph="M",
    color=Color.LANDMARK,
    school=SchoolType.HUMANITIES,
    stat_bonuses={
        StatCategory.PRESTIGE: 20,
        StatCategory.CULTURE: 25,
        StatCategory.WELLBEING: 10,
    },
    placeable=False,
)
