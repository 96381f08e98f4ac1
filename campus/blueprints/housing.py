from __future__ import annotations

from ..building import BuildingBlueprint
from ..constants import YEAR_1, BuildingType, Color, StatCategory

BLUEPRINT = BuildingBlueprint(
    type=BuildingType.STUDENT_DORM,
    name="Dorm",
    cost=50_000,
    pop_gen=20,
    income_gen=50,
    unlock_day=YEAR_1,
    glyph="H",
    color=Color.HOUSING,
    stat_bonuses={StatCategory.WELLBEING: 5},
)
