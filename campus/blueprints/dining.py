from __future__ import annotations

from ..building import BuildingBlueprint
from ..constants import (
    YEAR_2,
    YEAR_4,
    YEAR_5,
    BuildingType,
    Color,
    SchoolType,
    StatCategory,
)

BLUEPRINTS = (
    BuildingBlueprint(
        type=BuildingType.ARRILLAGA_HALL,
        name="Arrillaga Hall",
        cost=150_000,
        pop_gen=20,
        income_gen=300,
        unlock_day=YEAR_2,
        glyph="A",
        color=Color.DINING,
        school=SchoolType.BUSINESS,
        stat_bonuses={StatCategory.WELLBEING: 25, StatCategory.CULTURE: 10},
    ),
    BuildingBlueprint(
        type=BuildingType.COUPA_CAFE,
        name="Coupa Cafe",
        cost=15_000,
        pop_gen=2,
        income_gen=150,
        # Six months in
        unlock_day=180,
        glyph="c",
        color=Color.DINING,
        school=SchoolType.BUSINESS,
        stat_bonuses={StatCategory.WELLBEING: 5, StatCategory.CULTURE: 2},
    ),
    BuildingBlueprint(
        type=BuildingType.TRADER_JOES,
        name="Trader Joe's",
        cost=25_000,
        pop_gen=5,
        income_gen=200,
        unlock_day=YEAR_4,
        glyph="j",
        color=Color.DINING,
        school=SchoolType.BUSINESS,
        stat_bonuses={StatCategory.WELLBEING: 10, StatCategory.CULTURE: 5},
    ),
    BuildingBlueprint(
        type=BuildingType.VAPE_STORE,
        name="Vape Shop",
        cost=25_000,
        pop_gen=-5,
        income_gen=500,
        unlock_day=YEAR_5,
        glyph="V",
        color=Color.HAZARD,
        stat_bonuses={StatCategory.WELLBEING: -10, StatCategory.CULTURE: -5},
    ),
)
