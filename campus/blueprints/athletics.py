from __future__ import annotations

from ..building import BuildingBlueprint
from ..constants import (
    YEAR_2,
    YEAR_3,
    YEAR_5,
    YEAR_7,
    YEAR_8,
    BuildingType,
    Color,
    SchoolType,
    StatCategory,
)

BLUEPRINTS = (
    BuildingBlueprint(
        type=BuildingType.TENNIS_COURT,
        name="Tennis Court",
        cost=40_000,
        pop_gen=5,
        income_gen=80,
        unlock_day=YEAR_2,
        glyph="t",
        color=Color.ATHLETICS,
        school=SchoolType.EDUCATION,
        stat_bonuses={StatCategory.WELLBEING: 5, StatCategory.PRESTIGE: 2},
    ),
    BuildingBlueprint(
        type=BuildingType.VOLLEYBALL_COURT,
        name="Beach Volleyball",
        cost=25_000,
        pop_gen=5,
        income_gen=60,
        unlock_day=YEAR_3,
        glyph="v",
        color=Color.ATHLETICS,
        stat_bonuses={StatCategory.WELLBEING: 4, StatCategory.CULTURE: 1},
    ),
    BuildingBlueprint(
        type=BuildingType.FOOTBALL_FIELD,
        name="Football Field",
        cost=150_000,
        pop_gen=15,
        income_gen=300,
        unlock_day=YEAR_7,
        glyph="F",
        color=Color.ATHLETICS,
        school=SchoolType.BUSINESS,
        stat_bonuses={
            StatCategory.PRESTIGE: 15,
            StatCategory.CULTURE: 5,
            StatCategory.WELLBEING: 5,
        },
    ),
    BuildingBlueprint(
        type=BuildingType.TRACK_FIELD,
        name="Track & Field",
        cost=120_000,
        pop_gen=15,
        income_gen=250,
        unlock_day=YEAR_5,
        glyph="K",
        color=Color.ATHLETICS,
        school=SchoolType.MEDICINE,
        stat_bonuses={StatCategory.WELLBEING: 10, StatCategory.PRESTIGE: 5},
    ),
    BuildingBlueprint(
        type=BuildingType.OVAL,
        name="The Oval",
        cost=80_000,
        pop_gen=30,
        income_gen=100,
        unlock_day=YEAR_8,
        glyph="O",
        color=Color.GREENERY,
        school=SchoolType.SUSTAINABILITY,
        stat_bonuses={
            StatCategory.NATURE: 20,
            StatCategory.WELLBEING: 10,
            StatCategory.CULTURE: 5,
        },
    ),
)
