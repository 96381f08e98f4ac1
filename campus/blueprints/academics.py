from __future__ import annotations

from ..building import BuildingBlueprint
from ..constants import (
    YEAR_1,
    YEAR_3,
    YEAR_5,
    YEAR_10,
    BuildingType,
    Color,
    SchoolType,
    StatCategory,
)

BLUEPRINTS = (
    BuildingBlueprint(
        type=BuildingType.ENGINEERING_QUAD,
        name="Eng. Quad",
        cost=750_000,
        pop_gen=60,
        income_gen=600,
        unlock_day=YEAR_10,
        glyph="E",
        color=Color.ACADEMIC,
        school=SchoolType.ENGINEERING,
        stat_bonuses={
            StatCategory.INNOVATION: 40,
            StatCategory.RESEARCH: 40,
            StatCategory.PRESTIGE: 20,
        },
    ),
    BuildingBlueprint(
        type=BuildingType.LECTURE_HALL,
        name="Lecture Hall",
        cost=100_000,
        pop_gen=10,
        income_gen=100,
        unlock_day=YEAR_3,
        glyph="L",
        color=Color.ACADEMIC,
        school=SchoolType.EDUCATION,
        stat_bonuses={StatCategory.RESEARCH: 10, StatCategory.INNOVATION: 5},
    ),
    BuildingBlueprint(
        type=BuildingType.D_SCHOOL,
        name="d.school",
        cost=120_000,
        pop_gen=15,
        income_gen=150,
        unlock_day=YEAR_5,
        glyph="D",
        color=Color.ACADEMIC,
        school=SchoolType.HUMANITIES,
        stat_bonuses={StatCategory.INNOVATION: 25, StatCategory.CULTURE: 25},
    ),
    BuildingBlueprint(
        type=BuildingType.STUDY_SPOT,
        name="Study Spot",
        cost=5_000,
        pop_gen=5,
        income_gen=25,
        unlock_day=YEAR_1,
        glyph="s",
        color=Color.ACADEMIC,
        school=SchoolType.EDUCATION,
        stat_bonuses={StatCategory.WELLBEING: 2, StatCategory.RESEARCH: 1},
    ),
)
