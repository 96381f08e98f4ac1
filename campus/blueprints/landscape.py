from __future__ import annotations

from ..building import BuildingBlueprint
from ..constants import YEAR_1, YEAR_2, BuildingType, Color, StatCategory

BLUEPRINTS = (
    BuildingBlueprint(
        type=BuildingType.PATH,
        name="Path",
        cost=200,
        pop_gen=0,
        income_gen=0,
        unlock_day=YEAR_1,
        glyph="=",
        color=Color.PATH,
        stat_bonuses={StatCategory.WELLBEING: 1},
    ),
    BuildingBlueprint(
        type=BuildingType.PICNIC_TABLE,
        name="Picnic Table",
        cost=2_000,
        pop_gen=3,
        income_gen=10,
        unlock_day=YEAR_1,
        glyph="p",
        color=Color.PATH,
        stat_bonuses={StatCategory.WELLBEING: 3, StatCategory.CULTURE: 1},
    ),
    BuildingBlueprint(
        type=BuildingType.STREET_LAMP,
        name="Street Lamp",
        cost=1_000,
        pop_gen=1,
        income_gen=5,
        unlock_day=YEAR_1,
        glyph="!",
        color=Color.PATH,
        stat_bonuses={StatCategory.WELLBEING: 1},
    ),
    BuildingBlueprint(
        type=BuildingType.ROSE_BUSH,
        name="Rose Bush",
        cost=1_500,
        pop_gen=5,
        income_gen=5,
        unlock_day=YEAR_2,
        glyph="*",
        color=Color.GREENERY,
        stat_bonuses={StatCategory.NATURE: 2, StatCategory.CULTURE: 1},
    ),
    BuildingBlueprint(
        type=BuildingType.GARDEN_BED,
        name="Garden Bed",
        cost=3_000,
        pop_gen=8,
        income_gen=5,
        unlock_day=YEAR_2,
        glyph="g",
        color=Color.GREENERY,
        stat_bonuses={StatCategory.NATURE: 3},
    ),
    BuildingBlueprint(
        type=BuildingType.HEDGE,
        name="Hedge",
        cost=1_000,
        pop_gen=2,
        income_gen=0,
        unlock_day=YEAR_1,
        glyph="#",
        color=Color.GREENERY,
        stat_bonuses={StatCategory.NATURE: 1},
    ),
)
