from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Tuple

from .building import NEXT_STAGE
from .constants import GROWTH_CHANCE, GROWTH_MATURE, GROWTH_STEP
from .map import CampusGrid
from .tile import Tile

logger = logging.getLogger(__name__)


def advance_growth(grid: CampusGrid, rng: random.Random) -> Tuple[CampusGrid, bool]:
    """Run one growth step over every seed and sapling.

    Returns the resulting grid and whether any tile changed.  The original
    grid is returned untouched when nothing grew.
    """
    changed = False
    rows: List[Tuple[Tile, ...]] = []
    for row in grid.rows():
        new_row = list(row)
        for idx, tile in enumerate(row):
            nxt = NEXT_STAGE.get(tile.building)
            if nxt is None:
                continue
            if rng.random() > 1 - GROWTH_CHANCE:
                variant = tile.variant + GROWTH_STEP
                if variant >= GROWTH_MATURE:
                    logger.debug(
                        "%s at (%d, %d) grew into %s",
                        tile.building.value,
                        tile.x,
                        tile.y,
                        nxt.value,
                    )
                    new_row[idx] = replace(tile, building=nxt, variant=0)
                else:
                    new_row[idx] = replace(tile, variant=variant)
                changed = True
        rows.append(tuple(new_row))
    if not changed:
        return grid, False
    return CampusGrid(rows), True
