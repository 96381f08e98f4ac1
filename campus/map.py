import logging
import math
import random
from collections import Counter
from typing import Dict, Iterator, List, Sequence, Tuple

from .constants import (
    CENTERPIECE,
    GRID_SIZE,
    WILD_OAK_SHARE,
    WILD_TREE_CHANCE,
    WILD_TREE_RADIUS,
    BuildingType,
)
from .tile import Tile

logger = logging.getLogger(__name__)


class CampusGrid:
    """Fixed-size square grid of tiles.

    Grids are never mutated in place: ``with_tile`` returns a new grid that
    shares every untouched row with the original.
    """

    def __init__(self, rows: Sequence[Sequence[Tile]]) -> None:
        self._rows: Tuple[Tuple[Tile, ...], ...] = tuple(tuple(r) for r in rows)
        self.size = len(self._rows)

    @classmethod
    def empty(cls, size: int = GRID_SIZE) -> "CampusGrid":
        return cls([[Tile(x, y) for x in range(size)] for y in range(size)])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CampusGrid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    @property
    def center(self) -> Tuple[int, int]:
        return self.size // 2, self.size // 2

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get_tile(self, x: int, y: int) -> Tile:
        """Return the tile at ``x,y``."""
        if not self.in_bounds(x, y):
            raise IndexError("tile coordinates out of bounds")
        return self._rows[y][x]

    def with_tile(self, tile: Tile) -> "CampusGrid":
        """Return a grid with ``tile`` stored at its own coordinates."""
        if not self.in_bounds(tile.x, tile.y):
            raise IndexError("tile coordinates out of bounds")
        rows = list(self._rows)
        row = list(rows[tile.y])
        row[tile.x] = tile
        rows[tile.y] = tuple(row)
        return CampusGrid(rows)

    def rows(self) -> Tuple[Tuple[Tile, ...], ...]:
        return self._rows

    def tiles(self) -> Iterator[Tile]:
        """Iterate tiles in row-major order."""
        for row in self._rows:
            yield from row

    def neighbors(self, x: int, y: int) -> List[Tile]:
        """Orthogonally adjacent tiles that lie inside the grid."""
        result: List[Tile] = []
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if self.in_bounds(nx, ny):
                result.append(self._rows[ny][nx])
        return result

    def building_counts(self) -> Dict[BuildingType, int]:
        """Number of tiles holding each building type (empty tiles skipped)."""
        counts = Counter(t.building for t in self.tiles() if not t.empty)
        return dict(counts)

    def find(self, building: BuildingType) -> Iterator[Tile]:
        return (t for t in self.tiles() if t.building is building)


def create_initial_grid(
    rng: random.Random, size: int = GRID_SIZE
) -> CampusGrid:
    """Centerpiece in the middle and a scattering of wild trees far out."""
    center = size // 2
    rows: List[List[Tile]] = []
    for y in range(size):
        row: List[Tile] = []
        for x in range(size):
            building = BuildingType.NONE
            if x == center and y == center:
                building = CENTERPIECE
            dist = math.sqrt((x - center) ** 2 + (y - center) ** 2)
            if (
                building is BuildingType.NONE
                and dist > WILD_TREE_RADIUS
                and rng.random() < WILD_TREE_CHANCE
            ):
                building = (
                    BuildingType.OAK_TREE
                    if rng.random() < WILD_OAK_SHARE
                    else BuildingType.PINE_TREE
                )
            variant = 100 if building is not BuildingType.NONE else 0
            row.append(Tile(x, y, building, variant, 0))
        rows.append(row)
    grid = CampusGrid(rows)
    logger.debug(
        "Created %dx%d campus with %d wild trees",
        size,
        size,
        sum(1 for t in grid.tiles() if not t.empty) - 1,
    )
    return grid
