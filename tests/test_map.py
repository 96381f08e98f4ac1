import random

import pytest

from campus.constants import CENTERPIECE, GRID_SIZE, WILD_TREE_RADIUS, BuildingType
from campus.map import CampusGrid, create_initial_grid
from campus.tile import Tile


def test_initial_grid_has_centerpiece_and_far_trees():
    grid = create_initial_grid(random.Random(7))
    assert grid.size == GRID_SIZE
    assert grid.get_tile(30, 30).building is CENTERPIECE
    assert len(list(grid.find(CENTERPIECE))) == 1
    for tile in grid.tiles():
        if tile.empty or tile.building is CENTERPIECE:
            continue
        assert tile.building in (BuildingType.OAK_TREE, BuildingType.PINE_TREE)
        assert ((tile.x - 30) ** 2 + (tile.y - 30) ** 2) ** 0.5 > WILD_TREE_RADIUS
        assert tile.variant == 100


def test_with_tile_returns_new_grid():
    grid = CampusGrid.empty(5)
    updated = grid.with_tile(Tile(1, 2, BuildingType.PATH))
    assert grid.get_tile(1, 2).empty
    assert updated.get_tile(1, 2).building is BuildingType.PATH
    assert updated.building_counts() == {BuildingType.PATH: 1}


def test_out_of_bounds_lookup():
    grid = CampusGrid.empty(5)
    assert not grid.in_bounds(5, 0)
    with pytest.raises(IndexError):
        grid.get_tile(-1, 0)


def test_neighbors_stay_on_grid():
    grid = CampusGrid.empty(5)
    assert len(grid.neighbors(0, 0)) == 2
    assert len(grid.neighbors(2, 2)) == 4


def test_tiles_are_row_major():
    grid = CampusGrid.empty(3)
    coords = [(t.x, t.y) for t in grid.tiles()]
    assert coords[:4] == [(0, 0), (1, 0), (2, 0), (0, 1)]


def test_clearing_keeps_rotation():
    tile = Tile(0, 0).with_building(BuildingType.STUDENT_DORM, rotation=5)
    assert tile.rotation == 1
    cleared = tile.cleared()
    assert cleared.empty
    assert cleared.rotation == 1
    assert cleared.variant == 0
