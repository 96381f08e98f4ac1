import random
from dataclasses import replace

import pytest

from campus.constants import CENTERPIECE, GameMode
from campus.map import CampusGrid
from campus.missions import next_mission
from campus.state import GameState
from campus.tile import Tile


class StubRandom:
    """Random source that replays ``values`` from ``random()`` in a loop.

    ``choice`` always picks the first element so template selection is
    predictable.
    """

    def __init__(self, *values: float) -> None:
        self.values = list(values) or [0.5]
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def quiet():
    """No chats, photos or ambient news; seeds grow every tick."""
    return StubRandom(0.99)


@pytest.fixture
def make_state():
    """Build a state on an empty campus with only the centerpiece placed."""

    def _make(mode=GameMode.STANDARD, **stats):
        grid = CampusGrid.empty()
        cx, cy = grid.center
        grid = grid.with_tile(Tile(cx, cy, CENTERPIECE, 100))
        state = GameState(grid=grid, mode=mode)
        if mode is not GameMode.CREATIVE:
            state = replace(state, current_mission=next_mission(()))
        if stats:
            state = replace(state, stats=replace(state.stats, **stats))
        return state

    return _make


@pytest.fixture
def put():
    """Write a building straight onto the grid, bypassing placement rules."""

    def _put(state, x, y, building, variant=0):
        tile = Tile(x, y, building, variant)
        return replace(state, grid=state.grid.with_tile(tile))

    return _put


@pytest.fixture
def stub():
    return StubRandom
