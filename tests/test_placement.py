from dataclasses import replace

from campus.constants import BuildingType, GameMode, TimerMode, Tone
from campus.errors import (
    BuildingLocked,
    ClearError,
    InsufficientFunds,
    MissionNotCompleted,
    NoActiveMission,
    NotPlaceable,
    PlacementError,
    TileEmpty,
    TileOccupied,
    TileOutOfBounds,
    TileProtected,
)
from campus.focus import FocusTimer
from campus.game import claim_mission_reward, clear_tile, place_building


def test_place_debits_cost(make_state):
    state = make_state(day=200)
    outcome = place_building(state, 5, 5, BuildingType.COUPA_CAFE, rotation=2)
    assert outcome.ok
    assert outcome.state.stats.money == 10_000
    tile = outcome.state.grid.get_tile(5, 5)
    assert tile.building is BuildingType.COUPA_CAFE
    assert tile.variant == 0
    assert tile.rotation == 2
    # The input state is untouched
    assert state.grid.get_tile(5, 5).empty


def test_locked_building_rejected(make_state):
    state = make_state(day=0)
    outcome = place_building(state, 5, 5, BuildingType.COUPA_CAFE)
    assert outcome.error == BuildingLocked(180)
    assert outcome.state is state


def test_insufficient_funds(make_state):
    state = make_state()
    outcome = place_building(state, 5, 5, BuildingType.STUDENT_DORM)
    assert outcome.error == InsufficientFunds(50_000, 25_000)
    assert isinstance(outcome.error, PlacementError)
    assert "50,000" in outcome.error.message
    assert outcome.state is state


def test_occupied_protected_and_bounds(make_state, put):
    state = put(make_state(), 1, 1, BuildingType.PATH)
    cx, cy = state.grid.center
    assert place_building(state, 1, 1, BuildingType.PATH).error == TileOccupied()
    assert place_building(state, cx, cy, BuildingType.PATH).error == TileProtected()
    assert place_building(state, 60, 0, BuildingType.PATH).error == TileOutOfBounds()


def test_grown_stages_are_not_placeable(make_state):
    outcome = place_building(make_state(), 2, 2, BuildingType.OAK_SAPLING)
    assert outcome.error == NotPlaceable()


def test_empty_building_is_not_placeable(make_state):
    state = make_state()
    outcome = place_building(state, 1, 1, BuildingType.NONE)
    assert outcome.error == NotPlaceable()
    assert outcome.state is state


def test_creative_ignores_cost_and_unlocks(make_state):
    state = make_state(GameMode.CREATIVE, money=0)
    outcome = place_building(state, 2, 2, BuildingType.ENGINEERING_QUAD)
    assert outcome.ok
    assert outcome.state.stats.money == 0


def test_clear_tile(make_state, put):
    state = put(make_state(), 3, 3, BuildingType.PATH)
    state = replace(
        state, grid=state.grid.with_tile(replace(state.grid.get_tile(3, 3), rotation=3))
    )
    outcome = clear_tile(state, 3, 3)
    assert outcome.ok
    tile = outcome.state.grid.get_tile(3, 3)
    assert tile.empty
    assert tile.rotation == 3


def test_clear_errors(make_state):
    state = make_state()
    cx, cy = state.grid.center
    assert clear_tile(state, 0, 0).error == TileEmpty()
    assert clear_tile(state, cx, cy).error == TileProtected()
    assert isinstance(clear_tile(state, -1, 0).error, ClearError)


def test_placing_breaks_focus(make_state):
    state = make_state(GameMode.FOCUS)
    state = replace(state, timer=FocusTimer(TimerMode.FOCUS, 100))
    outcome = place_building(state, 1, 1, BuildingType.PATH)
    assert outcome.ok
    assert outcome.state.timer == FocusTimer()
    assert [n.tone for n in outcome.notifications] == [Tone.NEGATIVE]


def test_clearing_keeps_focus(make_state, put):
    state = put(make_state(GameMode.FOCUS), 1, 1, BuildingType.PATH)
    state = replace(state, timer=FocusTimer(TimerMode.FOCUS, 100))
    outcome = clear_tile(state, 1, 1)
    assert outcome.state.timer.time_left == 100


def test_claim_requires_completed_mission(make_state):
    assert claim_mission_reward(make_state(GameMode.CREATIVE)).error == NoActiveMission()
    assert claim_mission_reward(make_state()).error == MissionNotCompleted()


def test_claim_pays_and_frees_slot(make_state):
    state = make_state()
    state = replace(state, current_mission=replace(state.current_mission, completed=True))
    outcome = claim_mission_reward(state)
    assert outcome.ok
    assert outcome.state.stats.money == 25_000 + 50_000
    assert outcome.state.completed_missions == ("m1",)
    assert outcome.state.current_mission is None


def test_claim_while_focusing_resets_clock(make_state):
    state = make_state(GameMode.FOCUS)
    state = replace(
        state,
        current_mission=replace(state.current_mission, completed=True),
        timer=FocusTimer(TimerMode.FOCUS, 100),
    )
    outcome = claim_mission_reward(state)
    assert outcome.state.timer == FocusTimer()
    assert outcome.notifications[0].tone is Tone.NEGATIVE
