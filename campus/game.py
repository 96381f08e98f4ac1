# Tick orchestration and player actions
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .blueprints import blueprint_for
from .constants import (
    AMBIENT_NEWS_CHANCE,
    CAMPAIGN_GOAL,
    CENTERPIECE,
    FOCUS_COMPLETION_BONUS,
    MAX_CAMPAIGN_TICKS,
    BuildingType,
    GameMode,
    Tone,
)
from .economy import compute_income
from .errors import (
    ActionError,
    BuildingLocked,
    InsufficientFunds,
    MissionNotCompleted,
    NoActiveMission,
    NotPlaceable,
    TileEmpty,
    TileOccupied,
    TileOutOfBounds,
    TileProtected,
)
from .events import ALUMNI_EVENTS, AlumniEvent
from .focus import FocusTimer, focus_completion_notifications
from .growth import advance_growth
from .map import create_initial_grid
from .metrics import compute_metrics
from .missions import is_met, next_mission
from .modifiers import ModifierHook, collect
from .narrative import Notification, local_news, news
from .scripted import expire_guest_lecture, run_scripted_events
from .state import CampaignStats, GameState
from .wellbeing import compute_wellbeing, final_wellbeing, step_health_penalty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisitIncome:
    """Money brought in by a student visiting ``building`` since last tick."""

    building: BuildingType
    amount: float


@dataclass(frozen=True)
class Outcome:
    state: GameState
    error: Optional[ActionError] = None
    notifications: Tuple[Notification, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.error is None


WELCOME = {
    GameMode.CREATIVE: news(
        "Welcome to Creative Mode! Sandbox engaged. Unlocked all assets.",
        Tone.POSITIVE,
    ),
    GameMode.STANDARD: news(
        "Consultant: 'We have 10 years to reach $1 Billion. Get to work.'"
    ),
    GameMode.FOCUS: news(
        "Consultant: 'We have 10 years to reach $1 Billion. Get to work.'"
    ),
}

FOCUS_BROKEN = news("Focus streak broken! Timer reset.", Tone.NEGATIVE)
FOCUS_BROKEN_BY_CLAIM = news("Claiming rewards broke your focus streak!", Tone.NEGATIVE)


def start_mode(mode: GameMode, rng: random.Random | None = None) -> GameState:
    """Build the opening state for ``mode``."""
    rng = rng or random.Random()
    grid = create_initial_grid(rng)
    mission = None if mode is GameMode.CREATIVE else next_mission(())
    logger.info("Starting %s campaign", mode.value)
    return GameState(grid=grid, stats=CampaignStats(), mode=mode, current_mission=mission)


# --- Simulation tick -------------------------------------------------------


def _population(counts) -> float:
    return sum(blueprint_for(b).pop_gen * n for b, n in counts.items())


def apply_tick(
    state: GameState,
    rng: random.Random,
    input_events: Iterable[VisitIncome] = (),
    hooks: Sequence[ModifierHook] = (),
    catalog: Tuple[AlumniEvent, ...] = ALUMNI_EVENTS,
) -> Tuple[GameState, List[Notification]]:
    """Advance the world by one day.

    Every random decision is drawn from ``rng`` and nothing in ``state`` is
    mutated.  Returns the next state and the notifications it produced.
    """
    notes: List[Notification] = []
    creative = state.mode is GameMode.CREATIVE
    prev = state.stats

    grid, _ = advance_growth(state.grid, rng)
    counts = grid.building_counts()
    population = _population(counts)

    modifier = collect(hooks, state)
    penalty = step_health_penalty(prev.health_penalty, counts)
    wellbeing = final_wellbeing(
        compute_wellbeing(counts), penalty, modifier.wellbeing_offset
    )
    metrics, schools = compute_metrics(counts, wellbeing)

    pending = sum(event.amount for event in input_events)
    income = compute_income(
        state.mode, pending, wellbeing, population, state.timer, modifier
    )
    money = prev.money + income
    day = prev.day + 1

    won, lost, active = prev.game_won, prev.game_lost, prev.campaign_active
    if active and not creative:
        if money >= CAMPAIGN_GOAL:
            won, active = True, False
            logger.info("Campaign won on day %d", day)
            notes.append(news("CONGRATULATIONS! $1 BILLION REVENUE ACHIEVED!", Tone.POSITIVE))
        elif day >= MAX_CAMPAIGN_TICKS:
            lost, active = True, False
            logger.info("Campaign lost on day %d with $%.0f", day, money)
            notes.append(news("DEADLINE REACHED. Campaign Failed.", Tone.NEGATIVE))

    stats = CampaignStats(
        money=money,
        population=population,
        day=day,
        wellbeing=wellbeing,
        health_penalty=penalty,
        game_won=won,
        game_lost=lost,
        campaign_active=active,
        metrics=metrics,
        schools=schools,
    )
    state = replace(state, grid=grid, stats=stats)

    if not creative:
        state, scripted = run_scripted_events(state, rng, catalog)
        notes.extend(scripted)

    state = expire_guest_lecture(state)

    if not creative:
        state, mission_notes = _update_mission(state, counts)
        notes.extend(mission_notes)
        if rng.random() < AMBIENT_NEWS_CHANCE:
            notes.append(local_news(rng, state.stats.wellbeing))

    return state, notes


def _update_mission(state: GameState, counts) -> Tuple[GameState, List[Notification]]:
    notes: List[Notification] = []
    mission = state.current_mission
    if mission is not None and not mission.completed:
        stats = state.stats
        if is_met(
            mission,
            money=stats.money,
            population=stats.population,
            wellbeing=stats.wellbeing,
            counts=counts,
        ):
            mission = replace(mission, completed=True)
            logger.info("Mission %s complete", mission.id)
            notes.append(
                news(f"Mission complete: {mission.description} Claim your reward!", Tone.POSITIVE)
            )
            state = replace(state, current_mission=mission)
    if state.current_mission is None:
        upcoming = next_mission(state.completed_missions)
        if upcoming is not None:
            logger.debug("Dispensing mission %s", upcoming.id)
            state = replace(state, current_mission=upcoming)
    return state, notes


# --- Player actions --------------------------------------------------------


def _break_focus(state: GameState, note: Notification) -> Tuple[GameState, Tuple[Notification, ...]]:
    if state.mode is GameMode.FOCUS and state.timer.focusing:
        return replace(state, timer=FocusTimer()), (note,)
    return state, ()


def place_building(
    state: GameState, x: int, y: int, building: BuildingType, rotation: int = 0
) -> Outcome:
    """Place ``building`` on an empty tile, paying for it outside creative mode."""
    grid = state.grid
    if not grid.in_bounds(x, y):
        return Outcome(state, TileOutOfBounds())
    tile = grid.get_tile(x, y)
    if tile.building is CENTERPIECE:
        return Outcome(state, TileProtected())
    if not tile.empty:
        return Outcome(state, TileOccupied())

    if building is BuildingType.NONE:
        return Outcome(state, NotPlaceable())
    bp = blueprint_for(building)
    if not bp.placeable:
        return Outcome(state, NotPlaceable())
    stats = state.stats
    if state.mode is not GameMode.CREATIVE:
        if not bp.unlocked(stats.day):
            return Outcome(state, BuildingLocked(bp.unlock_day))
        if stats.money < bp.cost:
            return Outcome(state, InsufficientFunds(bp.cost, stats.money))
        stats = replace(stats, money=stats.money - bp.cost)

    grid = grid.with_tile(tile.with_building(building, rotation=rotation))
    logger.debug("Placed %s at %d,%d", bp.name, x, y)
    state, notes = _break_focus(replace(state, grid=grid, stats=stats), FOCUS_BROKEN)
    return Outcome(state, None, notes)


def clear_tile(state: GameState, x: int, y: int) -> Outcome:
    grid = state.grid
    if not grid.in_bounds(x, y):
        return Outcome(state, TileOutOfBounds())
    tile = grid.get_tile(x, y)
    if tile.building is CENTERPIECE:
        return Outcome(state, TileProtected())
    if tile.empty:
        return Outcome(state, TileEmpty())
    logger.debug("Cleared %s at %d,%d", tile.building.value, x, y)
    return Outcome(replace(state, grid=grid.with_tile(tile.cleared())))


def claim_mission_reward(state: GameState) -> Outcome:
    """Pay out the current mission and free the slot for the next one."""
    mission = state.current_mission
    if mission is None:
        return Outcome(state, NoActiveMission())
    if not mission.completed:
        return Outcome(state, MissionNotCompleted())

    state, broken = _break_focus(state, FOCUS_BROKEN_BY_CLAIM)
    stats = replace(state.stats, money=state.stats.money + mission.reward)
    state = replace(
        state,
        stats=stats,
        current_mission=None,
        completed_missions=state.completed_missions + (mission.id,),
    )
    logger.info("Claimed %s for %d", mission.id, mission.reward)
    claimed = news(f"Reward claimed: +${mission.reward:,}", Tone.POSITIVE)
    return Outcome(state, None, broken + (claimed,))


# --- Focus clock -----------------------------------------------------------


def toggle_focus(state: GameState) -> GameState:
    return replace(state, timer=state.timer.toggled())


def reset_focus(state: GameState) -> GameState:
    return replace(state, timer=FocusTimer())


def tick_focus_clock(state: GameState) -> Tuple[GameState, List[Notification]]:
    """Advance the focus clock by one second (focus mode only)."""
    if state.mode is not GameMode.FOCUS:
        return state, []
    timer, completed = state.timer.tick()
    state = replace(state, timer=timer)
    if not completed:
        return state, []
    logger.info("Focus session complete on day %d", state.stats.day)
    stats = replace(state.stats, money=state.stats.money + FOCUS_COMPLETION_BONUS)
    return replace(state, stats=stats), focus_completion_notifications()
