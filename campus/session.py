from __future__ import annotations

import logging
import random
import time
from typing import List, Optional, Sequence, Tuple

from .blueprints import BLUEPRINTS, blueprint_for
from .constants import NEWS_FEED_SIZE, TICK_INTERVAL, BuildingType, Color, GameMode
from .game import (
    WELCOME,
    Outcome,
    VisitIncome,
    apply_tick,
    claim_mission_reward,
    clear_tile,
    place_building,
    reset_focus,
    start_mode,
    tick_focus_clock,
    toggle_focus,
)
from .map import CampusGrid
from .modifiers import ModifierHook
from .narrative import Notification
from .renderer import Renderer

logger = logging.getLogger(__name__)

# Chance per tick that a wandering student reaches some building
STUDENT_ARRIVAL_CHANCE = 0.1
MIN_STUDENTS = 20
MAX_STUDENTS = 300

# Buildings the player can pick from, in catalog order
BUILD_MENU: Tuple[BuildingType, ...] = tuple(
    b for b in BuildingType if b in BLUEPRINTS and BLUEPRINTS[b].placeable
)

CURSOR_MOVES = {"w": (0, -1), "a": (-1, 0), "s": (0, 1), "d": (1, 0)}


def student_visits(grid: CampusGrid, rng: random.Random) -> List[VisitIncome]:
    """Income from the student crowd wandering between buildings.

    The crowd scales with the number of walkable buildings; each student who
    arrives somewhere that earns money produces one ``VisitIncome``.
    """
    walkable = [
        t for t in grid.tiles()
        if not t.empty and blueprint_for(t.building).color is not Color.GREENERY
    ]
    if not walkable:
        return []
    crowd = min(max(len(walkable) * 2, MIN_STUDENTS), MAX_STUDENTS)
    visits: List[VisitIncome] = []
    for _ in range(crowd):
        if rng.random() >= STUDENT_ARRIVAL_CHANCE:
            continue
        tile = rng.choice(walkable)
        income = blueprint_for(tile.building).income_gen
        if income > 0:
            visits.append(VisitIncome(tile.building, income))
    return visits


def describe(note: Notification) -> str:
    if note.sender:
        return f"{note.sender}: {note.text}"
    return note.text


class Session:
    """Owns one campaign and drives it from wall-clock timers."""

    def __init__(
        self,
        mode: GameMode = GameMode.STANDARD,
        seed: int | None = None,
        renderer: Optional[Renderer] = None,
        hooks: Sequence[ModifierHook] = (),
    ) -> None:
        self.rng = random.Random(seed)
        self.state = start_mode(mode, self.rng)
        self.renderer = renderer
        self.hooks = tuple(hooks)
        self.pending: List[VisitIncome] = []
        self.event_log: List[str] = []
        # (due time, notification) for quotes that arrive after a pause
        self.delayed: List[Tuple[float, Notification]] = []
        self.running = False
        self.paused = False
        self.cursor = self.state.grid.center
        self.selected = 0
        self.deliver([WELCOME[mode]])

    def log_event(self, text: str) -> None:
        """Record a short message for the news feed."""
        self.event_log.append(text)
        if len(self.event_log) > NEWS_FEED_SIZE:
            self.event_log.pop(0)

    def deliver(self, notes: Sequence[Notification], now: float | None = None) -> None:
        """Show ``notes`` now, or queue the delayed ones when running live."""
        for note in notes:
            if note.delay and now is not None:
                self.delayed.append((now + note.delay, note))
                continue
            logger.info("[%s] %s", note.channel.name.lower(), describe(note))
            self.log_event(describe(note))

    def _flush_delayed(self, now: float) -> None:
        due = [n for at, n in self.delayed if at <= now]
        self.delayed = [(at, n) for at, n in self.delayed if at > now]
        self.deliver(due)

    def record_visit(self, building: BuildingType, amount: float) -> None:
        self.pending.append(VisitIncome(building, amount))

    # --- Actions -------------------------------------------------------
    def _apply(self, outcome: Outcome, now: float | None = None) -> Outcome:
        self.state = outcome.state
        if outcome.error is not None:
            self.log_event(outcome.error.message)
        self.deliver(outcome.notifications, now)
        return outcome

    def place(
        self, x: int, y: int, building: BuildingType, rotation: int = 0
    ) -> Outcome:
        return self._apply(place_building(self.state, x, y, building, rotation))

    def clear(self, x: int, y: int) -> Outcome:
        return self._apply(clear_tile(self.state, x, y))

    def claim(self) -> Outcome:
        return self._apply(claim_mission_reward(self.state))

    @property
    def selected_building(self) -> BuildingType:
        return BUILD_MENU[self.selected]

    def move_cursor(self, dx: int, dy: int) -> None:
        size = self.state.grid.size
        x, y = self.cursor
        self.cursor = (min(max(x + dx, 0), size - 1), min(max(y + dy, 0), size - 1))

    def cursor_line(self) -> str:
        bp = blueprint_for(self.selected_building)
        x, y = self.cursor
        return f"Cursor {x},{y} Build: {bp.name} ${bp.cost:,} (wasd [ ] b x)"

    def handle_key(self, key: str) -> None:
        key = key.lower()
        if key in CURSOR_MOVES:
            self.move_cursor(*CURSOR_MOVES[key])
        elif key == "[":
            self.selected = (self.selected - 1) % len(BUILD_MENU)
        elif key == "]":
            self.selected = (self.selected + 1) % len(BUILD_MENU)
        elif key == "b":
            self.place(*self.cursor, self.selected_building)
        elif key == "x":
            self.clear(*self.cursor)
        elif key == "q":
            self.running = False
        elif key == "p":
            self.paused = not self.paused
        elif key == "c":
            self.claim()
        elif key == "f" and self.state.mode is GameMode.FOCUS:
            self.state = toggle_focus(self.state)
        elif key == "r" and self.state.mode is GameMode.FOCUS:
            self.state = reset_focus(self.state)

    # --- Timers --------------------------------------------------------
    def tick(self, now: float | None = None) -> List[Notification]:
        """Run one simulation day with the visits collected since the last."""
        self.pending.extend(student_visits(self.state.grid, self.rng))
        visits, self.pending = self.pending, []
        self.state, notes = apply_tick(self.state, self.rng, visits, self.hooks)
        self.deliver(notes, now)
        return notes

    def clock_second(self, now: float | None = None) -> None:
        self.state, notes = tick_focus_clock(self.state)
        self.deliver(notes, now)

    def run_headless(self, ticks: int) -> None:
        for _ in range(ticks):
            self.tick()
        stats = self.state.stats
        logger.info(
            "Stopped on day %d with $%.0f (won=%s lost=%s)",
            stats.day,
            stats.money,
            stats.game_won,
            stats.game_lost,
        )

    def run(self) -> None:
        """Run the interactive loop until quit."""
        assert self.renderer is not None
        self.running = True
        term = self.renderer.term
        with term.cbreak(), term.hidden_cursor():
            now = time.perf_counter()
            next_tick = now + TICK_INTERVAL
            next_second = now + 1.0
            while self.running:
                key = term.inkey(timeout=0.05)
                if key:
                    self.handle_key(str(key))
                now = time.perf_counter()
                if not self.paused:
                    while now >= next_second:
                        self.clock_second(now)
                        next_second += 1.0
                    while now >= next_tick:
                        self.tick(now)
                        next_tick += TICK_INTERVAL
                else:
                    next_tick = now + TICK_INTERVAL
                    next_second = now + 1.0
                self._flush_delayed(now)
                self.renderer.render_game(self.state, [self.cursor_line(), *self.event_log])
