from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .constants import VISIT_TICKS, BuildingType, VisitorState
from .events import relevant_buildings
from .map import CampusGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Visitor:
    """A notable alum walking the campus during a scripted event."""

    x: int
    y: int
    target_x: int
    target_y: int
    state: VisitorState = VisitorState.WALKING
    timer: int = 0
    visited: Tuple[BuildingType, ...] = ()
    chats_completed: int = 0
    photos_generated: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def arrived(self) -> bool:
        return self.x == self.target_x and self.y == self.target_y

    def step_toward(self) -> "Visitor":
        """Move one tile along the axis with the larger remaining distance.

        Arriving switches the visitor to visiting the building underfoot.
        """
        dx = self.target_x - self.x
        dy = self.target_y - self.y
        x, y = self.x, self.y
        if abs(dx) > abs(dy):
            x += 1 if dx > 0 else -1
        elif dy != 0:
            y += 1 if dy > 0 else -1
        moved = replace(self, x=x, y=y)
        if moved.arrived:
            moved = replace(moved, state=VisitorState.VISITING_BUILDING, timer=VISIT_TICKS)
        return moved

    def record_visit(self, building: BuildingType) -> "Visitor":
        if building in self.visited:
            return self
        return replace(self, visited=self.visited + (building,))


def spawn_visitor(grid: CampusGrid) -> Visitor:
    """Create a visitor standing on the centerpiece, targeting itself."""
    x, y = grid.center
    return Visitor(x=x, y=y, target_x=x, target_y=y)


def select_target(
    visitor: Visitor, event_id: str, grid: CampusGrid
) -> Optional[Tuple[int, int]]:
    """Nearest unvisited tile relevant to the visitor's discipline.

    Distance is Manhattan; ties go to the first tile in row-major order.
    """
    relevant = relevant_buildings(event_id)
    best: Optional[Tuple[int, int]] = None
    best_dist = 0
    for tile in grid.tiles():
        if tile.building not in relevant or tile.building in visitor.visited:
            continue
        dist = abs(tile.x - visitor.x) + abs(tile.y - visitor.y)
        if best is None or dist < best_dist:
            best = (tile.x, tile.y)
            best_dist = dist
    return best
