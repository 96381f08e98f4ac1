"""Rejections returned by the player actions.

These are values, not exceptions: every action hands back an ``Outcome``
whose ``error`` is one of the classes below, or ``None`` on success.
"""

from __future__ import annotations

from dataclasses import dataclass


class ActionError:
    message = "Action rejected"

    def __str__(self) -> str:
        return self.message


class PlacementError(ActionError):
    pass


class ClearError(ActionError):
    pass


class ClaimError(ActionError):
    pass


@dataclass(frozen=True)
class InsufficientFunds(PlacementError):
    cost: int
    money: float

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"Insufficient funds! Need ${self.cost:,}, have ${self.money:,.0f}."


@dataclass(frozen=True)
class BuildingLocked(PlacementError):
    unlock_day: int

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"Locked until day {self.unlock_day}."


@dataclass(frozen=True)
class TileOccupied(PlacementError):
    message = "That tile is already occupied."


@dataclass(frozen=True)
class NotPlaceable(PlacementError):
    message = "That can only grow, not be built."


@dataclass(frozen=True)
class TileProtected(PlacementError, ClearError):
    message = "Stanford is protected."


@dataclass(frozen=True)
class TileOutOfBounds(PlacementError, ClearError):
    message = "That tile is off the map."


@dataclass(frozen=True)
class TileEmpty(ClearError):
    message = "Nothing to clear there."


@dataclass(frozen=True)
class NoActiveMission(ClaimError):
    message = "No mission is active."


@dataclass(frozen=True)
class MissionNotCompleted(ClaimError):
    message = "The current mission is not complete yet."
