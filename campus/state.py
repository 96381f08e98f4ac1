from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .constants import DAYS_PER_YEAR, INITIAL_MONEY, GameMode, SchoolType, StatCategory
from .focus import FocusTimer
from .map import CampusGrid
from .missions import Mission
from .narrative import ChatboardMessage
from .visitor import Visitor


def _opening_metrics() -> Dict[StatCategory, float]:
    metrics: Dict[StatCategory, float] = {stat: 0 for stat in StatCategory}
    # Mirrors the opening wellbeing until the first tick recomputes it
    metrics[StatCategory.WELLBEING] = 100
    return metrics


def _zero_schools() -> Dict[SchoolType, float]:
    return {school: 0 for school in SchoolType}


@dataclass(frozen=True)
class CampaignStats:
    money: float = INITIAL_MONEY
    # Nature score: the sum of pop_gen over every placed tile
    population: float = 0
    day: int = 0
    wellbeing: float = 100
    health_penalty: float = 0
    game_won: bool = False
    game_lost: bool = False
    campaign_active: bool = True
    metrics: Dict[StatCategory, float] = field(default_factory=_opening_metrics)
    schools: Dict[SchoolType, float] = field(default_factory=_zero_schools)


@dataclass(frozen=True)
class LegacyEnergyRecord:
    amount: int
    source: str
    unlocks: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GuestLectureBonus:
    active: bool = False
    expiry_day: int = 0
    magnitude: int = 0


@dataclass(frozen=True)
class GameState:
    """The whole world between two ticks."""

    grid: CampusGrid
    stats: CampaignStats = field(default_factory=CampaignStats)
    mode: GameMode = GameMode.STANDARD
    timer: FocusTimer = field(default_factory=FocusTimer)
    current_mission: Optional[Mission] = None
    completed_missions: Tuple[str, ...] = ()
    fired_events: Tuple[str, ...] = ()
    active_event: Optional[str] = None
    visitor: Optional[Visitor] = None
    buzz: float = 0
    ledger: Tuple[LegacyEnergyRecord, ...] = ()
    guest_lecture: GuestLectureBonus = field(default_factory=GuestLectureBonus)
    chatboard: Tuple[ChatboardMessage, ...] = ()

    @property
    def legacy_energy(self) -> int:
        return sum(record.amount for record in self.ledger)

    @property
    def year(self) -> int:
        return self.stats.day // DAYS_PER_YEAR + 1
