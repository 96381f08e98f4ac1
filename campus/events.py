"""Catalog of alumni visits and the tables that score them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

from .constants import (
    CENTERPIECE,
    DEFAULT_EVENT_TIER,
    BuildingType,
    SchoolType,
    StatCategory,
)


@dataclass(frozen=True)
class EventTier:
    tier: int
    donation: int
    # Minimum campus buzz for the donation to land
    buzz_threshold: int
    legacy_multiplier: float
    description: str


EVENT_TIERS: Dict[int, EventTier] = {
    1: EventTier(1, 100_000_000, 80, 2.0, "Transformational Impact"),
    2: EventTier(2, 25_000_000, 60, 1.5, "Major Contribution"),
    3: EventTier(3, 5_000_000, 40, 1.0, "Significant Gift"),
}

# Cumulative legacy energy -> breakthrough unlocked on crossing it
LEGACY_ENERGY_UNLOCKS: Dict[int, str] = {
    25: "Quantum Computing Lab Unlocked",
    50: "AI Research Center Unlocked",
    75: "Biotech Innovation Hub Unlocked",
    100: "Fusion Energy Breakthrough",
    150: "Nanotechnology Institute Unlocked",
    200: "Space Technology Research Center",
    300: "Advanced Materials Lab Unlocked",
    500: "Nobel Prize Research Milestone",
}


@dataclass(frozen=True)
class AlumniEvent:
    """A one-shot visit by a notable alum, keyed by campaign year."""

    id: str
    trigger_year: int
    historical_year: int
    name: str
    milestone: str
    article: str
    quote: str
    tier: Optional[int] = None
    donation: Optional[int] = None
    # Permanent bonuses carried for presentation; not applied by the engine
    bonuses: Dict[StatCategory, float] = field(default_factory=dict)
    growth_modifiers: Dict[SchoolType, float] = field(default_factory=dict)

    @property
    def effective_tier(self) -> EventTier:
        return EVENT_TIERS[self.tier or DEFAULT_EVENT_TIER]


ALUMNI_EVENTS: Tuple[AlumniEvent, ...] = (
    AlumniEvent(
        id="hp_engineering_quad",
        trigger_year=1,
        historical_year=1950,
        name="Hewlett & Packard",
        milestone="The garage that started the Valley",
        article="Two engineering grads return to fund labs for the next generation.",
        quote="Start small, and let the engineering speak for itself.",
        tier=1,
        donation=100_000_000,
        bonuses={StatCategory.INNOVATION: 0.1},
        growth_modifiers={SchoolType.ENGINEERING: 0.1},
    ),
    AlumniEvent(
        id="trader_joes",
        trigger_year=2,
        historical_year=1957,
        name="Joe Coulombe",
        milestone="A grocery store for the over-educated and underpaid",
        article="The GSB alum behind a beloved grocery chain drops by.",
        quote="Know exactly who your customer is.",
        tier=3,
        donation=5_000_000,
        bonuses={StatCategory.CULTURE: 0.05},
    ),
    AlumniEvent(
        id="nike_knight",
        trigger_year=3,
        historical_year=1965,
        name="Phil Knight",
        milestone="A term paper becomes a shoe company",
        article="The track alum who sold shoes from a car trunk tours the fields.",
        quote="Keep running. The finish line is a moving target.",
        tier=2,
        donation=25_000_000,
        growth_modifiers={SchoolType.BUSINESS: 0.05},
    ),
    AlumniEvent(
        id="sun_microsystems",
        trigger_year=4,
        historical_year=1972,
        name="Andy Bechtolsheim",
        milestone="Stanford University Network workstations",
        article="A workstation pioneer visits the labs where it began.",
        quote="The network is the computer.",
        tier=3,
        donation=5_000_000,
    ),
    AlumniEvent(
        id="cisco_systems",
        trigger_year=5,
        historical_year=1980,
        name="Bosack & Lerner",
        milestone="Routers born from connecting campus buildings",
        article="The couple who linked two campus networks comes home.",
        quote="Every problem looks like a networking problem if you squint.",
    ),
    AlumniEvent(
        id="yahoo_jerry_david",
        trigger_year=6,
        historical_year=1987,
        name="Jerry Yang & David Filo",
        milestone="A guide to the web from a campus trailer",
        article="The founders of an early web directory revisit their trailer.",
        quote="We just wanted to keep track of our favourite sites.",
        tier=2,
        donation=25_000_000,
    ),
    AlumniEvent(
        id="google_larry_sergey",
        trigger_year=7,
        historical_year=1995,
        name="Larry Page & Sergey Brin",
        milestone="BackRub becomes a verb",
        article="Two PhD students who indexed the web are back on campus.",
        quote="Aim for the things that seem a little bit crazy.",
        tier=1,
        donation=100_000_000,
        bonuses={StatCategory.RESEARCH: 0.1},
    ),
    AlumniEvent(
        id="linkedin_hoffman",
        trigger_year=8,
        historical_year=2002,
        name="Reid Hoffman",
        milestone="Professional networks go online",
        article="A symbolic-systems alum talks networks with business students.",
        quote="Your network is the people who want to help you.",
        tier=2,
        donation=25_000_000,
    ),
    AlumniEvent(
        id="instagram_systrom",
        trigger_year=9,
        historical_year=2010,
        name="Kevin Systrom",
        milestone="Square photos for everyone",
        article="A Mayfield Fellow drops by the d.school with a camera.",
        quote="Do one thing really, really well.",
        tier=3,
        donation=5_000_000,
    ),
    AlumniEvent(
        id="nvidia_huang",
        trigger_year=10,
        historical_year=2017,
        name="Jensen Huang",
        milestone="Accelerated computing powers the AI era",
        article="An EE alum visits the engineering labs that now run on GPUs.",
        quote="Go where the problems are hard and the market does not exist yet.",
        tier=1,
        donation=100_000_000,
        bonuses={StatCategory.INNOVATION: 0.15},
    ),
)

# Event id -> building types matching the visitor's discipline
DISCIPLINE_BUILDINGS: Dict[str, FrozenSet[BuildingType]] = {
    "hp_engineering_quad": frozenset(
        {BuildingType.ENGINEERING_QUAD, BuildingType.LECTURE_HALL}
    ),
    "nike_knight": frozenset({BuildingType.TRACK_FIELD, BuildingType.FOOTBALL_FIELD}),
    "trader_joes": frozenset({BuildingType.TRADER_JOES, BuildingType.COUPA_CAFE}),
    "sun_microsystems": frozenset({BuildingType.ENGINEERING_QUAD}),
    "cisco_systems": frozenset({BuildingType.ENGINEERING_QUAD}),
    "yahoo_jerry_david": frozenset(
        {BuildingType.ENGINEERING_QUAD, BuildingType.LECTURE_HALL}
    ),
    "google_larry_sergey": frozenset({BuildingType.ENGINEERING_QUAD}),
    "netflix_hastings": frozenset({BuildingType.ARRILLAGA_HALL}),
    "paypal_thiel": frozenset({BuildingType.ARRILLAGA_HALL}),
    "linkedin_hoffman": frozenset({BuildingType.ARRILLAGA_HALL}),
    "tesla_musk": frozenset({BuildingType.ENGINEERING_QUAD}),
    "youtube_jawed": frozenset({BuildingType.ENGINEERING_QUAD}),
    "instagram_systrom": frozenset(
        {BuildingType.D_SCHOOL, BuildingType.ARRILLAGA_HALL}
    ),
    "snapchat_spiegel": frozenset({BuildingType.D_SCHOOL}),
    "stripe_collison": frozenset({BuildingType.ENGINEERING_QUAD}),
    "openai_altman": frozenset({BuildingType.ENGINEERING_QUAD}),
    "nvidia_huang": frozenset({BuildingType.ENGINEERING_QUAD}),
    "dschool_kelley": frozenset({BuildingType.D_SCHOOL}),
}


def relevant_buildings(event_id: str) -> FrozenSet[BuildingType]:
    """Buildings a visitor for ``event_id`` wants to see."""
    relevant = DISCIPLINE_BUILDINGS.get(event_id)
    if not relevant:
        return frozenset({CENTERPIECE})
    return relevant


def event_by_id(event_id: str, catalog: Tuple[AlumniEvent, ...] = ALUMNI_EVENTS) -> AlumniEvent:
    for event in catalog:
        if event.id == event_id:
            return event
    raise KeyError(event_id)


def unlocks_crossed(previous: float, current: float) -> Tuple[Tuple[int, str], ...]:
    """Thresholds with ``previous < threshold <= current``, ascending."""
    return tuple(
        (threshold, LEGACY_ENERGY_UNLOCKS[threshold])
        for threshold in sorted(LEGACY_ENERGY_UNLOCKS)
        if previous < threshold <= current
    )
