"""Year-indexed alumni visits: triggering, the visitor walk and departure.

Each function takes a :class:`GameState` and returns the next one together
with the notifications it produced; nothing here mutates its input.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from typing import List, Tuple

from .constants import (
    CHAT_CHANCE,
    CHAT_TICKS,
    CHATBOARD_SIZE,
    GUEST_LECTURE_BUZZ_THRESHOLD,
    GUEST_LECTURE_DAYS,
    GUEST_LECTURE_MAGNITUDE,
    MAX_BUZZ,
    PHOTO_CHANCE,
    QUOTE_DELAY,
    BuildingType,
    Channel,
    Tone,
    VisitorState,
)
from .events import ALUMNI_EVENTS, AlumniEvent, EventTier, event_by_id, unlocks_crossed
from .narrative import Notification, chat_interaction, chatboard_message, news, photo_moment
from .state import GameState, GuestLectureBonus, LegacyEnergyRecord
from .visitor import Visitor, select_target, spawn_visitor

logger = logging.getLogger(__name__)

Step = Tuple[GameState, List[Notification]]


def legacy_energy(visitor: Visitor, tier: EventTier) -> int:
    """Energy a departing visitor leaves behind, scaled by event tier."""
    raw = (
        10 * len(visitor.visited)
        + 5 * visitor.chats_completed
        + 3 * visitor.photos_generated
    )
    return math.floor(raw * tier.legacy_multiplier)


# --- Trigger ---------------------------------------------------------------


def check_trigger(
    state: GameState, catalog: Tuple[AlumniEvent, ...] = ALUMNI_EVENTS
) -> Step:
    """Fire the first unfired event scheduled for the current year."""
    year = state.year
    event = next(
        (e for e in catalog if e.trigger_year == year and e.id not in state.fired_events),
        None,
    )
    if event is None:
        return state, []

    logger.info("Year %d: %s visits campus (%s)", year, event.name, event.id)
    notes = [
        news(f"{event.name} is visiting campus! {event.milestone}", Tone.POSITIVE),
        Notification(
            Channel.TEA,
            f'"{event.quote}"',
            Tone.POSITIVE,
            sender=event.name,
            delay=QUOTE_DELAY,
        ),
    ]
    state = replace(state, fired_events=state.fired_events + (event.id,))
    if state.visitor is None:
        state = replace(state, active_event=event.id, visitor=spawn_visitor(state.grid))
    else:
        logger.debug("Visitor already on campus; %s arrives without a tour", event.id)
    return state, notes


# --- Visitor ---------------------------------------------------------------


def _building_under(state: GameState, visitor: Visitor) -> BuildingType:
    return state.grid.get_tile(visitor.x, visitor.y).building


def _chat(state: GameState, rng: random.Random, event: AlumniEvent) -> Step:
    visitor = state.visitor
    assert visitor is not None
    notes: List[Notification] = []
    buzz = state.buzz
    here = _building_under(state, visitor)

    if rng.random() < CHAT_CHANCE:
        notes.append(chat_interaction(rng, event.name, here))
        visitor = replace(visitor, chats_completed=visitor.chats_completed + 1)
    if rng.random() < PHOTO_CHANCE:
        text, gain = photo_moment(rng, event.name, here)
        buzz = min(MAX_BUZZ, buzz + gain * event.effective_tier.legacy_multiplier)
        notes.append(Notification(Channel.TEA, text, Tone.POSITIVE, sender="Campus Buzz"))
        visitor = replace(visitor, photos_generated=visitor.photos_generated + 1)

    visitor = replace(visitor, timer=visitor.timer - 1)
    if visitor.timer <= 0:
        visitor = replace(visitor, state=VisitorState.LEAVING)
    return replace(state, visitor=visitor, buzz=buzz), notes


def step_visitor(
    state: GameState, rng: random.Random, catalog: Tuple[AlumniEvent, ...] = ALUMNI_EVENTS
) -> Step:
    """Advance the active visitor by one tick."""
    visitor = state.visitor
    if visitor is None:
        return state, []
    if state.active_event is None:
        return replace(state, visitor=None), []
    event = event_by_id(state.active_event, catalog)

    if visitor.state is VisitorState.WALKING:
        visitor = visitor.step_toward()
        if visitor.state is VisitorState.VISITING_BUILDING:
            logger.debug("%s reached %s", event.name, visitor.position)
        return replace(state, visitor=visitor), []

    if visitor.state is VisitorState.VISITING_BUILDING:
        visitor = replace(visitor, timer=visitor.timer - 1)
        if visitor.timer <= 0:
            here = _building_under(state, visitor)
            if here is not BuildingType.NONE:
                visitor = visitor.record_visit(here)
            target = select_target(visitor, event.id, state.grid)
            if target is not None:
                visitor = replace(
                    visitor,
                    state=VisitorState.WALKING,
                    target_x=target[0],
                    target_y=target[1],
                )
                logger.debug("%s heading to %s", event.name, target)
            else:
                visitor = replace(visitor, state=VisitorState.CHATTING, timer=CHAT_TICKS)
                logger.debug("%s is chatting with students", event.name)
        return replace(state, visitor=visitor), []

    if visitor.state is VisitorState.CHATTING:
        state, notes = _chat(state, rng, event)
        assert state.visitor is not None
        if state.visitor.state is VisitorState.LEAVING:
            state, departure = depart(state, rng, event)
            notes.extend(departure)
        return state, notes

    # LEAVING visitors never outlive the tick that produced them
    return replace(state, visitor=None, active_event=None), []


# --- Departure -------------------------------------------------------------


def depart(state: GameState, rng: random.Random, event: AlumniEvent) -> Step:
    """Score the visit, pay out, post to the chatboard and clear the visitor."""
    visitor = state.visitor
    assert visitor is not None
    tier = event.effective_tier
    notes: List[Notification] = []
    stats = state.stats

    energy = legacy_energy(visitor, tier)
    previous = state.legacy_energy
    crossed = unlocks_crossed(previous, previous + energy)
    ledger = state.ledger + (
        LegacyEnergyRecord(energy, event.id, tuple(label for _, label in crossed)),
    )
    for threshold, label in crossed:
        logger.info("Legacy energy passed %d: %s", threshold, label)
        notes.append(news(f"Breakthrough! {label}", Tone.POSITIVE))

    if event.donation:
        if state.buzz >= tier.buzz_threshold:
            stats = replace(stats, money=stats.money + event.donation)
            logger.info("%s donated %d", event.name, event.donation)
            notes.append(
                news(
                    f"{event.name} donated ${event.donation:,} "
                    f"({tier.description})!",
                    Tone.POSITIVE,
                )
            )
        else:
            notes.append(
                news(
                    f"{event.name} left without donating: campus buzz "
                    f"{state.buzz:.0f} of {tier.buzz_threshold} needed.",
                    Tone.NEGATIVE,
                )
            )

    guest_lecture = state.guest_lecture
    if state.buzz >= GUEST_LECTURE_BUZZ_THRESHOLD:
        guest_lecture = GuestLectureBonus(
            active=True,
            expiry_day=stats.day + GUEST_LECTURE_DAYS,
            magnitude=GUEST_LECTURE_MAGNITUDE,
        )
        notes.append(
            news(f"{event.name} agreed to a guest lecture series this week!", Tone.POSITIVE)
        )

    message = chatboard_message(rng, event.name, event.id, stats.day)
    chatboard = (state.chatboard + (message,))[-CHATBOARD_SIZE:]

    notes.append(Notification(Channel.CHATBOARD, message.text, sender=message.author))
    notes.append(news(f"{event.name} posted a message to the chatboard."))
    notes.append(
        news(f"{event.name} departs. Legacy energy +{energy}.", Tone.POSITIVE)
    )
    logger.info("%s departed with %d legacy energy", event.name, energy)

    return (
        replace(
            state,
            stats=stats,
            ledger=ledger,
            guest_lecture=guest_lecture,
            chatboard=chatboard,
            visitor=None,
            active_event=None,
        ),
        notes,
    )


def expire_guest_lecture(state: GameState) -> GameState:
    lecture = state.guest_lecture
    if lecture.active and state.stats.day >= lecture.expiry_day:
        logger.debug("Guest lecture series ended on day %d", state.stats.day)
        return replace(state, guest_lecture=replace(lecture, active=False, magnitude=0))
    return state


def run_scripted_events(
    state: GameState, rng: random.Random, catalog: Tuple[AlumniEvent, ...] = ALUMNI_EVENTS
) -> Step:
    """Advance any visitor already on campus, then check for a new event."""
    state, notes = step_visitor(state, rng, catalog)
    state, fired = check_trigger(state, catalog)
    return state, notes + fired
