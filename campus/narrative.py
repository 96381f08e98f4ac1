"""Flavor text pools and the rules for picking from them.

The simulation decides *when* something is said and which pool it comes
from; the wording below is presentation content.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from .constants import PROTEST_WELLBEING, BuildingType, Channel, Tone


@dataclass(frozen=True)
class Notification:
    """A single item for the news feed, the tea feed or the chatboard."""

    channel: Channel
    text: str
    tone: Tone = Tone.NEUTRAL
    sender: Optional[str] = None
    # Seconds the presentation layer should wait before showing it
    delay: float = 0.0


@dataclass(frozen=True)
class ChatboardMessage:
    id: str
    author: str
    text: str
    day: int
    category: str


# --- Visitor chat ------------------------------------------------------

CHAT_CONTEXT: Dict[BuildingType, Tuple[str, ...]] = {
    BuildingType.ENGINEERING_QUAD: (
        "{name} is touring the Engineering labs!",
        "Just saw {name} reviewing student projects in Engineering",
        "{name} is discussing AI research with professors",
        "Engineering students are crowding around {name}!",
    ),
    BuildingType.LECTURE_HALL: (
        "{name} just gave an impromptu lecture!",
        "Students are taking notes as {name} speaks",
        "{name} is answering questions in the lecture hall",
        "The lecture hall is packed to see {name}!",
    ),
    BuildingType.D_SCHOOL: (
        "{name} is critiquing design prototypes at the d.school",
        "Design thinking session with {name} happening now!",
        "{name} loves the creative energy at d.school",
        "Students are pitching ideas to {name} at d.school",
    ),
    BuildingType.ARRILLAGA_HALL: (
        "{name} is networking with business students",
        "MBA students getting career advice from {name}",
        "{name} sharing entrepreneurship stories at Arrillaga",
        "Business school is buzzing with {name}'s visit",
    ),
    BuildingType.TRACK_FIELD: (
        "{name} is watching the track team practice!",
        "Athletes are starstruck seeing {name} at the track",
        "{name} is talking about discipline and performance",
        "Track team getting motivational talk from {name}!",
    ),
}

CHAT_FACULTY = (
    "Professor just invited {name} to guest lecture next quarter",
    "Faculty are discussing research collaboration with {name}",
    "{name} is meeting with department heads",
    "Dean is giving {name} a campus tour",
    "{name} and professors talking about industry partnerships",
)

CHAT_STUDENTS = (
    "Just saw {name} chatting with a CS student!",
    "{name} is giving career advice at the quad",
    "OMG {name} just took a selfie with me!",
    "{name} stopped by my research lab!",
    "Can't believe {name} is here on campus!",
    "{name} just shared startup tips with our class",
    "Spotted {name} at the library!",
    "{name} is so down to earth, wow",
    "Just got a LinkedIn connection from {name}!",
    "{name} signed my laptop!",
    "{name} is answering questions about their company",
    "Students are asking {name} for internship advice",
)

CHAT_SENDERS = (
    "Excited Student",
    "CS Major",
    "MBA Candidate",
    "PhD Student",
    "Undergrad",
    "Grad Student",
    "Research Assistant",
    "Engineering Student",
    "Design Student",
    "Freshman",
)

# --- Photos (text, buzz gained) ------------------------------------------

PHOTO_CONTEXT: Dict[BuildingType, Tuple[Tuple[str, int], ...]] = {
    BuildingType.ENGINEERING_QUAD: (
        ("{name} selfie with Engineering students goes viral!", 8),
        ("Epic photo: {name} in front of Engineering Quad!", 7),
        ("{name} posing with student robotics project!", 10),
    ),
    BuildingType.STANFORD: (
        ("Iconic: {name} at Stanford Memorial Church!", 12),
        ("{name} photo at the heart of Stanford trending!", 10),
    ),
    BuildingType.D_SCHOOL: (
        ("{name} design thinking photo session at d.school!", 9),
        ("Creative energy: {name} with d.school students!", 8),
    ),
    BuildingType.HOOVER_TOWER: (
        ("{name} at Hoover Tower - Stanford's most iconic shot!", 15),
        ("Legendary photo: {name} with Hoover Tower backdrop!", 12),
    ),
}

PHOTO_GENERAL = (
    ("{name} photo goes viral on campus social media!", 5),
    ("Students posting selfies with {name} everywhere!", 6),
    ("{name} Instagram story gets 10k likes!", 7),
    ("Campus buzz: {name} sighting trending!", 5),
    ("{name} TikTok moment breaks the internet!", 10),
    ("Group photo with {name} becomes meme!", 8),
    ("{name} candid shot gets 50k retweets!", 9),
)

# --- Chatboard -------------------------------------------------------------

CHATBOARD_POOLS: Dict[str, Tuple[str, ...]] = {
    "inspiration": (
        "Dream big, work hard, and never give up on your vision.",
        "The best time to start is now. Don't wait for the perfect moment.",
        "Your Stanford education is just the beginning. Keep learning forever.",
        "Failure is not the opposite of success, it's part of success.",
        "Build something people want. Everything else is secondary.",
        "The future belongs to those who believe in their dreams.",
        "Take risks. You're young, brilliant, and at Stanford - you can do anything.",
    ),
    "advice": (
        "Focus on solving real problems, not chasing trends.",
        "Surround yourself with people smarter than you.",
        "Customer feedback is gold. Listen more than you talk.",
        "Start small, think big, move fast.",
        "Your network is your net worth. Build genuine relationships.",
        "Execution beats ideas. Ship early, iterate often.",
        "Don't be afraid to pivot when the data tells you to.",
    ),
    "challenge": (
        "What impossible problem will you solve this year?",
        "Are you building something that matters?",
        "Challenge yourself: what would you do if you couldn't fail?",
        "The world needs your unique perspective. What will you create?",
        "Don't just join a company. Start one.",
        "Think 10x, not 10%. What's your moonshot?",
        "Your generation will solve climate change. Are you ready?",
    ),
}

# --- Ambient news ------------------------------------------------------------

NEWS_TEMPLATES = (
    "Students are loving the new study spots!",
    "The forest air is helping everyone focus.",
    "A squirrel was seen stealing a bagel at Coupa.",
    "Midterms are approaching, coffee consumption is up.",
    "The campus looks beautiful this time of year.",
    "More trees mean more shade for studying.",
    "Students are requesting more walking paths.",
    "Focus levels are at an all-time high.",
    "Someone left a laptop in the quad... and it's still there.",
    "The band is practicing nearby.",
    "Local residents appreciate the greenery.",
    "Alumni are visiting to see the new forest.",
    "Dorm life is buzzing with activity.",
)

PROTEST_NEWS = "Students are protesting lack of amenities!"


def chat_interaction(
    rng: random.Random, name: str, building: Optional[BuildingType]
) -> Notification:
    """Pick a chat line for ``name`` standing on ``building``.

    Context lines win 70% of the time when the building has a pool;
    otherwise faculty lines come up 30% of the time and student lines the
    rest.
    """
    roll = rng.random()
    templates: Sequence[str]
    if building in CHAT_CONTEXT and roll > 0.3:
        templates = CHAT_CONTEXT[building]
    elif roll > 0.7:
        templates = CHAT_FACULTY
    else:
        templates = CHAT_STUDENTS
    text = rng.choice(templates).format(name=name)
    return Notification(Channel.TEA, text, Tone.POSITIVE, sender=rng.choice(CHAT_SENDERS))


def photo_moment(
    rng: random.Random, name: str, building: Optional[BuildingType]
) -> Tuple[str, int]:
    """Return a photo caption and the buzz it generates."""
    if building in PHOTO_CONTEXT and rng.random() > 0.4:
        text, buzz = rng.choice(PHOTO_CONTEXT[building])
    else:
        text, buzz = rng.choice(PHOTO_GENERAL)
    return text.format(name=name), buzz


def chatboard_message(
    rng: random.Random, author: str, source_id: str, day: int
) -> ChatboardMessage:
    category = rng.choice(list(CHATBOARD_POOLS))
    text = rng.choice(CHATBOARD_POOLS[category])
    return ChatboardMessage(
        id=f"chatboard_{source_id}_{day}",
        author=author,
        text=text,
        day=day,
        category=category,
    )


def local_news(rng: random.Random, wellbeing: float) -> Notification:
    if wellbeing < PROTEST_WELLBEING:
        return Notification(Channel.NEWS, PROTEST_NEWS, Tone.NEGATIVE)
    return Notification(Channel.NEWS, rng.choice(NEWS_TEMPLATES), Tone.NEUTRAL)


def news(text: str, tone: Tone = Tone.NEUTRAL) -> Notification:
    return Notification(Channel.NEWS, text, tone)
