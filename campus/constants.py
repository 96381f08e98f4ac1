from enum import Enum, auto

# Map dimensions
GRID_SIZE = 60
# Distance from the centre beyond which the starting map may hold trees
WILD_TREE_RADIUS = 18
WILD_TREE_CHANCE = 0.08
# Share of wild trees that are oaks (the rest are pines)
WILD_OAK_SHARE = 0.4

# Simulation pacing: one tick is one in-game day
TICK_INTERVAL = 1.0
DAYS_PER_YEAR = 365
CAMPAIGN_YEARS = 10
MAX_CAMPAIGN_TICKS = CAMPAIGN_YEARS * DAYS_PER_YEAR

# Campaign economy
INITIAL_MONEY = 25_000
CAMPAIGN_GOAL = 1_000_000_000

# Unlock schedule (years -> days)
YEAR_1 = 0
YEAR_2 = 365
YEAR_3 = 730
YEAR_4 = 1095
YEAR_5 = 1460
YEAR_6 = 1825
YEAR_7 = 2190
YEAR_8 = 2555
YEAR_9 = 2920
YEAR_10 = 3285

# Growth of seeds and saplings
GROWTH_CHANCE = 0.2
GROWTH_STEP = 10
GROWTH_MATURE = 100

# Wellbeing
HEALTH_PENALTY_PER_UNIT = 0.2
HEALTH_PENALTY_DECAY = 0.1

# Metrics
METRIC_CAP = 100
SCHOOL_POINTS_PER_BUILDING = 10

# Economy
MIN_EFFICIENCY = 0.1

# Focus clock (seconds)
FOCUS_TIME = 25 * 60
BREAK_TIME = 5 * 60
FOCUS_COMPLETION_BONUS = 50_000 * 16
# (elapsed seconds strictly greater than, multiplier), ascending
FOCUS_MULTIPLIER_TIERS = ((60, 2), (15 * 60, 5), (25 * 60, 10))

# Visiting notables
VISIT_TICKS = 3
CHAT_TICKS = 5
CHAT_CHANCE = 0.3
PHOTO_CHANCE = 0.15
MAX_BUZZ = 100
GUEST_LECTURE_BUZZ_THRESHOLD = 50
GUEST_LECTURE_DAYS = 7
GUEST_LECTURE_MAGNITUDE = 15
DEFAULT_EVENT_TIER = 3
# Delay before a notable's quote reaches the feed
QUOTE_DELAY = 3.0

# Narrative feeds
AMBIENT_NEWS_CHANCE = 0.05
NEWS_FEED_SIZE = 13
CHATBOARD_SIZE = 5
PROTEST_WELLBEING = 50


class BuildingType(Enum):
    NONE = "None"
    PATH = "Path"
    STANFORD = "Stanford"
    HOOVER_TOWER = "HooverTower"
    ENGINEERING_QUAD = "EngineeringQuad"
    ARRILLAGA_HALL = "ArrillagaHall"
    COUPA_CAFE = "CoupaCafe"
    TRADER_JOES = "TraderJoes"
    D_SCHOOL = "DSchool"
    STUDENT_DORM = "StudentDorm"
    LECTURE_HALL = "LectureHall"
    VAPE_STORE = "VapeStore"
    OAK_SEED = "OakSeed"
    OAK_SAPLING = "OakSapling"
    OAK_TREE = "OakTree"
    PINE_SEED = "PineSeed"
    PINE_SAPLING = "PineSapling"
    PINE_TREE = "PineTree"
    PALM_SEED = "PalmSeed"
    PALM_SAPLING = "PalmSapling"
    PALM_TREE = "PalmTree"
    STUDY_SPOT = "StudySpot"
    TENNIS_COURT = "TennisCourt"
    FOOTBALL_FIELD = "FootballField"
    OVAL = "Oval"
    TRACK_FIELD = "TrackField"
    VOLLEYBALL_COURT = "VolleyballCourt"
    CLAW_FOUNTAIN = "ClawFountain"
    RODIN_SCULPTURE = "RodinSculpture"
    TOTEM_SCULPTURE = "TotemSculpture"
    PICNIC_TABLE = "PicnicTable"
    STREET_LAMP = "StreetLamp"
    ROSE_BUSH = "RoseBush"
    GARDEN_BED = "GardenBed"
    HEDGE = "Hedge"


# The centerpiece can never be cleared and anchors every visitor
CENTERPIECE = BuildingType.STANFORD
# Housing drives amenity demand; the vape store erodes health
HOUSING = BuildingType.STUDENT_DORM
HARMFUL = BuildingType.VAPE_STORE


class GameMode(Enum):
    """Session variants chosen on the start screen."""

    FOCUS = "pomodoro"
    STANDARD = "standard"
    CREATIVE = "creative"


class StatCategory(Enum):
    INNOVATION = "Innovation"
    RESEARCH = "Research"
    PRESTIGE = "Prestige"
    CULTURE = "Culture"
    NATURE = "Nature"
    WELLBEING = "Wellbeing"


class SchoolType(Enum):
    ENGINEERING = "Engineering"
    MEDICINE = "Medicine"
    BUSINESS = "Business"
    LAW = "Law"
    HUMANITIES = "Humanities"
    SUSTAINABILITY = "Sustainability"
    EDUCATION = "Education"


class VisitorState(Enum):
    """Lifecycle of a visiting notable."""

    WALKING = auto()
    VISITING_BUILDING = auto()
    CHATTING = auto()
    LEAVING = auto()


class TimerMode(Enum):
    IDLE = auto()
    FOCUS = auto()
    BREAK = auto()


class Tone(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Channel(Enum):
    """Where a notification is shown by the presentation layer."""

    NEWS = auto()
    TEA = auto()
    CHATBOARD = auto()


class Color(Enum):
    """Logical color identifiers used for rendering."""

    GROUND = auto()
    PATH = auto()
    LANDMARK = auto()
    ACADEMIC = auto()
    HOUSING = auto()
    DINING = auto()
    ATHLETICS = auto()
    ART = auto()
    GREENERY = auto()
    HAZARD = auto()
    VISITOR = auto()
    UI = auto()


# Fixed colour for all UI elements (RGB)
UI_COLOR_RGB = (255, 255, 255)
# Row where the status panel starts, just below the grid
STATUS_PANEL_Y = GRID_SIZE
