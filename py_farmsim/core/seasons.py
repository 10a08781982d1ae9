"""Game seasons and their effect on headline stats and yield."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


SEASON_ORDER = [Season.SPRING, Season.SUMMER, Season.AUTUMN, Season.WINTER]


@dataclass(frozen=True)
class SeasonStats:
    """Headline figures shown for a season."""

    health: int  # %
    moisture: int  # %
    temperature: int  # °C


SEASON_STATS: Dict[Season, SeasonStats] = {
    Season.SPRING: SeasonStats(health=85, moisture=90, temperature=18),
    Season.SUMMER: SeasonStats(health=95, moisture=65, temperature=28),
    Season.AUTUMN: SeasonStats(health=75, moisture=80, temperature=15),
    Season.WINTER: SeasonStats(health=60, moisture=95, temperature=2),
}

SEASON_YIELD_MULTIPLIER: Dict[Season, float] = {
    Season.SPRING: 1.1,
    Season.SUMMER: 1.0,
    Season.AUTUMN: 0.9,
    Season.WINTER: 0.7,
}


def parse_season(value) -> Season:
    """Season from a name; raises ValueError for anything else."""
    if isinstance(value, Season):
        return value
    try:
        return Season(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown season {value!r}; expected one of {[s.value for s in SEASON_ORDER]}"
        ) from None


def next_season(season) -> Season:
    season = parse_season(season)
    return SEASON_ORDER[(SEASON_ORDER.index(season) + 1) % len(SEASON_ORDER)]
