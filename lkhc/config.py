from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


# Years for which the archive carries weekly results pages.
YEAR_RANGES: tuple[tuple[int, int], ...] = ((1995, 1998), (2006, 2016))
DEFAULT_YEAR = 2016

# The archive numbers weeks from 1; no season ran more than ten climbs.
DEFAULT_WEEKS = range(1, 11)

RESULTS_TABLE_CLASS = "results"
EXPECTED_CELL_COUNT = 9


@dataclass(frozen=True)
class Division:
    caption: str  # table caption on the results page
    gender: str  # "M" | "F"


MALE = Division(caption="Men", gender="M")
FEMALE = Division(caption="Women", gender="F")
DIVISIONS = (MALE, FEMALE)

# Fixed cell positions in a results row
CELL_RANK = 0
CELL_RIDER_ID = 1
CELL_RIDER_NAME = 2
CELL_TIME = 5
CELL_SCORE = 8

STRAVA_LINK_TARGET = "Strava"
STRAVA_LOGO_FILENAMES = frozenset({
    "strava.png",
    "strava.gif",
    "strava_logo.png",
    "strava_logo.gif",
    "strava-logo.png",
    "api_logo_pwrdby_strava_horiz_light.png",
})


def default_archive_root() -> Path:
    return Path("lowkeyhillclimbs.com")


def is_supported_year(year: int) -> bool:
    return any(lo <= int(year) <= hi for lo, hi in YEAR_RANGES)


def describe_year_ranges() -> str:
    return " or ".join(f"[{lo}, {hi}]" for lo, hi in YEAR_RANGES)
