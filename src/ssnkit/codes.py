"""
Segment derivation for the 10-digit identifier.

    DD MM YY SSS C
    |  |  |  |   +-- check digit (pluggable)
    |  |  |  +------ sequence 001..999
    |  |  +--------- year % 100
    |  +------------ month + century offset
    +--------------- day + 10 (male) / day + 50 (female)

All helpers are pure and signal "no code" with None instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

MALE_DAY_OFFSET = 10
FEMALE_DAY_OFFSET = 50


@dataclass(frozen=True)
class CenturyBand:
    start: int
    end: int
    offset: int

    def contains(self, year: int) -> bool:
        return self.start <= year <= self.end


# Month codes per band: 81-92, 01-12, 21-32, 41-52, 61-72.
CENTURY_BANDS: Tuple[CenturyBand, ...] = (
    CenturyBand(1800, 1899, 80),
    CenturyBand(1900, 1999, 0),
    CenturyBand(2000, 2099, 20),
    CenturyBand(2100, 2199, 40),
    CenturyBand(2200, 2299, 60),
)


@dataclass(frozen=True)
class DayCodes:
    male: str
    female: str

    def for_sex(self, sex: str) -> str:
        return self.male if sex == "male" else self.female


def pad(value: int, length: int = 2) -> str:
    return str(value).zfill(length)


def century_offset(year: int) -> Optional[int]:
    for band in CENTURY_BANDS:
        if band.contains(year):
            return band.offset
    return None


def day_codes(day: int) -> Optional[DayCodes]:
    """Return both sex-specific day codes, or None when day is outside 1..31."""
    if not 1 <= day <= 31:
        return None
    return DayCodes(
        male=pad(day + MALE_DAY_OFFSET),
        female=pad(day + FEMALE_DAY_OFFSET),
    )


def month_code(month: int, year: int) -> Optional[str]:
    """
    Calendar month plus the offset of the century band `year` falls in.

    Bands are keyed on the full 4-digit year, so 1999 -> "12" for December and
    2000 -> "32"; there is no two-digit rollover guessing.
    """
    offset = century_offset(year)
    if offset is None:
        return None
    return pad(month + offset)


def year_code(year: int) -> str:
    return pad(year % 100)
