"""
Reverse the segment encoding.

Because the month segment carries the century, a well-formed identifier alone
determines the birth date and sex. `decode_ssn` is lenient like `validate_ssn`:
anything that does not decode yields None.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from .codes import CENTURY_BANDS, FEMALE_DAY_OFFSET, MALE_DAY_OFFSET
from .config import Sex
from .validator import SSN_LENGTH, is_numeric, normalize_ssn


@dataclass(frozen=True)
class DecodedSSN:
    sex: Sex
    day: int
    month: int
    year: int
    sequence: int
    check_digit: str

    @property
    def birth_date(self) -> date:
        return date(self.year, self.month, self.day)


def _decode_day(segment: int) -> Optional[Tuple]:
    if MALE_DAY_OFFSET + 1 <= segment <= MALE_DAY_OFFSET + 31:
        return "male", segment - MALE_DAY_OFFSET
    if FEMALE_DAY_OFFSET + 1 <= segment <= FEMALE_DAY_OFFSET + 31:
        return "female", segment - FEMALE_DAY_OFFSET
    return None


def _decode_year_month(month_segment: int, year_segment: int) -> Optional[Tuple]:
    for band in CENTURY_BANDS:
        month = month_segment - band.offset
        if 1 <= month <= 12:
            return band.start + year_segment, month
    return None


def decode_ssn(ssn: str) -> Optional[DecodedSSN]:
    """
    Split an identifier into sex, birth date, sequence and check digit.

    Does not apply the "666" rule or any check-digit rule; use `validate_ssn`
    with the decoded birth date for that.
    """
    if not isinstance(ssn, str):
        return None
    normalized = normalize_ssn(ssn)
    if len(normalized) != SSN_LENGTH or not is_numeric(normalized):
        return None

    day_part = _decode_day(int(normalized[0:2]))
    year_month = _decode_year_month(int(normalized[2:4]), int(normalized[4:6]))
    sequence = int(normalized[6:9])
    if day_part is None or year_month is None or sequence == 0:
        return None

    sex, day = day_part
    year, month = year_month
    try:
        date(year, month, day)
    except ValueError:
        return None

    return DecodedSSN(
        sex=sex,
        day=day,
        month=month,
        year=year,
        sequence=sequence,
        check_digit=normalized[9],
    )
