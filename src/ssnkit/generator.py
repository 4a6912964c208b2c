"""
Synthetic identifier generation.

The prefix (day/sex, month/century, year) is fixed by the birth date; only the
3-digit sequence varies. Starting from a chosen or random sequence, candidates
are proposed and re-checked through `validate_ssn` until one passes. The search
is capped at MAX_ATTEMPTS so it always terminates.
"""

from __future__ import annotations

import datetime
import logging
import random
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .codes import day_codes, month_code, pad, year_code
from .config import CheckDigitGenerator, GenerationOptions, Sex, ValidationOptions
from .dates import DateLike, normalize_date
from .errors import (
    DayOutOfRangeError,
    GenerationExhaustedError,
    InvalidBirthDateError,
    UnsupportedYearError,
)
from .validator import has_triple_six, validate_ssn

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 1000
SEQUENCE_MIN = 1
SEQUENCE_MAX = 999
SEXES = ("male", "female")


def default_check_digit(base: str) -> str:
    """
    Sum of the base digits mod 10.

    NOT the official algorithm (which is undocumented). It only exists so that
    generated identifiers are reproducible in examples and tests.
    """
    return str(sum(int(d) for d in base) % 10)


def next_sequence(sequence: int) -> int:
    return SEQUENCE_MIN if sequence >= SEQUENCE_MAX else sequence + 1


@dataclass
class _Plan:
    """Everything resolved up front for one generation call."""
    birth_date: datetime.date
    sex: Sex
    prefix: str
    start: int
    check_digit: CheckDigitGenerator
    prevent_triple_six: bool

    def candidate(self, sequence: int) -> str:
        base = f"{self.prefix}{pad(sequence, 3)}"
        return base + self.check_digit(base)

    def accepts(self, candidate: str) -> bool:
        if self.prevent_triple_six and has_triple_six(candidate):
            return False
        gen = self.check_digit
        opts = ValidationOptions(
            check_digit_validator=lambda base, digit: digit == gen(base)
        )
        return validate_ssn(candidate, self.birth_date, opts)


def _plan(
    birth_date: DateLike,
    options: Optional[GenerationOptions],
    rng: Any,
) -> _Plan:
    opts = options or GenerationOptions()
    if rng is None:
        rng = random

    date = normalize_date(birth_date)
    if date is None:
        raise InvalidBirthDateError(birth_date)

    sex: Sex = opts.sex or rng.choice(SEXES)

    codes = day_codes(date.day)
    if codes is None:
        raise DayOutOfRangeError(date.day)
    month = month_code(date.month, date.year)
    if month is None:
        raise UnsupportedYearError(date.year)

    if opts.sequence is not None and SEQUENCE_MIN <= opts.sequence <= SEQUENCE_MAX:
        start = opts.sequence
    else:
        start = rng.randint(SEQUENCE_MIN, SEQUENCE_MAX)

    return _Plan(
        birth_date=date,
        sex=sex,
        prefix=f"{codes.for_sex(sex)}{month}{year_code(date.year)}",
        start=start,
        check_digit=opts.check_digit_generator or default_check_digit,
        prevent_triple_six=opts.prevent_triple_six,
    )


def generate_ssn(
    birth_date: DateLike,
    options: Optional[GenerationOptions] = None,
    *,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Produce an identifier that `validate_ssn` accepts for `birth_date`.

    Args:
        birth_date: `date`, `datetime` or ISO-8601 string.
        options: sex, starting sequence, check-digit generator, triple-six guard.
        rng: random source for the omitted sex/sequence; pass a seeded
            `random.Random` for reproducible output.

    Raises:
        InvalidBirthDateError: birth date is unparseable.
        DayOutOfRangeError: day outside 1..31.
        UnsupportedYearError: year outside 1800..2299.
        GenerationExhaustedError: no acceptable sequence within MAX_ATTEMPTS.
    """
    plan = _plan(birth_date, options, rng)

    sequence = plan.start
    for _ in range(MAX_ATTEMPTS):
        candidate = plan.candidate(sequence)
        if plan.accepts(candidate):
            return candidate
        logger.debug("Sequence %03d rejected (%s)", sequence, candidate)
        sequence = next_sequence(sequence)

    logger.warning(
        "No acceptable SSN for %s after %d attempts", plan.birth_date.isoformat(), MAX_ATTEMPTS
    )
    raise GenerationExhaustedError(MAX_ATTEMPTS)


def iter_ssns(
    birth_date: DateLike,
    options: Optional[GenerationOptions] = None,
    *,
    rng: Optional[random.Random] = None,
) -> Iterator[str]:
    """
    Yield every acceptable identifier for one sex, walking all 999 sequences
    once from the starting sequence (wrapping 999 -> 1).

    Raises the same input errors as `generate_ssn`, on first iteration.
    """
    plan = _plan(birth_date, options, rng)
    sequence = plan.start
    for _ in range(SEQUENCE_MAX):
        candidate = plan.candidate(sequence)
        if plan.accepts(candidate):
            yield candidate
        sequence = next_sequence(sequence)
