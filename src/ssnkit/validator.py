"""
Structural validation of an identifier against a known birth date.

`validate_ssn` is meant to sit directly in an `if`: every malformed input
(bad date, wrong length, non-digits, segment mismatch) yields False instead of
an exception. Rejection reasons are logged at DEBUG for troubleshooting.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from .codes import day_codes, month_code, year_code
from .config import ValidationOptions
from .dates import DateLike, normalize_date

logger = logging.getLogger(__name__)

SSN_LENGTH = 10
FORBIDDEN_PATTERN = "666"

_WHITESPACE = re.compile(r"\s+")
_NUMERIC = re.compile(r"[0-9]+")  # ASCII only; str.isdigit() accepts other scripts


def has_triple_six(value: str) -> bool:
    return FORBIDDEN_PATTERN in value


def is_numeric(value: str) -> bool:
    return bool(_NUMERIC.fullmatch(value))


def normalize_ssn(value: str) -> str:
    """Remove every whitespace character ("250690 1238" -> "2506901238")."""
    return _WHITESPACE.sub("", value)


def _coerce_options(options: Any) -> Optional[ValidationOptions]:
    if options is None or isinstance(options, ValidationOptions):
        return options
    return ValidationOptions.model_validate(options)


def _reject(reason: str, ssn: object) -> bool:
    logger.debug("SSN %r rejected: %s", ssn, reason)
    return False


def validate_ssn(
    ssn: str,
    birth_date: DateLike,
    options: Union[ValidationOptions, Mapping[str, Any], None] = None,
) -> bool:
    """
    Check that `ssn` is consistent with `birth_date`.

    Steps (first failure short-circuits to False):
      1) birth date must normalize to a calendar date
      2) whitespace-stripped candidate must be exactly 10 ASCII digits
      3) "666" must not occur anywhere in it
      4) day segment must be the male or female day code
      5) month segment must be month + century offset
      6) year segment must be year % 100
      7) sequence must be 1..999
      8) check digit must satisfy `options.check_digit_validator`, or just be
         numeric when none is given (the official rule is not documented)

    Args:
        ssn: Candidate identifier; surrounding/inner whitespace is ignored.
        birth_date: `date`, `datetime` or ISO-8601 string.
        options: Optional check-digit strategy, as `ValidationOptions` or a
            mapping with the same keys.

    Returns:
        True if every check passes; False otherwise.
    """
    date = normalize_date(birth_date)
    if date is None:
        return _reject("invalid birth date", ssn)

    if not isinstance(ssn, str):
        return _reject("not a string", ssn)
    normalized = normalize_ssn(ssn)
    if len(normalized) != SSN_LENGTH or not is_numeric(normalized):
        return _reject("not 10 digits", ssn)

    if has_triple_six(normalized):
        return _reject("contains 666", ssn)

    codes = day_codes(date.day)
    if codes is None:
        return _reject("day out of range", ssn)
    expected_month = month_code(date.month, date.year)
    if expected_month is None:
        return _reject("year outside supported span", ssn)

    day_segment = normalized[0:2]
    month_segment = normalized[2:4]
    year_segment = normalized[4:6]
    sequence_segment = normalized[6:9]
    check_digit = normalized[9]

    if day_segment not in (codes.male, codes.female):
        return _reject(f"day segment {day_segment} != {codes.male}/{codes.female}", ssn)
    if month_segment != expected_month:
        return _reject(f"month segment {month_segment} != {expected_month}", ssn)
    if year_segment != year_code(date.year):
        return _reject(f"year segment {year_segment} != {year_code(date.year)}", ssn)
    if not 1 <= int(sequence_segment) <= 999:
        return _reject("sequence out of range", ssn)

    try:
        opts = _coerce_options(options)
    except ValidationError:
        return _reject("malformed options", ssn)
    check_digit_validator = opts.check_digit_validator if opts is not None else None
    if check_digit_validator is not None:
        if not check_digit_validator(normalized[:9], check_digit):
            return _reject("check digit rejected", ssn)
    elif not is_numeric(check_digit):
        return _reject("check digit not numeric", ssn)

    return True
