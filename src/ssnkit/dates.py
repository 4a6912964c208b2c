"""
Birth date normalization.

Both public operations accept either a structured date or an ISO-8601 string.
Everything is funnelled through `normalize_date` so the rest of the package only
ever sees a concrete `datetime.date`.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime, str]

# YYYY-MM-DD, optionally followed by a time and UTC offset. Matched explicitly
# so the accepted shapes do not change with the interpreter's fromisoformat().
_ISO_DATE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"(?:[T ][0-9]{2}:[0-9]{2}(?::[0-9]{2}(?:\.[0-9]{1,6})?)?"
    r"(?:Z|[+-][0-9]{2}:?[0-9]{2})?)?"
)


def normalize_date(value: object) -> Optional[date]:
    """
    Coerce a date-like value into a `datetime.date`.

    - `datetime` -> its calendar date (time and tzinfo are discarded)
    - `date`     -> returned as-is
    - `str`      -> "YYYY-MM-DD", optionally followed by "THH:MM[:SS[.ffffff]]"
                    and "Z" or a "+HH:MM" offset; the date as written is used

    Returns None for anything unparseable; never guesses or corrects input.
    """
    # datetime is a subclass of date, so test it first.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    m = _ISO_DATE.fullmatch(value.strip())
    if m is None:
        return None
    try:
        return date(int(m["year"]), int(m["month"]), int(m["day"]))
    except ValueError:
        return None
