"""
Calendar utilities - date parsing, formatting and arithmetic.

Pure functions used by the product form to keep `date_revision`
one calendar year after `date_release`.

Key behaviors:
- Dates are exchanged as ISO `YYYY-MM-DD` strings
- Parsing accepts strings, `date` and `datetime` values
- Year arithmetic rolls forward: a day missing from the target
  year becomes the first day of the following month
  (2024-02-29 + 1 year -> 2025-03-01)
"""

from __future__ import annotations

import re
from datetime import MAXYEAR, MINYEAR, date, datetime

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:T.*)?$")


def parse_date(value: str | date | datetime | None) -> date | None:
    """
    Parse a value into a calendar date.

    Accepts `YYYY-MM-DD` strings (a trailing time part such as
    `T00:00:00.000Z` is ignored), `date` and `datetime` objects.

    Returns:
        The date, or None for empty or invalid input.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    text = value.strip()
    if not text:
        return None

    match = _ISO_DATE_RE.match(text)
    if match is None:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date_for_input(value: str | date | datetime | None) -> str:
    """Format a date-like value as `YYYY-MM-DD`, or "" when unparsable."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return parsed.isoformat()


def add_years(value: date, years: int) -> date:
    """
    Add whole years to a date using the roll-forward rule.

    If the same month/day does not exist in the target year, the result
    is the first day of the next month.

    Raises:
        ValueError: If the target year is outside the supported range.
    """
    target_year = value.year + years
    if not MINYEAR <= target_year <= MAXYEAR:
        raise ValueError(f"year {target_year} is out of range")

    try:
        return value.replace(year=target_year)
    except ValueError:
        # Only Feb 29 can be missing from a year
        return date(target_year, 3, 1)
