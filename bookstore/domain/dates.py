"""Calendar date parsing for publication dates."""
from __future__ import annotations

import re
from datetime import date

# Same delimiter on both sides: 1965-08-01 or 1965/08/01
DATE_PATTERN = re.compile(r"(\d{4})([-/])(\d{1,2})\2(\d{1,2})")


def parse_calendar_date(value: str | None) -> date | None:
    """Return the date for ``YYYY-MM-DD`` / ``YYYY/MM/DD`` strings, else None."""
    if not value:
        return None
    match = DATE_PATTERN.fullmatch(value.strip())
    if not match:
        return None
    year, _, month, day = match.groups()
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def is_calendar_date(value: str | None) -> bool:
    return parse_calendar_date(value) is not None
