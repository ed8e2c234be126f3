"""
data_exporter.services.clock

Calendar helpers for date-window checks.

Responsibilities:
- Provide the default "today" source (UTC calendar date).
- Shift dates by whole years.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timezone

Clock = Callable[[], date]


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def add_years(d: date, years: int) -> date:
    """
    Shift `d` by `years`, clamping Feb 29 to Feb 28 when the target year is not
    a leap year. Raises OverflowError outside the supported year range.
    """

    year = d.year + years
    if not 1 <= year <= 9999:
        raise OverflowError(f"year {year} is out of range")
    try:
        return d.replace(year=year)
    except ValueError:
        return d.replace(year=year, day=28)


def fixed_clock(today: date) -> Clock:
    # Handy for tests and reproducible scripts.
    return lambda: today
