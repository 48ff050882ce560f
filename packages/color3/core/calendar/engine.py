"""Tri-color day search.

Walks the calendar one day at a time over a window of whole months and keeps
the dates whose month, day of month and weekday all map to the same family.
"""

from __future__ import annotations

import datetime as dt
import logging

from color3.core.calendar.models import TriColorDayMatch, UnitMapping
from color3.core.errors import InvalidInput
from color3.core.utils.logging import log_performance

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_MONTHS = 12

_ONE_DAY = dt.timedelta(days=1)


def day_of_week_index(day: dt.date) -> int:
    """Weekday index with Sunday = 0 through Saturday = 6."""
    return day.isoweekday() % 7


def add_months(start: dt.date, months: int) -> dt.date:
    """First day of the month ``months`` calendar months after ``start``'s month."""
    index = start.month - 1 + months
    return dt.date(start.year + index // 12, index % 12 + 1, 1)


def search_window(horizon_months: int, *, today: dt.date | None = None) -> tuple[dt.date, dt.date]:
    """Return the [start, end) window searched for tri-color days.

    Args:
        horizon_months: Number of calendar months to cover, > 0
        today: Reference date; defaults to the local current date

    Returns:
        (start, end): first day of the current month and the first day of the
        month ``horizon_months`` later (exclusive)

    Raises:
        InvalidInput: If horizon_months is not a positive integer
    """
    if isinstance(horizon_months, bool) or not isinstance(horizon_months, int):
        raise InvalidInput(f"horizon_months must be an integer, got {horizon_months!r}")
    if horizon_months <= 0:
        raise InvalidInput(f"horizon_months must be positive, got {horizon_months}")

    reference = today or dt.date.today()
    if isinstance(reference, dt.datetime):
        reference = reference.date()
    start = reference.replace(day=1)
    return start, add_months(start, horizon_months)


@log_performance
def find_matches(
    mapping: UnitMapping,
    horizon_months: int = DEFAULT_HORIZON_MONTHS,
    *,
    today: dt.date | None = None,
) -> list[TriColorDayMatch]:
    """Find every tri-color day in the search window.

    A date matches iff its month, day of month and weekday are all mapped and
    all map to the same family. Unmapped slots never match.

    Args:
        mapping: Family per calendar unit
        horizon_months: Number of calendar months to search, > 0
        today: Reference date; defaults to the local current date

    Returns:
        Matches in ascending date order

    Raises:
        InvalidInput: If horizon_months is not a positive integer
    """
    start, end = search_window(horizon_months, today=today)

    if not (mapping.months and mapping.days_of_month and mapping.days_of_week):
        logger.debug("Mapping has an empty unit; no tri-color days possible")
        return []

    matches: list[TriColorDayMatch] = []
    current = start
    while current < end:
        month = current.month - 1
        day_of_week = day_of_week_index(current)

        month_family = mapping.months.get(month)
        dom_family = mapping.days_of_month.get(current.day)
        dow_family = mapping.days_of_week.get(day_of_week)

        if (
            month_family is not None
            and dom_family is not None
            and dow_family is not None
            and month_family == dom_family == dow_family
        ):
            matches.append(
                TriColorDayMatch(
                    date=current,
                    family=month_family,
                    month=month,
                    day_of_month=current.day,
                    day_of_week=day_of_week,
                )
            )

        current += _ONE_DAY

    logger.debug(f"Found {len(matches)} tri-color days between {start} and {end}")
    return matches
