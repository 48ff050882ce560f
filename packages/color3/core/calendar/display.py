"""Display helpers for calendar units and tri-color day matches."""

from __future__ import annotations

import datetime as dt
from collections import defaultdict
from collections.abc import Iterable

from color3.core.calendar.models import TriColorDayMatch
from color3.core.colors.enum import FAMILY_ORDER, ColorFamily

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Sunday first, matching the weekday index used everywhere else.
DAY_OF_WEEK_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def month_name(month: int) -> str:
    """Name of a 0-11 month index, or "" when out of range."""
    if 0 <= month < len(MONTH_NAMES):
        return MONTH_NAMES[month]
    return ""


def day_of_week_name(day_of_week: int) -> str:
    """Name of a 0-6 weekday index (Sunday = 0), or "" when out of range."""
    if 0 <= day_of_week < len(DAY_OF_WEEK_NAMES):
        return DAY_OF_WEEK_NAMES[day_of_week]
    return ""


def format_match_date(value: dt.date | str) -> str:
    """Long-form date, e.g. "Sunday, March 1, 2026".

    Args:
        value: A date or an ISO YYYY-MM-DD string
    """
    day = dt.date.fromisoformat(value) if isinstance(value, str) else value
    weekday = DAY_OF_WEEK_NAMES[day.isoweekday() % 7]
    return f"{weekday}, {MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def matches_in_month(matches: Iterable[TriColorDayMatch], year: int, month: int) -> set[int]:
    """Days of one month that are tri-color days.

    Args:
        matches: Matches to filter
        year: Calendar year
        month: Month index, January = 0
    """
    return {m.date.day for m in matches if m.date.year == year and m.date.month - 1 == month}


def group_by_family(
    matches: Iterable[TriColorDayMatch],
) -> dict[ColorFamily, list[TriColorDayMatch]]:
    """Group matches by family, families in enumeration order, dates kept in order."""
    grouped: dict[ColorFamily, list[TriColorDayMatch]] = defaultdict(list)
    for match in matches:
        grouped[match.family].append(match)
    return {family: grouped[family] for family in sorted(grouped, key=FAMILY_ORDER.__getitem__)}
