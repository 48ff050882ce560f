"""Tri-color day search over calendar units."""

from color3.core.calendar.display import (
    DAY_OF_WEEK_NAMES,
    MONTH_NAMES,
    day_of_week_name,
    format_match_date,
    group_by_family,
    matches_in_month,
    month_name,
)
from color3.core.calendar.engine import (
    DEFAULT_HORIZON_MONTHS,
    add_months,
    day_of_week_index,
    find_matches,
    search_window,
)
from color3.core.calendar.models import TriColorDayMatch, UnitMapping

__all__ = [
    "DAY_OF_WEEK_NAMES",
    "DEFAULT_HORIZON_MONTHS",
    "MONTH_NAMES",
    "TriColorDayMatch",
    "UnitMapping",
    "add_months",
    "day_of_week_index",
    "day_of_week_name",
    "find_matches",
    "format_match_date",
    "group_by_family",
    "matches_in_month",
    "month_name",
    "search_window",
]
