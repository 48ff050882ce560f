"""Shared pytest fixtures for color3 tests."""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable, Iterator

import pytest

from color3.core.calendar.models import UnitMapping
from color3.core.colors.enum import ColorFamily
from color3.core.submissions.models import Submission
from color3.core.submissions.validation import build_submission

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_root_logging() -> Iterator[None]:
    """Drop handlers installed by configure_logging so tests stay isolated."""
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in [h for h in root.handlers if h not in before]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


# ============================================================================
# Palette Fixtures
# ============================================================================

BLUE = "#2563EB"
RED = "#DC2626"


@pytest.fixture
def reference_day() -> dt.date:
    """A fixed "today": 2026-01-15, so the window is calendar year 2026."""
    return dt.date(2026, 1, 15)


# ============================================================================
# Mapping Fixtures
# ============================================================================


@pytest.fixture
def saturated_blue_mapping() -> UnitMapping:
    """Every month, day of month and weekday mapped to blue."""
    return UnitMapping(
        months={m: ColorFamily.BLUE for m in range(12)},
        days_of_month={d: ColorFamily.BLUE for d in range(1, 32)},
        days_of_week={w: ColorFamily.BLUE for w in range(7)},
    )


# ============================================================================
# Submission Fixtures
# ============================================================================


@pytest.fixture
def make_submission() -> Callable[..., Submission]:
    """Factory building submissions from sparse {index: hex} choices.

    Month and weekday indexes are 0-based, days of month are 1-31.
    """

    def _make(
        months: dict[int, str] | None = None,
        days_of_month: dict[int, str] | None = None,
        days_of_week: dict[int, str] | None = None,
    ) -> Submission:
        months = months or {}
        days_of_month = days_of_month or {}
        days_of_week = days_of_week or {}
        return build_submission(
            months=[months.get(i) for i in range(12)],
            days_of_month=[days_of_month.get(d) for d in range(1, 32)],
            days_of_week=[days_of_week.get(i) for i in range(7)],
        )

    return _make


@pytest.fixture
def saturated_blue_submission() -> Submission:
    """A submission choosing the same blue for every slot."""
    return build_submission(months=[BLUE] * 12, days_of_month=[BLUE] * 31, days_of_week=[BLUE] * 7)
