"""Synthetic submission generator for demos and load testing.

Months and weekdays lean toward seasonal favorites; days of month are
uniform. Each slot is left empty with a fixed probability, so generated data
exercises the "no opinion" path as well.

Weekday weights are keyed by stored position, Sunday first. The blue-heavy
weights sit at position 0, so seeded populations lean blue on Sunday and the
Friday-style yellow weights land on Thursday.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping

from color3.core.colors.enum import ColorFamily, family_representative
from color3.core.colors.models import ColorValue
from color3.core.submissions.models import (
    DAY_OF_MONTH_SLOTS,
    DAY_OF_WEEK_SLOTS,
    MONTH_SLOTS,
    Submission,
)

logger = logging.getLogger(__name__)

F = ColorFamily

MONTH_EMPTY_RATE = 0.20
DAY_OF_WEEK_EMPTY_RATE = 0.15
DAY_OF_MONTH_EMPTY_RATE = 0.30

# Weighted family preferences per month (0 = January).
MONTH_PATTERNS: dict[int, dict[ColorFamily, float]] = {
    0: {F.BLUE: 4, F.WHITE: 3, F.CYAN: 2, F.GRAY: 1},
    1: {F.PINK: 4, F.RED: 3, F.PURPLE: 2},
    2: {F.GREEN: 4, F.YELLOW: 2, F.CYAN: 2},
    3: {F.YELLOW: 3, F.GREEN: 4, F.PINK: 2},
    4: {F.GREEN: 5, F.YELLOW: 3},
    5: {F.YELLOW: 4, F.ORANGE: 3, F.GREEN: 2},
    6: {F.RED: 5, F.ORANGE: 3, F.YELLOW: 2},
    7: {F.ORANGE: 5, F.YELLOW: 3, F.RED: 2},
    8: {F.ORANGE: 5, F.RED: 3, F.YELLOW: 2},
    9: {F.ORANGE: 6, F.BLACK: 3, F.PURPLE: 2},
    10: {F.ORANGE: 4, F.RED: 3, F.YELLOW: 2},
    11: {F.RED: 4, F.GREEN: 4, F.WHITE: 2},
}

# Weighted family preferences per stored weekday position (0 = Sunday).
# Empty means uniform.
DAY_OF_WEEK_PATTERNS: dict[int, dict[ColorFamily, float]] = {
    0: {F.BLUE: 5, F.GRAY: 3, F.BLACK: 2},
    1: {},
    2: {F.GREEN: 3, F.YELLOW: 2},
    3: {F.ORANGE: 3, F.YELLOW: 2},
    4: {F.YELLOW: 5, F.ORANGE: 3, F.RED: 2},
    5: {},
    6: {F.WHITE: 2, F.BLUE: 2, F.YELLOW: 2},
}

_ALL_FAMILIES: tuple[ColorFamily, ...] = tuple(ColorFamily)


def weighted_family(
    rng: random.Random, weights: Mapping[ColorFamily, float] | None = None
) -> ColorFamily:
    """Pick a family, uniformly when ``weights`` is empty."""
    if not weights:
        return rng.choice(_ALL_FAMILIES)
    families = list(weights)
    return rng.choices(families, weights=[weights[f] for f in families], k=1)[0]


def _pick(
    rng: random.Random, empty_rate: float, weights: Mapping[ColorFamily, float] | None
) -> ColorValue | None:
    if rng.random() < empty_rate:
        return None
    return ColorValue.from_hex(family_representative(weighted_family(rng, weights)))


def generate_fake_submission(rng: random.Random) -> Submission:
    """Generate one synthetic submission."""
    return Submission(
        months=tuple(
            _pick(rng, MONTH_EMPTY_RATE, MONTH_PATTERNS.get(i)) for i in range(MONTH_SLOTS)
        ),
        days_of_week=tuple(
            _pick(rng, DAY_OF_WEEK_EMPTY_RATE, DAY_OF_WEEK_PATTERNS.get(i))
            for i in range(DAY_OF_WEEK_SLOTS)
        ),
        days_of_month=tuple(
            _pick(rng, DAY_OF_MONTH_EMPTY_RATE, None) for _ in range(DAY_OF_MONTH_SLOTS)
        ),
    )


def generate_fake_submissions(count: int, *, seed: int | None = None) -> list[Submission]:
    """Generate ``count`` synthetic submissions.

    Args:
        count: Number of submissions, >= 0
        seed: Random seed for reproducible output

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    rng = random.Random(seed)
    submissions = [generate_fake_submission(rng) for _ in range(count)]
    logger.debug(f"Generated {count} fake submissions (seed={seed})")
    return submissions
