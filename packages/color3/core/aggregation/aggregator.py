"""Population aggregation and consensus over stored submissions.

The pipeline is split into independent stages:

1. ``aggregate`` counts families per slot across submissions.
2. ``consensus`` / ``consensus_report`` score how concentrated each slot is.
3. ``best_guess_mapping`` reduces the aggregate to one family per slot.
4. ``community_matches`` feeds that mapping to the tri-color day search.
"""

from __future__ import annotations

import datetime as dt
import logging
import math
from collections import defaultdict
from collections.abc import Iterable, Mapping

from color3.core.aggregation.models import (
    AggregateData,
    CalendarUnit,
    ConsensusMetrics,
    ConsensusReport,
    ConsensusStatus,
    FamilyCount,
    SlotStatistics,
    TopFamilyShare,
)
from color3.core.calendar.engine import DEFAULT_HORIZON_MONTHS, find_matches
from color3.core.calendar.models import (
    DAY_OF_MONTH_RANGE,
    DAY_OF_WEEK_RANGE,
    MONTH_RANGE,
    TriColorDayMatch,
    UnitMapping,
)
from color3.core.colors.enum import FAMILY_ORDER, ColorFamily
from color3.core.colors.models import ColorValue
from color3.core.submissions.models import Submission
from color3.core.utils.logging import log_performance

logger = logging.getLogger(__name__)

# Below this many observations a slot's percentages are not meaningful.
MIN_CONSENSUS_SAMPLE = 10

# Entropy is normalized by ln(number of possible families).
_ENTROPY_NORMALIZER = math.log(len(ColorFamily))

_STRONG_MAX_ENTROPY = 0.35
_STRONG_MIN_TOP_SHARE = 0.50
_NO_CONSENSUS_MIN_ENTROPY = 0.50
_NO_CONSENSUS_MAX_TOP_SHARE = 0.50

# Top-family percentage thresholds used by the collective summary.
STRONG_SLOT_PERCENTAGE = 40
WEAK_SLOT_PERCENTAGE = 30

_SlotCounters = dict[int, dict[ColorFamily, int]]


def _percentage(count: int, total: int) -> int:
    """Whole percent of ``count`` over ``total``, .5 rounding up; 0 for an empty total."""
    if total <= 0:
        return 0
    return math.floor(100 * count / total + 0.5)


def _count_into(counters: _SlotCounters, values: Iterable[ColorValue | None], offset: int) -> None:
    for index, value in enumerate(values):
        if value is not None:
            counters[index + offset][value.family] += 1


def rank_family_counts(counts: Mapping[ColorFamily, int]) -> tuple[FamilyCount, ...]:
    """Turn a family → count map into ranked FamilyCount entries.

    Sorted by count descending, ties in family enumeration order.
    Percentages are rounded independently and may not sum to 100.
    """
    total = sum(counts.values())
    ranked = sorted(
        ((ColorFamily(family), count) for family, count in counts.items() if count > 0),
        key=lambda item: (-item[1], FAMILY_ORDER[item[0]]),
    )
    return tuple(
        FamilyCount(family=family, count=count, percentage=_percentage(count, total))
        for family, count in ranked
    )


@log_performance
def aggregate(submissions: Iterable[Submission]) -> AggregateData:
    """Count family choices per slot across submissions.

    Absent entries count toward nothing, not even the slot total.

    Args:
        submissions: Trusted submissions; family tags are not re-checked

    Returns:
        AggregateData with every slot present
    """
    months: _SlotCounters = {i: defaultdict(int) for i in MONTH_RANGE}
    days_of_week: _SlotCounters = {i: defaultdict(int) for i in DAY_OF_WEEK_RANGE}
    days_of_month: _SlotCounters = {i: defaultdict(int) for i in DAY_OF_MONTH_RANGE}

    total = 0
    for submission in submissions:
        total += 1
        _count_into(months, submission.months, offset=0)
        _count_into(days_of_week, submission.days_of_week, offset=0)
        _count_into(days_of_month, submission.days_of_month, offset=1)

    logger.debug(f"Aggregated {total} submissions")

    return AggregateData(
        total_submissions=total,
        months={slot: rank_family_counts(c) for slot, c in months.items()},
        days_of_week={slot: rank_family_counts(c) for slot, c in days_of_week.items()},
        days_of_month={slot: rank_family_counts(c) for slot, c in days_of_month.items()},
    )


def _as_count_map(
    counts: Mapping[ColorFamily | str, int] | Iterable[FamilyCount],
) -> dict[ColorFamily, int]:
    if isinstance(counts, Mapping):
        return {ColorFamily(family): int(count) for family, count in counts.items()}
    return {fc.family: fc.count for fc in counts}


def consensus(
    counts: Mapping[ColorFamily | str, int] | Iterable[FamilyCount],
    *,
    min_sample: int = MIN_CONSENSUS_SAMPLE,
) -> ConsensusMetrics:
    """Classify how strongly a slot's choices agree.

    Rules, first match wins:
    - fewer than ``min_sample`` observations: "Not enough data"
    - entropy <= 0.35 and top share > 0.50: "Strong agreement"
    - entropy >= 0.50 and top share < 0.50: "No consensus"
    - otherwise: "Mixed"

    Entropy is Shannon entropy over the observed families divided by ln(11);
    both it and the top share are rounded to 2 decimals before the rules run.

    Args:
        counts: family → count map, or the slot's FamilyCount entries
        min_sample: Minimum observations before classifying

    Returns:
        ConsensusMetrics for the slot
    """
    count_map = _as_count_map(counts)
    total = sum(count_map.values())

    if total == 0 or total < min_sample:
        return ConsensusMetrics(
            status=ConsensusStatus.NOT_ENOUGH_DATA,
            top_share=0.0,
            normalized_entropy=0.0,
            total_count=total,
        )

    top_share = round(max(count_map.values()) / total, 2)

    entropy = 0.0
    for count in count_map.values():
        if count > 0:
            p = count / total
            entropy -= p * math.log(p)
    normalized_entropy = max(0.0, round(entropy / _ENTROPY_NORMALIZER, 2))

    if normalized_entropy <= _STRONG_MAX_ENTROPY and top_share > _STRONG_MIN_TOP_SHARE:
        status = ConsensusStatus.STRONG_AGREEMENT
    elif normalized_entropy >= _NO_CONSENSUS_MIN_ENTROPY and top_share < _NO_CONSENSUS_MAX_TOP_SHARE:
        status = ConsensusStatus.NO_CONSENSUS
    else:
        status = ConsensusStatus.MIXED

    return ConsensusMetrics(
        status=status,
        top_share=top_share,
        normalized_entropy=normalized_entropy,
        total_count=total,
    )


def consensus_report(
    data: AggregateData, *, min_sample: int = MIN_CONSENSUS_SAMPLE
) -> ConsensusReport:
    """Attach consensus metrics to every slot of an aggregate."""

    def stats(slots: dict[int, tuple[FamilyCount, ...]]) -> dict[int, SlotStatistics]:
        return {
            slot: SlotStatistics(counts=counts, consensus=consensus(counts, min_sample=min_sample))
            for slot, counts in slots.items()
        }

    return ConsensusReport(
        total_submissions=data.total_submissions,
        months=stats(data.months),
        days_of_week=stats(data.days_of_week),
        days_of_month=stats(data.days_of_month),
    )


def best_guess_mapping(data: AggregateData) -> UnitMapping:
    """Reduce an aggregate to the top family of each slot.

    Slots with no observations stay unmapped.
    """

    def top(slots: dict[int, tuple[FamilyCount, ...]]) -> dict[int, ColorFamily]:
        return {slot: counts[0].family for slot, counts in slots.items() if counts}

    return UnitMapping(
        months=top(data.months),
        days_of_month=top(data.days_of_month),
        days_of_week=top(data.days_of_week),
    )


def community_matches(
    submissions: Iterable[Submission],
    horizon_months: int = DEFAULT_HORIZON_MONTHS,
    *,
    today: dt.date | None = None,
) -> list[TriColorDayMatch]:
    """Tri-color days of the population best-guess mapping."""
    mapping = best_guess_mapping(aggregate(submissions))
    return find_matches(mapping, horizon_months, today=today)


def top_family_shares(data: AggregateData, unit: CalendarUnit | str) -> list[TopFamilyShare]:
    """Leading family and its percentage for every slot of one unit, in slot order."""
    shares: list[TopFamilyShare] = []
    for slot, counts in sorted(data.unit(CalendarUnit(unit)).items()):
        if counts:
            shares.append(
                TopFamilyShare(slot=slot, family=counts[0].family, percentage=counts[0].percentage)
            )
        else:
            shares.append(TopFamilyShare(slot=slot))
    return shares


def strong_and_weak_slots(
    data: AggregateData,
    unit: CalendarUnit | str = CalendarUnit.DAYS_OF_WEEK,
    *,
    strong_percentage: int = STRONG_SLOT_PERCENTAGE,
    weak_percentage: int = WEAK_SLOT_PERCENTAGE,
) -> tuple[list[TopFamilyShare], list[TopFamilyShare]]:
    """Split slots by their top-family percentage.

    Returns:
        (strong, weak): slots whose top family reaches ``strong_percentage``,
        and slots whose top family is below ``weak_percentage``
    """
    shares = top_family_shares(data, unit)
    strong = [s for s in shares if s.percentage >= strong_percentage]
    weak = [s for s in shares if s.percentage < weak_percentage]
    return strong, weak
