"""Tests for per-slot consensus scoring."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest

from color3.core.aggregation import (
    MIN_CONSENSUS_SAMPLE,
    ConsensusStatus,
    aggregate,
    consensus,
    consensus_report,
    rank_family_counts,
)
from color3.core.colors import ColorFamily
from color3.core.submissions import Submission

F = ColorFamily


class TestConsensus:
    """Entropy and top share drive the four-way classification."""

    def test_strong_agreement(self) -> None:
        metrics = consensus({F.RED: 6, F.BLUE: 4})
        assert metrics.top_share == 0.6
        assert metrics.normalized_entropy == 0.28
        assert metrics.status is ConsensusStatus.STRONG_AGREEMENT
        assert metrics.total_count == 10

    def test_unanimous(self) -> None:
        metrics = consensus({F.RED: 10})
        assert metrics.top_share == 1.0
        assert metrics.normalized_entropy == 0.0
        assert metrics.status is ConsensusStatus.STRONG_AGREEMENT

    def test_uniform_is_no_consensus(self) -> None:
        metrics = consensus({family: 1 for family in F})
        assert metrics.normalized_entropy == 1.0
        assert metrics.top_share == 0.09
        assert metrics.status is ConsensusStatus.NO_CONSENSUS

    def test_majority_with_spread_is_mixed(self) -> None:
        """Top share passes but entropy is too high for strong agreement."""
        metrics = consensus({F.RED: 11, F.BLUE: 5, F.GREEN: 4})
        assert metrics.normalized_entropy == 0.42
        assert metrics.top_share == 0.55
        assert metrics.status is ConsensusStatus.MIXED

    def test_low_entropy_without_majority_is_mixed(self) -> None:
        metrics = consensus({F.RED: 49, F.BLUE: 48, F.GREEN: 3})
        assert metrics.normalized_entropy == 0.34
        assert metrics.top_share == 0.49
        assert metrics.status is ConsensusStatus.MIXED

    @pytest.mark.parametrize(
        "counts",
        [
            {F.RED: 9},
            {F.RED: 5, F.BLUE: 4},
            {F.RED: 3, F.BLUE: 3, F.GREEN: 3},
            {family: 1 for family in list(F)[:9]},
            {F.PINK: 1},
        ],
        ids=["unanimous", "two-way", "three-way", "nine-singletons", "single"],
    )
    def test_below_min_sample(self, counts: dict[ColorFamily, int]) -> None:
        """Fewer than ten observations is never classified, whatever the spread."""
        metrics = consensus(counts)
        assert metrics.status is ConsensusStatus.NOT_ENOUGH_DATA
        assert metrics.total_count == sum(counts.values())
        assert metrics.top_share == 0.0
        assert metrics.normalized_entropy == 0.0

    def test_min_sample_override(self) -> None:
        assert consensus({F.RED: 3}, min_sample=3).status is ConsensusStatus.STRONG_AGREEMENT

    @pytest.mark.parametrize("min_sample", [0, -5])
    def test_empty_slot_never_classified(self, min_sample: int) -> None:
        metrics = consensus({}, min_sample=min_sample)
        assert metrics.status is ConsensusStatus.NOT_ENOUGH_DATA
        assert metrics.total_count == 0

    def test_string_keys(self) -> None:
        assert consensus({"red": 6, "blue": 4}) == consensus({F.RED: 6, F.BLUE: 4})

    def test_family_count_input(self) -> None:
        counts = rank_family_counts({F.RED: 6, F.BLUE: 4})
        assert consensus(counts) == consensus({F.RED: 6, F.BLUE: 4})

    def test_default_min_sample(self) -> None:
        assert MIN_CONSENSUS_SAMPLE == 10


class TestConsensusReport:
    """Consensus attached to every slot of an aggregate."""

    def test_report_shape(self, saturated_blue_submission: Submission) -> None:
        report = consensus_report(aggregate([saturated_blue_submission] * 10))
        assert report.total_submissions == 10
        assert sorted(report.days_of_month) == list(range(1, 32))
        slot = report.months[0]
        assert slot.counts[0].family is F.BLUE
        assert slot.consensus.status is ConsensusStatus.STRONG_AGREEMENT

    def test_small_population(self, make_submission: Callable[..., Submission]) -> None:
        report = consensus_report(aggregate([make_submission(months={0: "#DC2626"})]))
        assert report.months[0].consensus.status is ConsensusStatus.NOT_ENOUGH_DATA
        assert report.months[0].consensus.total_count == 1
        assert report.months[1].consensus.total_count == 0

    def test_min_sample_passed_through(
        self, make_submission: Callable[..., Submission]
    ) -> None:
        report = consensus_report(
            aggregate([make_submission(months={0: "#DC2626"})]), min_sample=1
        )
        assert report.months[0].consensus.status is ConsensusStatus.STRONG_AGREEMENT

    def test_json_status_strings(self, saturated_blue_submission: Submission) -> None:
        report = consensus_report(aggregate([saturated_blue_submission]))
        dumped = json.loads(report.model_dump_json())
        assert dumped["days_of_week"]["0"]["consensus"]["status"] == "Not enough data"
