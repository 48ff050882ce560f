"""Population aggregation, consensus scoring and community matching."""

from color3.core.aggregation.aggregator import (
    MIN_CONSENSUS_SAMPLE,
    aggregate,
    best_guess_mapping,
    community_matches,
    consensus,
    consensus_report,
    rank_family_counts,
    strong_and_weak_slots,
    top_family_shares,
)
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

__all__ = [
    "MIN_CONSENSUS_SAMPLE",
    "AggregateData",
    "CalendarUnit",
    "ConsensusMetrics",
    "ConsensusReport",
    "ConsensusStatus",
    "FamilyCount",
    "SlotStatistics",
    "TopFamilyShare",
    "aggregate",
    "best_guess_mapping",
    "community_matches",
    "consensus",
    "consensus_report",
    "rank_family_counts",
    "strong_and_weak_slots",
    "top_family_shares",
]
