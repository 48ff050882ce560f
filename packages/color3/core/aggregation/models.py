"""Aggregation and consensus output models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from color3.core.colors.enum import ColorFamily


class CalendarUnit(str, Enum):
    """The three kinds of calendar slot."""

    MONTHS = "months"
    DAYS_OF_WEEK = "days_of_week"
    DAYS_OF_MONTH = "days_of_month"


class ConsensusStatus(str, Enum):
    """How concentrated a slot's family choices are."""

    STRONG_AGREEMENT = "Strong agreement"
    NO_CONSENSUS = "No consensus"
    MIXED = "Mixed"
    NOT_ENOUGH_DATA = "Not enough data"


class FamilyCount(BaseModel):
    """How many submissions chose one family for one slot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    family: ColorFamily
    count: int = Field(ge=0)
    percentage: int = Field(ge=0, le=100, description="Share of this slot's total, rounded.")


class ConsensusMetrics(BaseModel):
    """Consensus classification for a single slot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: ConsensusStatus
    top_share: float = Field(ge=0.0, le=1.0, description="Top family count / total.")
    normalized_entropy: float = Field(
        ge=0.0, le=1.0, description="Shannon entropy divided by ln(11)."
    )
    total_count: int = Field(ge=0)


class SlotStatistics(BaseModel):
    """Ranked counts plus consensus for one slot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    counts: tuple[FamilyCount, ...]
    consensus: ConsensusMetrics


class AggregateData(BaseModel):
    """Population family distributions for every slot.

    Months and weekdays are keyed by 0-based index, days of month by 1-31.
    Every slot is present; unobserved slots hold an empty tuple.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_submissions: int = Field(ge=0)
    months: dict[int, tuple[FamilyCount, ...]]
    days_of_week: dict[int, tuple[FamilyCount, ...]]
    days_of_month: dict[int, tuple[FamilyCount, ...]]

    def unit(self, unit: CalendarUnit) -> dict[int, tuple[FamilyCount, ...]]:
        """Slot → counts for one calendar unit."""
        return getattr(self, CalendarUnit(unit).value)


class ConsensusReport(BaseModel):
    """Aggregate data with consensus metrics attached to every slot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_submissions: int = Field(ge=0)
    months: dict[int, SlotStatistics]
    days_of_week: dict[int, SlotStatistics]
    days_of_month: dict[int, SlotStatistics]

    def unit(self, unit: CalendarUnit) -> dict[int, SlotStatistics]:
        """Slot → statistics for one calendar unit."""
        return getattr(self, CalendarUnit(unit).value)


class TopFamilyShare(BaseModel):
    """The leading family of one slot and its percentage."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    slot: int
    family: ColorFamily | None = None
    percentage: int = 0
