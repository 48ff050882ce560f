"""Submission models: per-user color choices for every calendar slot."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from color3.core.colors.models import ColorValue

MONTH_SLOTS = 12
DAY_OF_MONTH_SLOTS = 31
DAY_OF_WEEK_SLOTS = 7

_SLOT_COUNTS: dict[str, int] = {
    "months": MONTH_SLOTS,
    "days_of_month": DAY_OF_MONTH_SLOTS,
    "days_of_week": DAY_OF_WEEK_SLOTS,
}


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


class Submission(BaseModel):
    """One user's color choices, positionally indexed.

    ``months[0]`` is January, ``days_of_month[0]`` is day 1 and
    ``days_of_week[0]`` is Sunday. ``None`` marks a slot left unchosen.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    months: tuple[ColorValue | None, ...] = Field(
        default=(None,) * MONTH_SLOTS, description="12 entries, January first."
    )
    days_of_month: tuple[ColorValue | None, ...] = Field(
        default=(None,) * DAY_OF_MONTH_SLOTS, description="31 entries, day 1 first."
    )
    days_of_week: tuple[ColorValue | None, ...] = Field(
        default=(None,) * DAY_OF_WEEK_SLOTS, description="7 entries, Sunday first."
    )

    @field_validator("months", "days_of_month", "days_of_week")
    @classmethod
    def _check_length(cls, value: tuple[Any, ...], info: ValidationInfo) -> tuple[Any, ...]:
        expected = _SLOT_COUNTS[info.field_name]
        if len(value) != expected:
            raise ValueError(f"{info.field_name} must have {expected} entries, got {len(value)}")
        return value

    def filled_count(self) -> int:
        """Number of slots with a chosen color."""
        return sum(
            1
            for values in (self.months, self.days_of_month, self.days_of_week)
            for value in values
            if value is not None
        )


class SubmissionRecord(BaseModel):
    """A stored submission with its identity and timestamps."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Opaque record id.")
    submission: Submission
    created_at: dt.datetime = Field(default_factory=_utcnow)
    updated_at: dt.datetime = Field(default_factory=_utcnow)


class SubmissionPayload(BaseModel):
    """Wire shape of a submission as sent by clients.

    Entries are loose ``{"hex": ..., "family": ...}`` dicts or ``None``; they
    become trusted ``ColorValue`` instances only through boundary validation.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    months: list[dict[str, Any] | None] = Field(default_factory=list)
    days_of_month: list[dict[str, Any] | None] = Field(
        default_factory=list, alias="daysOfMonth"
    )
    days_of_week: list[dict[str, Any] | None] = Field(default_factory=list, alias="daysOfWeek")

    @classmethod
    def from_submission(cls, submission: Submission) -> SubmissionPayload:
        """Build the wire payload for a trusted submission."""

        def dump(values: tuple[ColorValue | None, ...]) -> list[dict[str, Any] | None]:
            return [None if v is None else v.model_dump(mode="json") for v in values]

        return cls(
            months=dump(submission.months),
            days_of_month=dump(submission.days_of_month),
            days_of_week=dump(submission.days_of_week),
        )
