"""Calendar mapping and tri-color day models."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

from color3.core.colors.enum import ColorFamily
from color3.core.submissions.models import Submission

MONTH_RANGE = range(0, 12)
DAY_OF_MONTH_RANGE = range(1, 32)
DAY_OF_WEEK_RANGE = range(0, 7)


def _check_keys(mapping: dict[int, ColorFamily], valid: range, unit: str) -> dict[int, ColorFamily]:
    bad = sorted(k for k in mapping if k not in valid)
    if bad:
        raise ValueError(f"{unit} keys out of range {valid.start}..{valid.stop - 1}: {bad}")
    return mapping


class UnitMapping(BaseModel):
    """Family assigned to each calendar unit.

    Each unit is a partial map; a missing key means "no opinion" and such a
    slot never takes part in matching.

    Attributes:
        months: 0-11, January = 0
        days_of_month: 1-31
        days_of_week: 0-6, Sunday = 0
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    months: dict[int, ColorFamily] = Field(default_factory=dict)
    days_of_month: dict[int, ColorFamily] = Field(default_factory=dict)
    days_of_week: dict[int, ColorFamily] = Field(default_factory=dict)

    @field_validator("months")
    @classmethod
    def _check_months(cls, value: dict[int, ColorFamily]) -> dict[int, ColorFamily]:
        return _check_keys(value, MONTH_RANGE, "months")

    @field_validator("days_of_month")
    @classmethod
    def _check_days_of_month(cls, value: dict[int, ColorFamily]) -> dict[int, ColorFamily]:
        return _check_keys(value, DAY_OF_MONTH_RANGE, "days_of_month")

    @field_validator("days_of_week")
    @classmethod
    def _check_days_of_week(cls, value: dict[int, ColorFamily]) -> dict[int, ColorFamily]:
        return _check_keys(value, DAY_OF_WEEK_RANGE, "days_of_week")

    @property
    def is_complete(self) -> bool:
        """True when every month, day of month and weekday is mapped."""
        return (
            set(self.months) == set(MONTH_RANGE)
            and set(self.days_of_month) == set(DAY_OF_MONTH_RANGE)
            and set(self.days_of_week) == set(DAY_OF_WEEK_RANGE)
        )

    @classmethod
    def from_submission(cls, submission: Submission) -> UnitMapping:
        """Build a mapping from a submission's positional arrays.

        Day-of-month position ``i`` becomes key ``i + 1``; holes stay unmapped.
        """
        return cls(
            months={i: v.family for i, v in enumerate(submission.months) if v is not None},
            days_of_month={
                i + 1: v.family for i, v in enumerate(submission.days_of_month) if v is not None
            },
            days_of_week={
                i: v.family for i, v in enumerate(submission.days_of_week) if v is not None
            },
        )


class TriColorDayMatch(BaseModel):
    """A date whose month, day of month and weekday share one family."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    date: dt.date = Field(description="Calendar date of the match.")
    family: ColorFamily = Field(description="The shared family.")
    month: int = Field(ge=0, le=11, description="Month index, January = 0.")
    day_of_month: int = Field(ge=1, le=31, description="Day of month, 1-31.")
    day_of_week: int = Field(ge=0, le=6, description="Weekday index, Sunday = 0.")

    @property
    def iso_date(self) -> str:
        """The date as YYYY-MM-DD."""
        return self.date.isoformat()
