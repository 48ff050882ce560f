"""Submission boundary: payload models, validation, storage and seed data."""

from color3.core.submissions.models import (
    DAY_OF_MONTH_SLOTS,
    DAY_OF_WEEK_SLOTS,
    MONTH_SLOTS,
    Submission,
    SubmissionPayload,
    SubmissionRecord,
)
from color3.core.submissions.seed import generate_fake_submission, generate_fake_submissions
from color3.core.submissions.store import (
    InMemorySubmissionStore,
    JsonDirSubmissionStore,
    SubmissionStore,
    new_record_id,
)
from color3.core.submissions.validation import build_submission, validate_payload

__all__ = [
    "DAY_OF_MONTH_SLOTS",
    "DAY_OF_WEEK_SLOTS",
    "MONTH_SLOTS",
    "InMemorySubmissionStore",
    "JsonDirSubmissionStore",
    "Submission",
    "SubmissionPayload",
    "SubmissionRecord",
    "SubmissionStore",
    "build_submission",
    "generate_fake_submission",
    "generate_fake_submissions",
    "new_record_id",
    "validate_payload",
]
