"""Exception hierarchy for Color³."""

from __future__ import annotations


class Color3Error(Exception):
    """Base exception for all Color³ errors."""


class InvalidInput(Color3Error, ValueError):
    """Raised when a value handed to the core is malformed.

    Covers malformed hex strings and non-positive search horizons.
    """


class InvalidSubmission(InvalidInput):
    """Raised when a submission payload fails boundary validation.

    Attributes:
        reason: Short, user-facing reason (e.g. "Invalid array lengths")
        detail: Optional detail pointing at the offending entry
    """

    def __init__(self, reason: str, detail: str | None = None) -> None:
        self.reason = reason
        self.detail = detail
        message = reason if detail is None else f"{reason}: {detail}"
        super().__init__(message)


class SubmissionNotFoundError(Color3Error, KeyError):
    """Raised when a submission id is not present in the store."""

    def __init__(self, submission_id: str) -> None:
        self.submission_id = submission_id
        super().__init__(submission_id)

    def __str__(self) -> str:
        return f"Submission not found: {self.submission_id}"
