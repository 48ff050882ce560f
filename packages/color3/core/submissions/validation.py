"""Boundary validation for incoming submission payloads.

Everything that reaches aggregation has passed through here: arrays have the
right lengths and every entry is either empty or a hex/family pair whose
family is the hex's classification.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from color3.core.colors.classifier import classify, is_valid_hex
from color3.core.colors.enum import ColorFamily
from color3.core.colors.models import ColorValue
from color3.core.errors import InvalidInput, InvalidSubmission
from color3.core.submissions.models import (
    DAY_OF_MONTH_SLOTS,
    DAY_OF_WEEK_SLOTS,
    MONTH_SLOTS,
    Submission,
)

INVALID_STRUCTURE = "Invalid payload structure"
INVALID_LENGTHS = "Invalid array lengths"
INVALID_VALUES = "Invalid color values"

# (field name, accepted payload keys, expected length)
_FIELDS: tuple[tuple[str, tuple[str, ...], int], ...] = (
    ("months", ("months",), MONTH_SLOTS),
    ("days_of_month", ("days_of_month", "daysOfMonth"), DAY_OF_MONTH_SLOTS),
    ("days_of_week", ("days_of_week", "daysOfWeek"), DAY_OF_WEEK_SLOTS),
)

_FAMILY_VALUES = frozenset(family.value for family in ColorFamily)


def _lookup(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _validate_entry(entry: Any, where: str) -> ColorValue | None:
    if entry is None:
        return None
    if not isinstance(entry, Mapping):
        raise InvalidSubmission(INVALID_VALUES, f"{where} is not an object")

    hex_value = entry.get("hex")
    family = entry.get("family")
    if not isinstance(hex_value, str) or not isinstance(family, str):
        raise InvalidSubmission(INVALID_VALUES, f"{where} needs string 'hex' and 'family'")
    if not is_valid_hex(hex_value):
        raise InvalidSubmission(INVALID_VALUES, f"{where} has malformed hex {hex_value!r}")
    if family not in _FAMILY_VALUES:
        raise InvalidSubmission(INVALID_VALUES, f"{where} has unknown family {family!r}")

    expected = classify(hex_value)
    if family != expected.value:
        raise InvalidSubmission(
            INVALID_VALUES,
            f"{where} family {family!r} does not match {hex_value.upper()} ({expected.value!r})",
        )
    return ColorValue(hex=hex_value, family=expected)


def validate_payload(raw: Any) -> Submission:
    """Validate a raw submission payload and build a trusted Submission.

    Accepts snake_case or camelCase array keys.

    Args:
        raw: Decoded JSON object

    Returns:
        Submission whose entries are all consistent ColorValues

    Raises:
        InvalidSubmission: "Invalid payload structure", "Invalid array lengths"
            or "Invalid color values"
    """
    if not isinstance(raw, Mapping):
        raise InvalidSubmission(INVALID_STRUCTURE, "payload is not an object")

    arrays: dict[str, list[Any]] = {}
    for name, keys, _ in _FIELDS:
        value = _lookup(raw, keys)
        if not isinstance(value, list):
            raise InvalidSubmission(INVALID_STRUCTURE, f"{name} is not an array")
        arrays[name] = value

    for name, _, expected in _FIELDS:
        if len(arrays[name]) != expected:
            raise InvalidSubmission(
                INVALID_LENGTHS, f"{name} has {len(arrays[name])} entries, expected {expected}"
            )

    values = {
        name: tuple(_validate_entry(entry, f"{name}[{i}]") for i, entry in enumerate(entries))
        for name, entries in arrays.items()
    }
    return Submission(**values)


def build_submission(
    *,
    months: Sequence[str | None] | None = None,
    days_of_month: Sequence[str | None] | None = None,
    days_of_week: Sequence[str | None] | None = None,
) -> Submission:
    """Build a Submission from raw hex choices, classifying each one.

    Omitted units are left entirely unchosen; ``None`` entries are holes.

    Raises:
        InvalidSubmission: If an array has the wrong length or a hex is malformed
    """
    given = {"months": months, "days_of_month": days_of_month, "days_of_week": days_of_week}

    values: dict[str, tuple[ColorValue | None, ...]] = {}
    for name, _, expected in _FIELDS:
        hexes = given[name]
        if hexes is None:
            values[name] = (None,) * expected
            continue
        if len(hexes) != expected:
            raise InvalidSubmission(
                INVALID_LENGTHS, f"{name} has {len(hexes)} entries, expected {expected}"
            )
        try:
            values[name] = tuple(None if h is None else ColorValue.from_hex(h) for h in hexes)
        except (InvalidInput, ValueError) as e:
            raise InvalidSubmission(INVALID_VALUES, f"{name}: {e}") from e

    return Submission(**values)
