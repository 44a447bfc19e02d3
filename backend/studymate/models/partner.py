"""
Partner document fields.

A partner is free-form apart from the fields below, which the server reads
for ranking, counter increments and request snapshots.
"""

from numbers import Number
from typing import Any, Dict

# Numeric counters that PATCH /api/partners/{id}/increment may change
COUNTER_FIELDS = ("rating", "patnerCount")

# Copied into every request at request time; counters default to 0
SNAPSHOT_FIELDS = (
    "name",
    "profileimage",
    "subject",
    "studyMode",
    "availabilityTime",
    "location",
    "experienceLevel",
)


def is_numeric(value: Any) -> bool:
    # bool is an int subclass but never a counter delta
    return isinstance(value, Number) and not isinstance(value, bool)


def build_increment(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the `$inc` document for a counter update.

    Only numeric `rating` / `patnerCount` values are kept; absent or
    non-numeric values are ignored rather than treated as 0.

    Example:
        >>> build_increment({"rating": 2, "patnerCount": "x", "name": "Ann"})
        {'rating': 2}
    """
    return {field: payload[field] for field in COUNTER_FIELDS if is_numeric(payload.get(field))}


def build_snapshot(partner: Dict[str, Any]) -> Dict[str, Any]:
    """
    Point-in-time copy of a partner for a request document.

    Later edits to the partner never reach this copy.
    """
    snapshot = {field: partner.get(field) for field in SNAPSHOT_FIELDS}
    snapshot["rating"] = partner.get("rating") or 0
    snapshot["patnerCount"] = partner.get("patnerCount") or 0
    return snapshot
