"""
StudyMate Backend — Query Builders
====================================

What:  Pure functions turning client input into MongoDB predicates and sort specs.
How:   Each builder returns plain dicts/lists understood by pymongo, so services
       can hand them straight to find / find_one_and_update / find_one_and_delete.
Who:   Called by PartnerService and RequestService.

Identifier Resolution:
    Records were created under three id conventions over time:

    ┌────────────────────┬──────────────────────────────────────┐
    │ native ObjectId    │ {"_id": ObjectId("65f0...")}         │
    │ legacy "id" field  │ {"id": "abc-123"}                    │
    │ raw string _id     │ {"_id": "abc-123"}                   │
    └────────────────────┴──────────────────────────────────────┘

    build_id_query() ORs the applicable clauses in that order, so every
    handler addresses a record with one opaque string.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo import DESCENDING

SortSpec = List[Tuple[str, int]]

# Default ranking: best rated first, then most requested, then newest
RANKING_SORT: SortSpec = [
    ("rating", DESCENDING),
    ("patnerCount", DESCENDING),
    ("createdAt", DESCENDING),
]
NEWEST_SORT: SortSpec = [("createdAt", DESCENDING)]

TOP_PARTNERS_MIN_LIMIT = 3


def build_id_query(record_id: str) -> Dict[str, Any]:
    """
    Build a predicate matching a record by any of its historical identifiers.

    Args:
        record_id: Client-supplied identifier (path parameter)

    Returns:
        {"$or": [...]} with the native ObjectId clause only when `record_id`
        is a valid ObjectId string, followed by the legacy and raw-string clauses.

    Example:
        >>> build_id_query("legacy-7")
        {'$or': [{'id': 'legacy-7'}, {'_id': 'legacy-7'}]}
    """
    clauses: List[Dict[str, Any]] = []
    if ObjectId.is_valid(record_id):
        clauses.append({"_id": ObjectId(record_id)})
    clauses.append({"id": record_id})
    clauses.append({"_id": record_id})
    return {"$or": clauses}


def _contains(value: str) -> Dict[str, str]:
    # Literal substring match, case-insensitive
    return {"$regex": re.escape(value), "$options": "i"}


def build_partner_filter(
    subject: Optional[str] = None,
    study_mode: Optional[str] = None,
    location: Optional[str] = None,
    email: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the partner listing predicate.

    subject / location match as case-insensitive substrings; studyMode / email
    match exactly. Missing or empty filters add no constraint, so no filters at
    all yields {} (every partner).
    """
    query: Dict[str, Any] = {}
    if subject:
        query["subject"] = _contains(subject)
    if study_mode:
        query["studyMode"] = study_mode
    if location:
        query["location"] = _contains(location)
    if email:
        query["email"] = email
    return query


def partner_sort(sort: Optional[str] = None) -> SortSpec:
    """'new' → newest first; anything else → the ranking tie-break chain."""
    if sort == "new":
        return list(NEWEST_SORT)
    return list(RANKING_SORT)


def top_partners_limit(limit: Optional[int] = None) -> int:
    """Default and floor are both TOP_PARTNERS_MIN_LIMIT; smaller requests are raised."""
    if limit is None:
        return TOP_PARTNERS_MIN_LIMIT
    return max(limit, TOP_PARTNERS_MIN_LIMIT)


def build_requester_filter(requester_email: str) -> Dict[str, Any]:
    return {"requesterEmail": requester_email}

