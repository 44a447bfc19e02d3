"""
StudyMate Backend — Query Builder Unit Tests
===============================================

What we test:
    ✅ Identifier resolution for ObjectId, legacy and malformed ids
    ✅ Partner filter construction (substring vs exact, absent filters)
    ✅ Sort selection and the top-N floor
"""

import re

from bson import ObjectId
from pymongo import DESCENDING

from studymate.queries import (
    build_id_query,
    build_partner_filter,
    build_requester_filter,
    partner_sort,
    top_partners_limit,
)


class TestBuildIdQuery:
    """Tests for multi-form identifier resolution."""

    def test_valid_object_id_matches_all_three_forms(self):
        oid = ObjectId()
        query = build_id_query(str(oid))

        assert query == {
            "$or": [
                {"_id": oid},
                {"id": str(oid)},
                {"_id": str(oid)},
            ]
        }

    def test_native_clause_comes_first(self):
        oid = ObjectId()
        first = build_id_query(str(oid))["$or"][0]
        assert isinstance(first["_id"], ObjectId)

    def test_legacy_id_skips_native_clause(self):
        query = build_id_query("partner-42")
        assert query == {"$or": [{"id": "partner-42"}, {"_id": "partner-42"}]}

    def test_malformed_hex_is_not_an_object_id(self):
        # 24 characters but not hex
        query = build_id_query("zzzzzzzzzzzzzzzzzzzzzzzz")
        assert all(not isinstance(c.get("_id"), ObjectId) for c in query["$or"])
        assert len(query["$or"]) == 2


class TestBuildPartnerFilter:
    """Tests for the listing predicate."""

    def test_no_filters_matches_everything(self):
        assert build_partner_filter() == {}

    def test_empty_strings_are_ignored(self):
        assert build_partner_filter(subject="", study_mode="", location="", email="") == {}

    def test_subject_and_location_are_case_insensitive_substrings(self):
        query = build_partner_filter(subject="math", location="dhaka")
        assert query["subject"] == {"$regex": "math", "$options": "i"}
        assert query["location"] == {"$regex": "dhaka", "$options": "i"}

    def test_study_mode_and_email_are_exact(self):
        query = build_partner_filter(study_mode="online", email="ann@example.com")
        assert query == {"studyMode": "online", "email": "ann@example.com"}

    def test_regex_metacharacters_are_literal(self):
        query = build_partner_filter(subject="C++ (intro)")
        pattern = query["subject"]["$regex"]
        assert re.search(pattern, "Learning c++ (Intro) basics", re.IGNORECASE)
        assert not re.search(pattern, "Ccc (intro)", re.IGNORECASE)


class TestSorting:
    def test_new_sorts_by_creation_only(self):
        assert partner_sort("new") == [("createdAt", DESCENDING)]

    def test_default_is_ranking_chain(self):
        expected = [
            ("rating", DESCENDING),
            ("patnerCount", DESCENDING),
            ("createdAt", DESCENDING),
        ]
        assert partner_sort(None) == expected
        assert partner_sort("rating") == expected

    def test_returned_sort_is_a_copy(self):
        partner_sort().append(("name", 1))
        assert len(partner_sort()) == 3


class TestTopPartnersLimit:
    def test_default_is_three(self):
        assert top_partners_limit(None) == 3

    def test_small_limits_are_raised_to_three(self):
        assert top_partners_limit(1) == 3
        assert top_partners_limit(0) == 3
        assert top_partners_limit(-4) == 3

    def test_larger_limits_are_kept(self):
        assert top_partners_limit(10) == 10


def test_requester_filter():
    assert build_requester_filter("bob@example.com") == {"requesterEmail": "bob@example.com"}
