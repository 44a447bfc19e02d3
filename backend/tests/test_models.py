"""
StudyMate Backend — Document Model Unit Tests
================================================

What we test:
    ✅ ObjectIds are serialized at any depth
    ✅ Merge payloads lose _id and createdAt
    ✅ Counter deltas keep only numeric rating / patnerCount
    ✅ Request documents carry a detached partner snapshot
"""

from datetime import datetime

from bson import ObjectId

from studymate.models.document import (
    serialize_document,
    stamp_created_at,
    strip_protected_fields,
)
from studymate.models.partner import SNAPSHOT_FIELDS, build_increment, build_snapshot
from studymate.models.request import build_request_document


class TestSerialization:
    def test_object_ids_become_strings(self):
        oid, partner_oid = ObjectId(), ObjectId()
        document = {
            "_id": oid,
            "partnerId": partner_oid,
            "history": [{"ref": partner_oid}],
            "name": "Ann",
        }

        result = serialize_document(document)

        assert result == {
            "_id": str(oid),
            "partnerId": str(partner_oid),
            "history": [{"ref": str(partner_oid)}],
            "name": "Ann",
        }

    def test_original_document_is_untouched(self):
        oid = ObjectId()
        document = {"_id": oid}
        serialize_document(document)
        assert document["_id"] is oid


class TestMergeProtection:
    def test_identifier_and_created_at_are_stripped(self):
        payload = {"_id": "other", "createdAt": "2020-01-01", "name": "New name"}
        assert strip_protected_fields(payload) == {"name": "New name"}

    def test_legacy_id_field_is_kept(self):
        assert strip_protected_fields({"id": "legacy-1"}) == {"id": "legacy-1"}

    def test_stamp_created_at_overrides_client_value(self):
        document = stamp_created_at({"name": "Ann", "createdAt": "yesterday"})
        assert isinstance(document["createdAt"], datetime)
        assert document["createdAt"].tzinfo is not None
        assert document["name"] == "Ann"


class TestBuildIncrement:
    def test_numeric_counters_are_kept(self):
        assert build_increment({"rating": 2, "patnerCount": -1}) == {"rating": 2, "patnerCount": -1}

    def test_floats_are_numeric(self):
        assert build_increment({"rating": 0.5}) == {"rating": 0.5}

    def test_non_numeric_and_absent_values_are_ignored(self):
        assert build_increment({"rating": "2", "patnerCount": None}) == {}
        assert build_increment({}) == {}

    def test_booleans_are_not_deltas(self):
        assert build_increment({"rating": True}) == {}

    def test_other_fields_are_ignored(self):
        assert build_increment({"name": 5, "patnerCount": 1}) == {"patnerCount": 1}


class TestSnapshot:
    def test_snapshot_copies_display_fields(self, sample_partner):
        snapshot = build_snapshot(sample_partner)

        for field in SNAPSHOT_FIELDS:
            assert snapshot[field] == sample_partner[field]
        assert snapshot["rating"] == 4
        assert snapshot["patnerCount"] == 7
        assert "email" not in snapshot
        assert "_id" not in snapshot

    def test_missing_counters_default_to_zero(self):
        snapshot = build_snapshot({"_id": ObjectId(), "name": "Bo"})
        assert snapshot["rating"] == 0
        assert snapshot["patnerCount"] == 0
        assert snapshot["subject"] is None

    def test_request_document(self, sample_partner):
        document = build_request_document(sample_partner, "bob@example.com")

        assert document["partnerId"] == sample_partner["_id"]
        assert document["partnerEmail"] == "ann@example.com"
        assert document["requesterEmail"] == "bob@example.com"
        assert document["partnerSnapshot"]["name"] == "Ann Lee"
        assert isinstance(document["createdAt"], datetime)

    def test_request_document_without_partner_email(self):
        document = build_request_document({"_id": "raw-id"}, "bob@example.com")
        assert document["partnerEmail"] is None

    def test_snapshot_is_detached_from_partner(self, sample_partner):
        document = build_request_document(sample_partner, "bob@example.com")
        sample_partner["name"] = "Renamed"
        assert document["partnerSnapshot"]["name"] == "Ann Lee"
