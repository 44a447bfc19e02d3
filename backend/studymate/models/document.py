"""
Helpers shared by partner and request documents.

Documents come back from pymongo as plain dicts holding bson types. Before a
document leaves the services layer, ObjectIds are rendered as strings; datetimes
are left for FastAPI's encoder to emit as ISO-8601.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from bson import ObjectId

# Fields a client may never overwrite through a merge-update
PROTECTED_FIELDS = ("_id", "createdAt")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: _serialize_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    return value


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a JSON-ready copy of a stored document (ObjectIds → str, nested too)."""
    return _serialize_value(document)


def serialize_documents(documents: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(document) for document in documents]


def strip_protected_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy of a merge payload without the identifier and creation timestamp.

    The stored `_id` is immutable and `createdAt` is write-once, so neither may
    appear in a `$set`.
    """
    return {key: value for key, value in payload.items() if key not in PROTECTED_FIELDS}


def stamp_created_at(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a new document with the server-side creation timestamp."""
    document = dict(payload)
    document["createdAt"] = utc_now()
    return document
