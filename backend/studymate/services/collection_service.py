"""
StudyMate Backend — Id-Addressed Collection Operations
========================================================

What:  Base class holding the operations partners and requests share: fetch,
       merge-update and delete of a single document addressed by an opaque id.
How:   Every lookup goes through build_id_query(); a None from the driver
       becomes NotFoundError and driver failures become DatabaseError.
Who:   Subclassed by PartnerService and RequestService.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from studymate.database import MongoStore
from studymate.exceptions import DatabaseError, NotFoundError
from studymate.models.document import serialize_document, strip_protected_fields
from studymate.queries import build_id_query

logger = logging.getLogger(__name__)


class CollectionService(ABC):
    """
    Shared single-document operations for one collection.

    Subclasses name the resource (used in "<Resource> not found") and pick
    their collection off the store.
    """

    resource: str = "resource"

    @abstractmethod
    def collection(self, store: MongoStore) -> AsyncCollection:
        """Return the collection this service operates on."""

    def _database_error(self, action: str, exc: PyMongoError) -> DatabaseError:
        logger.error("MongoDB error while %s %s: %s", action, self.resource, exc)
        return DatabaseError(
            detail=str(exc),
            context={"resource": self.resource, "action": action, "error_type": type(exc).__name__},
        )

    async def get(self, store: MongoStore, record_id: str) -> Dict[str, Any]:
        """
        Fetch one document by any of its identifiers.

        Raises:
            NotFoundError: No identifier clause matched (→ 404)
            DatabaseError: Query failed (→ 500)
        """
        try:
            document = await self.collection(store).find_one(build_id_query(record_id))
        except PyMongoError as e:
            raise self._database_error("fetching", e)

        if document is None:
            raise NotFoundError(resource=self.resource, resource_id=record_id)
        return serialize_document(document)

    async def merge(
        self, store: MongoStore, record_id: str, payload: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge client fields over the stored document and return the result.

        `_id` and `createdAt` are dropped from the payload first. When nothing
        is left to set, the current document is returned unchanged.
        """
        changes = strip_protected_fields(payload)
        if not changes:
            return await self.get(store, record_id)

        try:
            document = await self.collection(store).find_one_and_update(
                build_id_query(record_id),
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._database_error("updating", e)

        if document is None:
            raise NotFoundError(resource=self.resource, resource_id=record_id)
        logger.info("Updated %s %s (%s)", self.resource, record_id, ", ".join(sorted(changes)))
        return serialize_document(document)

    async def delete(self, store: MongoStore, record_id: str) -> Dict[str, bool]:
        """Delete one document; returns {"ok": True} or raises NotFoundError."""
        try:
            document = await self.collection(store).find_one_and_delete(build_id_query(record_id))
        except PyMongoError as e:
            raise self._database_error("deleting", e)

        if document is None:
            raise NotFoundError(resource=self.resource, resource_id=record_id)
        logger.info("Deleted %s %s", self.resource, record_id)
        return {"ok": True}
