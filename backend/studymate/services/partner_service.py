"""
StudyMate Backend — Partner Service
=====================================

What:  Business logic for study-partner records.
How:   Builds predicates with studymate.queries, runs them against
       `store.partners`, and returns serialized documents.
Who:   Called by the /api/partners route handlers.

Request-a-Partner Flow (POST /api/partners/{id}/request):
    ┌──────────────┐    ┌────────────────────┐    ┌─────────────────────┐
    │ find partner │───▶│ insert request +   │───▶│ $inc patnerCount 1  │
    │ (id query)   │    │ partner snapshot   │    │ (return post-image) │
    └──────────────┘    └────────────────────┘    └─────────────────────┘

    The two writes touch two collections and are NOT wrapped in a
    transaction. If the increment fails after the insert, the request stays
    recorded and its snapshot counter is one behind the partner's; the error
    is reported as a 500, not repaired.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from studymate.database import MongoStore
from studymate.exceptions import NotFoundError, ValidationError
from studymate.models.document import serialize_document, serialize_documents, stamp_created_at
from studymate.models.partner import build_increment
from studymate.models.request import build_request_document
from studymate.queries import (
    RANKING_SORT,
    build_id_query,
    build_partner_filter,
    partner_sort,
    top_partners_limit,
)
from studymate.services.collection_service import CollectionService

logger = logging.getLogger(__name__)


class PartnerService(CollectionService):
    """
    Business logic layer for partner operations.

    Responsibilities:
        - list_partners(): filtered listing, ranking or newest-first
        - top_partners(): ranking capped at a floor-enforced limit
        - get / create / update / increment / delete of single partners
        - request_partner(): record a request and bump the partner's counter
    """

    resource = "partner"

    def collection(self, store: MongoStore) -> AsyncCollection:
        return store.partners

    async def list_partners(
        self,
        store: MongoStore,
        subject: Optional[str] = None,
        study_mode: Optional[str] = None,
        location: Optional[str] = None,
        email: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List partners matching the optional filters.

        Query plan (default sort, subject filter):
            find({"subject": {"$regex": "math", "$options": "i"}})
              .sort([("rating", -1), ("patnerCount", -1), ("createdAt", -1)])

        Returns every match; there is no pagination.
        """
        query = build_partner_filter(
            subject=subject, study_mode=study_mode, location=location, email=email
        )
        try:
            cursor = store.partners.find(query, sort=partner_sort(sort))
            documents = await cursor.to_list()
        except PyMongoError as e:
            raise self._database_error("listing", e)

        logger.debug("Listed %d partners for filter %s", len(documents), query)
        return serialize_documents(documents)

    async def top_partners(
        self, store: MongoStore, limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Highest ranked partners; `limit` below the floor is raised to it."""
        try:
            cursor = store.partners.find(
                {}, sort=list(RANKING_SORT), limit=top_partners_limit(limit)
            )
            documents = await cursor.to_list()
        except PyMongoError as e:
            raise self._database_error("ranking", e)
        return serialize_documents(documents)

    async def get_partner(self, store: MongoStore, partner_id: str) -> Dict[str, Any]:
        return await self.get(store, partner_id)

    async def create_partner(
        self, store: MongoStore, payload: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a partner exactly as supplied, plus a server-side `createdAt`.

        Returns:
            The stored document including its assigned `_id`.
        """
        document = stamp_created_at(payload)
        try:
            result = await store.partners.insert_one(document)
        except PyMongoError as e:
            raise self._database_error("creating", e)

        document["_id"] = result.inserted_id
        logger.info("Created partner %s", result.inserted_id)
        return serialize_document(document)

    async def update_partner(
        self, store: MongoStore, partner_id: str, payload: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self.merge(store, partner_id, payload)

    async def increment_partner(
        self, store: MongoStore, partner_id: str, payload: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Add numeric deltas to `rating` and/or `patnerCount`.

        Example:
            {"rating": 2} on a partner with rating 3 → rating 5, patnerCount untouched.

        Deltas may be negative. With no usable delta the partner is returned as is.
        """
        increment = build_increment(payload)
        if not increment:
            return await self.get(store, partner_id)

        try:
            document = await store.partners.find_one_and_update(
                build_id_query(partner_id),
                {"$inc": increment},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._database_error("incrementing", e)

        if document is None:
            raise NotFoundError(resource=self.resource, resource_id=partner_id)
        return serialize_document(document)

    async def delete_partner(self, store: MongoStore, partner_id: str) -> Dict[str, bool]:
        return await self.delete(store, partner_id)

    async def request_partner(
        self,
        store: MongoStore,
        partner_id: str,
        requester_email: Optional[str],
    ) -> Dict[str, Any]:
        """
        Record that `requester_email` asked for this partner.

        Workflow Steps:
            1. Reject a missing requester email (ValidationError → 400)
            2. Fetch the partner (NotFoundError → 404)
            3. Insert a request holding a snapshot of the partner as it is now
            4. Increment the partner's patnerCount by 1
            5. Return the partner after the increment

        Returns:
            {"ok": True, "partner": <partner post-image>}
        """
        if not requester_email:
            raise ValidationError(message="requesterEmail is required", field="requesterEmail")

        try:
            partner = await store.partners.find_one(build_id_query(partner_id))
        except PyMongoError as e:
            raise self._database_error("fetching", e)
        if partner is None:
            raise NotFoundError(resource=self.resource, resource_id=partner_id)

        request_document = build_request_document(partner, requester_email)
        try:
            result = await store.requests.insert_one(request_document)
        except PyMongoError as e:
            raise self._database_error("recording a request for", e)
        logger.info(
            "Recorded request %s from %s for partner %s",
            result.inserted_id,
            requester_email,
            partner["_id"],
        )

        try:
            updated = await store.partners.find_one_and_update(
                {"_id": partner["_id"]},
                {"$inc": {"patnerCount": 1}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(
                "Request %s recorded but patnerCount of partner %s was not incremented",
                result.inserted_id,
                partner["_id"],
            )
            raise self._database_error("incrementing", e)

        if updated is None:
            # Partner deleted between the lookup and the increment
            raise NotFoundError(resource=self.resource, resource_id=partner_id)
        return {"ok": True, "partner": serialize_document(updated)}


# ── Singleton Instance ────────────────────────────────────────────────────
# Stateless: the store is passed on every call
partner_service = PartnerService()
