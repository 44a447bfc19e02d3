"""
StudyMate Backend — Request Service
=====================================

What:  Listing, merge-update and deletion of partner-request records.
Who:   Called by the /api/requests route handlers. Requests are created only
       through PartnerService.request_partner().
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from studymate.database import MongoStore
from studymate.exceptions import ValidationError
from studymate.models.document import serialize_documents
from studymate.queries import NEWEST_SORT, build_requester_filter
from studymate.services.collection_service import CollectionService

logger = logging.getLogger(__name__)


class RequestService(CollectionService):
    """Operations on `store.requests`; ownership is the `requesterEmail` field."""

    resource = "request"

    def collection(self, store: MongoStore) -> AsyncCollection:
        return store.requests

    async def list_requests(
        self, store: MongoStore, requester_email: Optional[str]
    ) -> List[Dict[str, Any]]:
        """
        A requester's requests, newest first.

        Raises:
            ValidationError: `requester_email` missing or empty; no query is run
        """
        if not requester_email:
            raise ValidationError(message="requesterEmail is required", field="requesterEmail")

        try:
            cursor = store.requests.find(
                build_requester_filter(requester_email), sort=list(NEWEST_SORT)
            )
            documents = await cursor.to_list()
        except PyMongoError as e:
            raise self._database_error("listing", e)
        return serialize_documents(documents)

    async def update_request(
        self, store: MongoStore, request_id: str, payload: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self.merge(store, request_id, payload)

    async def delete_request(self, store: MongoStore, request_id: str) -> Dict[str, bool]:
        return await self.delete(store, request_id)


request_service = RequestService()
