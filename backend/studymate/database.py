"""
StudyMate Backend — MongoDB Store Management
==============================================

What:  The MongoStore handle (client + the two collections) and its FastAPI dependency.
How:   The lifespan handler in main.py constructs one MongoStore, connects it,
       stores it on `app.state.store` and closes it on shutdown. Route handlers
       receive it through `Depends(get_store)`.
Who:   Used by route handlers and, through them, by the services layer.

Connection Pooling:
    AsyncMongoClient owns its own connection pool; one client is shared by
    every request handler for the whole process lifetime. Nothing in this
    module pools or retries on top of the driver.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from studymate.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class MongoStore:
    """
    Process-wide handle to the document store.

    Attributes:
        partners:  Collection of partner documents
        requests:  Collection of partner-request documents

    Lifecycle:
        store = MongoStore(settings)
        await store.connect()    # pings; raises if the server is unreachable
        ...                      # shared by every request
        await store.close()
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        client: Optional[AsyncMongoClient] = None,
    ):
        self.config = config or default_settings
        self.client: AsyncMongoClient = client or AsyncMongoClient(
            self.config.mongodb_uri,
            serverSelectionTimeoutMS=self.config.mongodb_server_selection_timeout_ms,
            tz_aware=True,
        )
        self.db: AsyncDatabase = self.client[self.config.mongodb_db]
        self.partners: AsyncCollection = self.db[self.config.partners_collection]
        self.requests: AsyncCollection = self.db[self.config.requests_collection]

    async def connect(self) -> None:
        """
        What:  Verifies the deployment is reachable.
        How:   Runs the `ping` admin command; driver errors propagate so the
               lifespan can abort startup.
        """
        await self.ping()
        logger.info(
            "Pinged MongoDB deployment; using database '%s' (%s, %s)",
            self.config.mongodb_db,
            self.config.partners_collection,
            self.config.requests_collection,
        )

    async def ping(self) -> Dict[str, Any]:
        return await self.client.admin.command("ping")

    async def close(self) -> None:
        """Closes the client and every pooled connection."""
        await self.client.close()
        logger.info("MongoDB client closed")


# ── Store Dependency ──────────────────────────────────────────────────────
def get_store(request: Request) -> MongoStore:
    """
    FastAPI dependency returning the store created by the lifespan handler.

    Example usage in a route:
        @router.get("/partners")
        async def list_partners(store: MongoStore = Depends(get_store)):
            return await partner_service.list_partners(store)

    Tests replace it through `app.dependency_overrides[get_store]`.
    """
    return request.app.state.store
