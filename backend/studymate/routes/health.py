"""
StudyMate Backend — Liveness and Health Routes
=================================================

What:  GET / answers with plain text as long as the process serves HTTP;
       GET /health additionally pings MongoDB.

Status levels:
    - healthy:   ping succeeded (HTTP 200)
    - unhealthy: ping failed (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from studymate import __version__
from studymate.database import MongoStore, get_store
from studymate.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Liveness text")
async def root() -> str:
    return "Hello World!"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "MongoDB unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: MongoStore = Depends(get_store),
) -> HealthResponse:
    """
    Ping MongoDB and report.

    The ping is the cheapest round trip the server offers; failures of any
    kind mark the database as disconnected rather than raising.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await store.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: MongoDB unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
