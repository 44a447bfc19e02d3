"""
StudyMate Backend — Request Route Handlers
============================================

What:  /api/requests endpoints: a requester's list, merge-update and delete.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from studymate.database import MongoStore, get_store
from studymate.schemas.common import ErrorResponse, OkResponse
from studymate.services.request_service import request_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Requests"])

NOT_FOUND = {404: {"description": "Request not found", "model": ErrorResponse}}


@router.get(
    "/requests",
    response_model=List[Dict[str, Any]],
    responses={400: {"description": "requesterEmail missing", "model": ErrorResponse}},
    summary="List a requester's partner requests, newest first",
)
async def list_requests(
    requester_email: Optional[str] = Query(default=None, alias="requesterEmail"),
    store: MongoStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await request_service.list_requests(store, requester_email)


@router.patch(
    "/requests/{request_id}",
    response_model=Dict[str, Any],
    responses=NOT_FOUND,
    summary="Merge fields into a request",
)
async def update_request(
    request_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: MongoStore = Depends(get_store),
) -> Dict[str, Any]:
    return await request_service.update_request(store, request_id, payload or {})


@router.delete(
    "/requests/{request_id}",
    response_model=OkResponse,
    responses=NOT_FOUND,
    summary="Delete a request",
)
async def delete_request(
    request_id: str,
    store: MongoStore = Depends(get_store),
) -> Dict[str, bool]:
    return await request_service.delete_request(store, request_id)
