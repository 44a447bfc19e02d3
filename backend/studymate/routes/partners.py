"""
StudyMate Backend — Partner Route Handlers
============================================

What:  /api/partners endpoints: listing, top-N, detail, create, merge-update,
       counter increment, delete and request-a-partner.
How:   Extracts query/path/body values and delegates to PartnerService.

`/partners/top` is registered before `/partners/{partner_id}` so "top" is never
taken for an identifier.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from studymate.database import MongoStore, get_store
from studymate.schemas.common import ErrorResponse, OkResponse
from studymate.schemas.partner import PartnerRequestPayload, PartnerRequestResponse
from studymate.services.partner_service import partner_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Partners"])

NOT_FOUND = {404: {"description": "Partner not found", "model": ErrorResponse}}


@router.get(
    "/partners",
    response_model=List[Dict[str, Any]],
    summary="List partners with optional filters",
    description=(
        "subject and location match case-insensitive substrings; studyMode and email "
        "match exactly. sort=new orders by creation time, otherwise by rating, "
        "patnerCount, then creation time (all descending)."
    ),
)
async def list_partners(
    subject: Optional[str] = Query(default=None),
    study_mode: Optional[str] = Query(default=None, alias="studyMode"),
    location: Optional[str] = Query(default=None),
    email: Optional[str] = Query(default=None),
    sort: Optional[str] = Query(default=None, description="'new' for newest first"),
    store: MongoStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await partner_service.list_partners(
        store,
        subject=subject,
        study_mode=study_mode,
        location=location,
        email=email,
        sort=sort,
    )


@router.get(
    "/partners/top",
    response_model=List[Dict[str, Any]],
    summary="Top-ranked partners",
    description="Returns up to `limit` partners (default 3); smaller limits are raised to 3.",
)
async def top_partners(
    limit: Optional[int] = Query(default=None),
    store: MongoStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await partner_service.top_partners(store, limit=limit)


@router.get(
    "/partners/{partner_id}",
    response_model=Dict[str, Any],
    responses=NOT_FOUND,
    summary="Get a partner by any of its identifiers",
)
async def get_partner(
    partner_id: str,
    store: MongoStore = Depends(get_store),
) -> Dict[str, Any]:
    return await partner_service.get_partner(store, partner_id)


@router.post(
    "/partners",
    status_code=201,
    response_model=Dict[str, Any],
    summary="Create a partner",
    description="Stores the body as given and stamps createdAt server-side.",
)
async def create_partner(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: MongoStore = Depends(get_store),
) -> Dict[str, Any]:
    return await partner_service.create_partner(store, payload or {})


@router.patch(
    "/partners/{partner_id}",
    response_model=Dict[str, Any],
    responses=NOT_FOUND,
    summary="Merge fields into a partner",
    description="_id and createdAt in the body are ignored.",
)
async def update_partner(
    partner_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: MongoStore = Depends(get_store),
) -> Dict[str, Any]:
    return await partner_service.update_partner(store, partner_id, payload or {})


@router.patch(
    "/partners/{partner_id}/increment",
    response_model=Dict[str, Any],
    responses=NOT_FOUND,
    summary="Increment rating and/or patnerCount",
    description="Only numeric rating / patnerCount values are applied.",
)
async def increment_partner(
    partner_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: MongoStore = Depends(get_store),
) -> Dict[str, Any]:
    return await partner_service.increment_partner(store, partner_id, payload or {})


@router.delete(
    "/partners/{partner_id}",
    response_model=OkResponse,
    responses=NOT_FOUND,
    summary="Delete a partner",
)
async def delete_partner(
    partner_id: str,
    store: MongoStore = Depends(get_store),
) -> Dict[str, bool]:
    return await partner_service.delete_partner(store, partner_id)


@router.post(
    "/partners/{partner_id}/request",
    response_model=PartnerRequestResponse,
    responses={
        **NOT_FOUND,
        400: {"description": "requesterEmail missing", "model": ErrorResponse},
    },
    summary="Request a partner",
    description=(
        "Records a request holding a snapshot of the partner and increments the "
        "partner's patnerCount by 1. Returns the updated partner."
    ),
)
async def request_partner(
    partner_id: str,
    payload: Optional[PartnerRequestPayload] = Body(default=None),
    store: MongoStore = Depends(get_store),
) -> Dict[str, Any]:
    requester_email = payload.requesterEmail if payload else None
    return await partner_service.request_partner(store, partner_id, requester_email)
