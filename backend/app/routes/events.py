"""
Membership Backend — Event Route Handlers
===========================================

What:  CRUD endpoints under /api/events.

Endpoints:
    POST   /api/events                         → 201 event
    GET    /api/events?name=&date=&eventTypeId= → 200 [event]
    GET    /api/events/{id}                    → 200 event | 404
    PUT    /api/events/{id}                    → 200 event | 404
    DELETE /api/events/{id}                    → 200 last state | 404

Filters (all optional, AND-combined):
    name         substring of the event type's name, case-insensitive
    date         YYYY-MM-DD; events whose datetime falls on that UTC day
    eventTypeId  exact event type id

An eventTypeId that references no event type is rejected by the database's
foreign key and reported as a 500 with the storage message.
"""

import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.guards import ResourceId, get_or_404, guarded_remove, guarded_update
from app.schemas.common import MAX_RESOURCE_ID, ErrorResponse, MessageResponse
from app.schemas.event import EventInput, EventResponse
from app.services.event_service import event_service
from app.services.filters import Condition

router = APIRouter(prefix="/api", tags=["Events"])

LABEL = "Event"

_NOT_FOUND = {404: {"description": "Event not found", "model": MessageResponse}}
_ERRORS = {
    400: {"description": "Malformed request", "model": MessageResponse},
    500: {"description": "Storage error", "model": ErrorResponse},
}


@router.post(
    "/events",
    response_model=EventResponse,
    status_code=201,
    responses=_ERRORS,
    summary="Create an event",
)
async def create_event(
    body: EventInput,
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    return await event_service.create(db, body)


@router.get(
    "/events",
    response_model=List[EventResponse],
    responses=_ERRORS,
    summary="List events",
)
async def list_events(
    name: Optional[str] = Query(default=None, description="Substring of the event type name"),
    date: Optional[dt.date] = Query(default=None, description="Day of the event (YYYY-MM-DD, UTC)"),
    event_type_id: Optional[int] = Query(
        default=None, alias="eventTypeId", ge=1, le=MAX_RESOURCE_ID,
        description="Exact event type id",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> List[EventResponse]:
    conditions = []
    if name:
        conditions.append(Condition.contains("name", name))
    if date is not None:
        conditions.append(Condition.on_day("datetime", date))
    if event_type_id is not None:
        conditions.append(Condition.equals("event_type_id", event_type_id))
    return await event_service.get_many(db, conditions)


@router.get(
    "/events/{event_id}",
    response_model=EventResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Get an event by id",
)
async def get_event(
    event_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    return await get_or_404(event_service, db, event_id, LABEL)


@router.put(
    "/events/{event_id}",
    response_model=EventResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Replace an event",
)
async def update_event(
    event_id: ResourceId,
    body: EventInput,
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    return await guarded_update(event_service, db, event_id, body, LABEL)


@router.delete(
    "/events/{event_id}",
    response_model=EventResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Delete an event",
    description="Deletes the event and returns its last state.",
)
async def delete_event(
    event_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    return await guarded_remove(event_service, db, event_id, LABEL)
