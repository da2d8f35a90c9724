"""
Membership Backend — Event Type Route Handlers
================================================

Endpoints:
    POST   /api/event-types          → 201 event type
    GET    /api/event-types?name=    → 200 [event type]
    GET    /api/event-types/{id}     → 200 event type | 404
    PUT    /api/event-types/{id}     → 200 event type | 404
    DELETE /api/event-types/{id}     → 200 last state | 404
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.guards import ResourceId, get_or_404, guarded_remove, guarded_update
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.event_type import EventTypeInput, EventTypeResponse
from app.services.event_type_service import event_type_service
from app.services.filters import Condition

router = APIRouter(prefix="/api", tags=["Event Types"])

LABEL = "Event type"

_NOT_FOUND = {404: {"description": "Event type not found", "model": MessageResponse}}
_ERRORS = {
    400: {"description": "Malformed request", "model": MessageResponse},
    500: {"description": "Storage error", "model": ErrorResponse},
}


@router.post(
    "/event-types",
    response_model=EventTypeResponse,
    status_code=201,
    responses=_ERRORS,
    summary="Create an event type",
)
async def create_event_type(
    body: EventTypeInput,
    db: AsyncSession = Depends(get_db_session),
) -> EventTypeResponse:
    return await event_type_service.create(db, body)


@router.get(
    "/event-types",
    response_model=List[EventTypeResponse],
    responses=_ERRORS,
    summary="List event types",
)
async def list_event_types(
    name: Optional[str] = Query(default=None, description="Substring of the name (case-insensitive)"),
    db: AsyncSession = Depends(get_db_session),
) -> List[EventTypeResponse]:
    conditions = []
    if name:
        conditions.append(Condition.contains("name", name))
    return await event_type_service.get_many(db, conditions)


@router.get(
    "/event-types/{event_type_id}",
    response_model=EventTypeResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Get an event type by id",
)
async def get_event_type(
    event_type_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> EventTypeResponse:
    return await get_or_404(event_type_service, db, event_type_id, LABEL)


@router.put(
    "/event-types/{event_type_id}",
    response_model=EventTypeResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Replace an event type",
)
async def update_event_type(
    event_type_id: ResourceId,
    body: EventTypeInput,
    db: AsyncSession = Depends(get_db_session),
) -> EventTypeResponse:
    return await guarded_update(event_type_service, db, event_type_id, body, LABEL)


@router.delete(
    "/event-types/{event_type_id}",
    response_model=EventTypeResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Delete an event type",
    description=(
        "Deletes the event type and returns its last state. Fails with a "
        "storage error while events still reference it."
    ),
)
async def delete_event_type(
    event_type_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> EventTypeResponse:
    return await guarded_remove(event_type_service, db, event_type_id, LABEL)
