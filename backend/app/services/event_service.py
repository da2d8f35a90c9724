"""
Membership Backend — Event Service
====================================

What:  CRUD for events, with every read enriched by the event type's name.
How:   All reads join event_types explicitly and load the relationship from
       that join (contains_eager), so the same join serves both the `name`
       filter and the `eventType` field of the response.

Query plan (GET /api/events?name=work&date=2024-05-25):
    SELECT events.*, event_types.*
    FROM events JOIN event_types ON event_types.id = events.event_type_id
    WHERE lower(event_types.name) LIKE '%work%'
      AND events.datetime >= '2024-05-25 00:00:00+00'
      AND events.datetime <  '2024-05-26 00:00:00+00'
    ORDER BY events.id

After create/update the row is re-read through the same join so the
response carries the (possibly new) type name. A deleted row cannot be
re-read, so remove() looks the name up on event_types, which the delete
does not touch.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import Select, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from app.exceptions import StorageError
from app.models.event import Event
from app.models.event_type import EventType
from app.schemas.event import EventResponse
from app.services.base import CrudService, storage_message

logger = logging.getLogger(__name__)


class EventService(CrudService[Event, EventResponse]):
    model = Event
    response_schema = EventResponse
    resource = "event"

    def filter_columns(self) -> Dict[str, Any]:
        return {
            "name": EventType.name,
            "datetime": Event.datetime,
            "event_type_id": Event.event_type_id,
        }

    def base_query(self) -> Select:
        return (
            select(Event)
            .join(Event.event_type)
            .options(contains_eager(Event.event_type))
        )

    async def after_write(self, db: AsyncSession, obj: Event) -> Event:
        result = await db.execute(
            self.base_query()
            .where(Event.id == obj.id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    def to_response(self, obj: Event) -> EventResponse:
        event_type_name = None
        if "event_type" not in inspect(obj).unloaded and obj.event_type is not None:
            event_type_name = obj.event_type.name

        return EventResponse(
            id=obj.id,
            event_type_id=obj.event_type_id,
            datetime=obj.datetime,
            event_type=event_type_name,
        )

    async def remove(self, db: AsyncSession, resource_id: int) -> Optional[EventResponse]:
        removed = await super().remove(db, resource_id)
        if removed is None or removed.event_type is not None:
            return removed

        try:
            result = await db.execute(
                select(EventType.name).where(EventType.id == removed.event_type_id)
            )
            event_type_name = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                "Failed to look up type of deleted event %s: %s", resource_id, storage_message(e)
            )
            raise StorageError(
                message=storage_message(e),
                context={"operation": "remove", "resource_id": resource_id},
            ) from e

        return removed.model_copy(update={"event_type": event_type_name})


event_service = EventService()
