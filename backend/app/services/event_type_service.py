"""
Membership Backend — Event Type Service
=========================================
"""

from typing import Any, Dict

from app.models.event_type import EventType
from app.schemas.event_type import EventTypeResponse
from app.services.base import CrudService


class EventTypeService(CrudService[EventType, EventTypeResponse]):
    model = EventType
    response_schema = EventTypeResponse
    resource = "event type"

    def filter_columns(self) -> Dict[str, Any]:
        return {"name": EventType.name}


event_type_service = EventTypeService()
