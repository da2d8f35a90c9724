"""
Membership Backend — Event Schemas
====================================

What:  Request/response models for /api/events.

Wire format:
    {
        "id": 1,
        "eventTypeId": 2,
        "datetime": "2024-05-25T10:00:00Z",
        "eventType": "Workshop"
    }

    eventType is the joined EventType name.

Time zones:
    Input datetimes must carry an offset and are converted to UTC before
    they reach storage, so the UTC day filter sees the real instant.
    "2024-05-25T23:30:00-03:00" is stored and returned as
    "2024-05-26T02:30:00Z". Values read back without zone information
    (SQLite) are UTC.
"""

import datetime as dt
from typing import Optional

from pydantic import Field, field_validator

from app.schemas.common import MAX_RESOURCE_ID, CamelModel


class EventInput(CamelModel):
    """Body for POST and PUT /api/events (full replace on PUT)."""
    event_type_id: int = Field(
        ge=1, le=MAX_RESOURCE_ID, description="Id of an existing event type",
    )
    datetime: dt.datetime = Field(
        description="When the event takes place (ISO 8601 with offset, e.g. Z or -03:00)",
    )

    @field_validator("datetime")
    @classmethod
    def require_offset(cls, v: dt.datetime) -> dt.datetime:
        """Rejects naive datetimes; converts aware ones to UTC."""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("datetime must include a UTC offset (e.g. 'Z' or '-03:00')")
        return v.astimezone(dt.timezone.utc)


class EventResponse(CamelModel):
    id: int = Field(description="Generated event id")
    event_type_id: int = Field(description="Id of the event type")
    datetime: dt.datetime = Field(description="When the event takes place (UTC)")
    event_type: Optional[str] = Field(
        default=None,
        description="Name of the event type (joined)",
    )

    @field_validator("datetime")
    @classmethod
    def as_utc(cls, v: dt.datetime) -> dt.datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=dt.timezone.utc)
        return v.astimezone(dt.timezone.utc)
