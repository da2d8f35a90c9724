"""
Membership Backend — Event Type Schemas
=========================================
"""

from pydantic import Field

from app.schemas.common import CamelModel


class EventTypeInput(CamelModel):
    """Body for POST and PUT /api/event-types."""
    name: str = Field(description="Event type name")


class EventTypeResponse(CamelModel):
    id: int = Field(description="Generated event type id")
    name: str = Field(description="Event type name")
