"""
Membership Backend — Shared Pydantic Schemas
==============================================

What:  Base model and error envelopes shared by every resource.
Why:   The JSON contract uses camelCase keys (eventTypeId, zipCode) while the
       Python side uses snake_case. CamelModel bridges the two: it accepts
       either spelling on input and FastAPI serializes responses by alias.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Storage ids are positive 32-bit integers (INTEGER columns). Larger values
# are rejected as malformed requests before they reach the database.
MAX_RESOURCE_ID = 2**31 - 1


class CamelModel(BaseModel):
    """Base for all request/response models exchanged over the API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """
    Body for 400/404/409 responses.

    Example:
        {"message": "Department not found"}
    """
    message: str = Field(description="Human-readable description")
    details: Optional[List[Any]] = Field(
        default=None,
        description="Parsing errors, present on 400 responses only",
    )


class ErrorResponse(BaseModel):
    """
    Body for 500 responses.

    Example:
        {"error": "FOREIGN KEY constraint failed"}
    """
    error: str = Field(description="Error message reported by the failing component")
