"""
Membership Backend — Department Schemas
=========================================
"""

from pydantic import Field

from app.schemas.common import CamelModel


class DepartmentInput(CamelModel):
    """Body for POST and PUT /api/departments (full replace on PUT)."""
    name: str = Field(description="Department name")


class DepartmentResponse(CamelModel):
    id: int = Field(description="Generated department id")
    name: str = Field(description="Department name")
