"""
Membership Backend — Role Schemas
===================================
"""

from pydantic import Field

from app.schemas.common import CamelModel


class RoleInput(CamelModel):
    """Body for POST and PUT /api/roles."""
    name: str = Field(description="Role name")


class RoleResponse(CamelModel):
    id: int = Field(description="Generated role id")
    name: str = Field(description="Role name")
