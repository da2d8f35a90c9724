"""
Membership Backend — Member Schemas
=====================================

What:  Request/response models for /api/members.

Security:
    MemberInput carries the plaintext password in; it is hashed by the
    route handler before the service sees it. MemberResponse has no
    password field at all, so neither the plaintext nor the hash can be
    echoed back to clients.
"""

from typing import Optional

from pydantic import Field

from app.schemas.common import MAX_RESOURCE_ID, CamelModel


class MemberInput(CamelModel):
    """Body for POST and PUT /api/members (full replace on PUT)."""
    email: str = Field(description="Login email, unique across members")
    password: str = Field(description="Plaintext password (stored hashed)")
    name: str = Field(description="Full name")
    cpf: str = Field(description="National ID (CPF)")
    street: Optional[str] = Field(default=None)
    neighborhood: Optional[str] = Field(default=None)
    city: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None)
    zip_code: Optional[str] = Field(default=None)
    department_id: int = Field(
        ge=1, le=MAX_RESOURCE_ID, description="Id of an existing department",
    )
    role_id: int = Field(
        ge=1, le=MAX_RESOURCE_ID, description="Id of an existing role",
    )


class MemberResponse(CamelModel):
    id: int = Field(description="Generated member id")
    email: str
    name: str
    cpf: str
    street: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    department_id: int
    role_id: int
