"""
Membership Backend — Member Route Handlers
============================================

What:  CRUD endpoints under /api/members.
How:   Same protocol as the other resources, plus two member rules:
       1. Registration with an email already on file is refused with 409
          before anything is written.
       2. The plaintext password is replaced by its salted hash before the
          body reaches MemberService (on create and on update).

Endpoints:
    POST   /api/members                                   → 201 member | 409
    GET    /api/members?name=&email=&departmentId=&roleId= → 200 [member]
    GET    /api/members/{id}                              → 200 member | 404
    PUT    /api/members/{id}                              → 200 member | 404
    DELETE /api/members/{id}                              → 200 last state | 404

No response body ever contains the password or its hash.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import ConflictError
from app.routes.guards import ResourceId, get_or_404, guarded_remove, guarded_update
from app.schemas.common import MAX_RESOURCE_ID, ErrorResponse, MessageResponse
from app.schemas.member import MemberInput, MemberResponse
from app.security import PasswordHasher, get_password_hasher
from app.services.filters import Condition
from app.services.member_service import member_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Members"])

LABEL = "Member"
DUPLICATE_EMAIL_MESSAGE = "Member has already registered with this email address"

_NOT_FOUND = {404: {"description": "Member not found", "model": MessageResponse}}
_ERRORS = {
    400: {"description": "Malformed request", "model": MessageResponse},
    500: {"description": "Storage or configuration error", "model": ErrorResponse},
}


def _with_hashed_password(body: MemberInput, hasher: PasswordHasher) -> MemberInput:
    return body.model_copy(update={"password": hasher.hash(body.password)})


@router.post(
    "/members",
    response_model=MemberResponse,
    status_code=201,
    responses={
        409: {"description": "Email already registered", "model": MessageResponse},
        **_ERRORS,
    },
    summary="Register a member",
)
async def create_member(
    body: MemberInput,
    db: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> MemberResponse:
    existing = await member_service.get_by_email(db, body.email)
    if existing is not None:
        logger.info("Refused registration: email already belongs to member %s", existing.id)
        raise ConflictError(
            message=DUPLICATE_EMAIL_MESSAGE,
            context={"member_id": existing.id},
        )

    return await member_service.create(db, _with_hashed_password(body, hasher))


@router.get(
    "/members",
    response_model=List[MemberResponse],
    responses=_ERRORS,
    summary="List members",
)
async def list_members(
    name: Optional[str] = Query(default=None, description="Substring of the name (case-insensitive)"),
    email: Optional[str] = Query(default=None, description="Substring of the email (case-insensitive)"),
    department_id: Optional[int] = Query(
        default=None, alias="departmentId", ge=1, le=MAX_RESOURCE_ID,
    ),
    role_id: Optional[int] = Query(
        default=None, alias="roleId", ge=1, le=MAX_RESOURCE_ID,
    ),
    db: AsyncSession = Depends(get_db_session),
) -> List[MemberResponse]:
    conditions = []
    if name:
        conditions.append(Condition.contains("name", name))
    if email:
        conditions.append(Condition.contains("email", email))
    if department_id is not None:
        conditions.append(Condition.equals("department_id", department_id))
    if role_id is not None:
        conditions.append(Condition.equals("role_id", role_id))
    return await member_service.get_many(db, conditions)


@router.get(
    "/members/{member_id}",
    response_model=MemberResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Get a member by id",
)
async def get_member(
    member_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> MemberResponse:
    return await get_or_404(member_service, db, member_id, LABEL)


@router.put(
    "/members/{member_id}",
    response_model=MemberResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Replace a member",
    description="Full replace; the password is re-hashed from the submitted plaintext.",
)
async def update_member(
    member_id: ResourceId,
    body: MemberInput,
    db: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> MemberResponse:
    return await guarded_update(
        member_service, db, member_id, _with_hashed_password(body, hasher), LABEL,
    )


@router.delete(
    "/members/{member_id}",
    response_model=MemberResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Delete a member",
    description="Deletes the member and returns its last state (without password).",
)
async def delete_member(
    member_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> MemberResponse:
    return await guarded_remove(member_service, db, member_id, LABEL)
