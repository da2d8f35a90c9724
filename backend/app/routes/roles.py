"""
Membership Backend — Role Route Handlers
==========================================

Endpoints:
    POST   /api/roles          → 201 role
    GET    /api/roles?name=    → 200 [role]
    GET    /api/roles/{id}     → 200 role | 404
    PUT    /api/roles/{id}     → 200 role | 404
    DELETE /api/roles/{id}     → 204 (no body) | 404

Unlike the other resources, deleting a role answers 204 with an empty body.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.guards import ResourceId, get_or_404, guarded_remove, guarded_update
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.role import RoleInput, RoleResponse
from app.services.filters import Condition
from app.services.role_service import role_service

router = APIRouter(prefix="/api", tags=["Roles"])

LABEL = "Role"

_NOT_FOUND = {404: {"description": "Role not found", "model": MessageResponse}}
_ERRORS = {
    400: {"description": "Malformed request", "model": MessageResponse},
    500: {"description": "Storage error", "model": ErrorResponse},
}


@router.post(
    "/roles",
    response_model=RoleResponse,
    status_code=201,
    responses=_ERRORS,
    summary="Create a role",
)
async def create_role(
    body: RoleInput,
    db: AsyncSession = Depends(get_db_session),
) -> RoleResponse:
    return await role_service.create(db, body)


@router.get(
    "/roles",
    response_model=List[RoleResponse],
    responses=_ERRORS,
    summary="List roles",
)
async def list_roles(
    name: Optional[str] = Query(default=None, description="Substring of the name (case-insensitive)"),
    db: AsyncSession = Depends(get_db_session),
) -> List[RoleResponse]:
    conditions = []
    if name:
        conditions.append(Condition.contains("name", name))
    return await role_service.get_many(db, conditions)


@router.get(
    "/roles/{role_id}",
    response_model=RoleResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Get a role by id",
)
async def get_role(
    role_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> RoleResponse:
    return await get_or_404(role_service, db, role_id, LABEL)


@router.put(
    "/roles/{role_id}",
    response_model=RoleResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Replace a role",
)
async def update_role(
    role_id: ResourceId,
    body: RoleInput,
    db: AsyncSession = Depends(get_db_session),
) -> RoleResponse:
    return await guarded_update(role_service, db, role_id, body, LABEL)


@router.delete(
    "/roles/{role_id}",
    status_code=204,
    response_class=Response,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Delete a role",
)
async def delete_role(
    role_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await guarded_remove(role_service, db, role_id, LABEL)
    return Response(status_code=204)
