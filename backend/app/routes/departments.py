"""
Membership Backend — Department Route Handlers
================================================

What:  CRUD endpoints under /api/departments.
How:   Parses path/query/body, applies the existence check on PUT/DELETE,
       delegates to DepartmentService.

Endpoints:
    POST   /api/departments          → 201 department
    GET    /api/departments?name=    → 200 [department]
    GET    /api/departments/{id}     → 200 department | 404
    PUT    /api/departments/{id}     → 200 department | 404
    DELETE /api/departments/{id}     → 200 last state | 404
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.guards import ResourceId, get_or_404, guarded_remove, guarded_update
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.department import DepartmentInput, DepartmentResponse
from app.services.department_service import department_service
from app.services.filters import Condition

router = APIRouter(prefix="/api", tags=["Departments"])

LABEL = "Department"

_NOT_FOUND = {404: {"description": "Department not found", "model": MessageResponse}}
_ERRORS = {
    400: {"description": "Malformed request", "model": MessageResponse},
    500: {"description": "Storage error", "model": ErrorResponse},
}


@router.post(
    "/departments",
    response_model=DepartmentResponse,
    status_code=201,
    responses=_ERRORS,
    summary="Create a department",
)
async def create_department(
    body: DepartmentInput,
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentResponse:
    return await department_service.create(db, body)


@router.get(
    "/departments",
    response_model=List[DepartmentResponse],
    responses=_ERRORS,
    summary="List departments",
)
async def list_departments(
    name: Optional[str] = Query(default=None, description="Substring of the name (case-insensitive)"),
    db: AsyncSession = Depends(get_db_session),
) -> List[DepartmentResponse]:
    conditions = []
    if name:
        conditions.append(Condition.contains("name", name))
    return await department_service.get_many(db, conditions)


@router.get(
    "/departments/{department_id}",
    response_model=DepartmentResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Get a department by id",
)
async def get_department(
    department_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentResponse:
    return await get_or_404(department_service, db, department_id, LABEL)


@router.put(
    "/departments/{department_id}",
    response_model=DepartmentResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Replace a department",
)
async def update_department(
    department_id: ResourceId,
    body: DepartmentInput,
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentResponse:
    return await guarded_update(department_service, db, department_id, body, LABEL)


@router.delete(
    "/departments/{department_id}",
    response_model=DepartmentResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Delete a department",
    description="Deletes the department and returns its last state.",
)
async def delete_department(
    department_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentResponse:
    return await guarded_remove(department_service, db, department_id, LABEL)
