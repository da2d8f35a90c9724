"""
Membership Backend — Existence-Checked Mutations
==================================================

What:  The read-before-write protocol shared by every update/delete handler.
How:   1. Guard: get_by_id; absent → NotFoundError (404)
       2. Act:   the service's conditional UPDATE/DELETE ... RETURNING
       3. A mutation that matched no row (the record was removed between
          the guard and the statement) is also reported as NotFoundError.

The guard and the mutation are two round-trips with no lock between them.
"""

from typing import Annotated, Any

from fastapi import Path
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.schemas.common import MAX_RESOURCE_ID
from app.services.base import CrudService


ResourceId = Annotated[
    int,
    Path(ge=1, le=MAX_RESOURCE_ID, description="Numeric resource id"),
]


async def get_or_404(
    service: CrudService,
    db: AsyncSession,
    resource_id: int,
    label: str,
) -> Any:
    """Return the record with this id or raise NotFoundError("<label> not found")."""
    record = await service.get_by_id(db, resource_id)
    if record is None:
        raise NotFoundError(resource=label, resource_id=resource_id)
    return record


async def guarded_update(
    service: CrudService,
    db: AsyncSession,
    resource_id: int,
    data: BaseModel,
    label: str,
) -> Any:
    await get_or_404(service, db, resource_id, label)
    updated = await service.update(db, resource_id, data)
    if updated is None:
        raise NotFoundError(resource=label, resource_id=resource_id)
    return updated


async def guarded_remove(
    service: CrudService,
    db: AsyncSession,
    resource_id: int,
    label: str,
) -> Any:
    await get_or_404(service, db, resource_id, label)
    removed = await service.remove(db, resource_id)
    if removed is None:
        raise NotFoundError(resource=label, resource_id=resource_id)
    return removed
