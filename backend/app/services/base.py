"""
Membership Backend — Generic Resource Service
===============================================

What:  The CRUD contract shared by every resource service.
Why:   All five resources translate a CRUD intent into exactly one storage
       call. The per-entity subclasses only declare their model, response
       schema and filterable columns.
How:   Each method receives the request's AsyncSession, issues one
       statement, and converts the ORM row into a response schema.

Contract:
    create(db, input)        → response (generated id included)
    get_by_id(db, id)        → response | None   (never raises for absence)
    get_many(db, conditions) → list[response]    (AND of conditions)
    update(db, id, input)    → response | None   (None: no row matched)
    remove(db, id)           → response | None   (last state of the row)

Mutations are conditional single statements:
    UPDATE ... WHERE id = :id RETURNING *
    DELETE ... WHERE id = :id RETURNING *
    A row removed by a concurrent request between the route's existence
    check and the mutation therefore yields None, not a storage error.

Error Handling:
    Any SQLAlchemyError is wrapped in StorageError with the driver's own
    message. Changes are flushed (not committed) so constraint violations
    surface here; the session dependency commits after the handler returns.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import StorageError
from app.services.filters import Condition, compose_filters

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


def storage_message(exc: SQLAlchemyError) -> str:
    """The driver's error text, without SQLAlchemy's statement/params suffix."""
    original = getattr(exc, "orig", None)
    return str(original) if original is not None else str(exc)


class CrudService(Generic[ModelT, ResponseT]):
    """
    Base class for resource services.

    Subclasses set:
        model:            SQLAlchemy model class
        response_schema:  Pydantic response model
        resource:         Label used in log lines
    and override filter_columns() when the list endpoint accepts filters.
    """

    model: Type[ModelT]
    response_schema: Type[ResponseT]
    resource: str = "resource"

    # ── Hooks ─────────────────────────────────────────────────────────────

    def filter_columns(self) -> Dict[str, Any]:
        """Field name → column expression accepted by get_many."""
        return {}

    def base_query(self) -> Select:
        return select(self.model)

    def to_response(self, obj: ModelT) -> ResponseT:
        return self.response_schema.model_validate(obj)

    def to_values(self, data: BaseModel) -> Dict[str, Any]:
        """Column values for insert/update, keyed by attribute name."""
        return data.model_dump()

    async def after_write(self, db: AsyncSession, obj: ModelT) -> ModelT:
        """Called after create/update; subclasses may reload related data."""
        return obj

    # ── Operations ────────────────────────────────────────────────────────

    async def create(self, db: AsyncSession, data: BaseModel) -> ResponseT:
        """Insert one row and return it with its generated id."""
        try:
            obj = self.model(**self.to_values(data))
            db.add(obj)
            await db.flush()
            obj = await self.after_write(db, obj)
        except SQLAlchemyError as e:
            logger.error("Failed to create %s: %s", self.resource, storage_message(e))
            raise StorageError(
                message=storage_message(e),
                context={"operation": "create", "resource": self.resource},
            ) from e

        logger.info("Created %s %s", self.resource, obj.id)
        return self.to_response(obj)

    async def get_by_id(self, db: AsyncSession, resource_id: int) -> Optional[ResponseT]:
        """Return the record with this primary key, or None."""
        try:
            result = await db.execute(
                self.base_query().where(self.model.id == resource_id)
            )
            obj = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                "Failed to fetch %s %s: %s", self.resource, resource_id, storage_message(e)
            )
            raise StorageError(
                message=storage_message(e),
                context={"operation": "get_by_id", "resource_id": resource_id},
            ) from e

        return self.to_response(obj) if obj is not None else None

    async def get_many(
        self,
        db: AsyncSession,
        conditions: Sequence[Condition] = (),
    ) -> List[ResponseT]:
        """Return every record matching all conditions (all records if none)."""
        query = self.base_query()
        clauses = compose_filters(conditions, self.filter_columns())
        if clauses:
            query = query.where(*clauses)
        query = query.order_by(self.model.id)

        try:
            result = await db.execute(query)
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Failed to list %s: %s", self.resource, storage_message(e))
            raise StorageError(
                message=storage_message(e),
                context={"operation": "get_many", "resource": self.resource},
            ) from e

        return [self.to_response(row) for row in rows]

    async def update(
        self,
        db: AsyncSession,
        resource_id: int,
        data: BaseModel,
    ) -> Optional[ResponseT]:
        """Replace all mutable fields of the record; None if it does not exist."""
        statement = (
            update(self.model)
            .where(self.model.id == resource_id)
            .values(**self.to_values(data))
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        try:
            result = await db.execute(statement)
            obj = result.scalar_one_or_none()
            if obj is not None:
                obj = await self.after_write(db, obj)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to update %s %s: %s", self.resource, resource_id, storage_message(e)
            )
            raise StorageError(
                message=storage_message(e),
                context={"operation": "update", "resource_id": resource_id},
            ) from e

        if obj is None:
            logger.info("Update of %s %s matched no row", self.resource, resource_id)
            return None

        logger.info("Updated %s %s", self.resource, resource_id)
        return self.to_response(obj)

    async def remove(self, db: AsyncSession, resource_id: int) -> Optional[ResponseT]:
        """Delete the record and return its last state; None if it does not exist."""
        statement = (
            delete(self.model)
            .where(self.model.id == resource_id)
            .returning(self.model)
        )
        try:
            result = await db.execute(statement)
            obj = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                "Failed to delete %s %s: %s", self.resource, resource_id, storage_message(e)
            )
            raise StorageError(
                message=storage_message(e),
                context={"operation": "remove", "resource_id": resource_id},
            ) from e

        if obj is None:
            logger.info("Delete of %s %s matched no row", self.resource, resource_id)
            return None

        logger.info("Deleted %s %s", self.resource, resource_id)
        return self.to_response(obj)
