"""
Membership Backend — Member Service
=====================================

What:  CRUD for members plus lookup by email.
Who:   Called by the /api/members route handlers.

Passwords:
    This service stores whatever it receives in `password`. The route
    handler hashes the plaintext before calling create/update; responses
    are built from MemberResponse, which has no password field.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import StorageError
from app.models.member import Member
from app.schemas.member import MemberResponse
from app.services.base import CrudService, storage_message

logger = logging.getLogger(__name__)


class MemberService(CrudService[Member, MemberResponse]):
    model = Member
    response_schema = MemberResponse
    resource = "member"

    def filter_columns(self) -> Dict[str, Any]:
        return {
            "name": Member.name,
            "email": Member.email,
            "department_id": Member.department_id,
            "role_id": Member.role_id,
        }

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[MemberResponse]:
        """Return the member registered with this exact email, or None."""
        try:
            result = await db.execute(select(Member).where(Member.email == email))
            member = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Failed to look up member by email: %s", storage_message(e))
            raise StorageError(
                message=storage_message(e),
                context={"operation": "get_by_email"},
            ) from e

        return self.to_response(member) if member is not None else None


member_service = MemberService()
