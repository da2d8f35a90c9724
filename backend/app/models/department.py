"""
Membership Backend — Department SQLAlchemy Model
==================================================

What:  ORM model representing the `departments` table.
Who:   Used by DepartmentService and by Alembic for schema management.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.member import Member


class Department(Base):
    """A department owning zero or more members."""

    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Unique by convention only: duplicates are not rejected by the schema
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    members: Mapped[List["Member"]] = relationship(back_populates="department")

    def __repr__(self) -> str:
        return f"<Department(id={self.id}, name='{self.name}')>"
