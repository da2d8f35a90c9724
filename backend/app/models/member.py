"""
Membership Backend — Member SQLAlchemy Model
==============================================

What:  ORM model representing the `members` table.
Who:   Used by MemberService and by Alembic.

Table Design:
    - email: UNIQUE constraint; the registration endpoint pre-checks it to
      answer 409, updates rely on the constraint (→ StorageError).
    - password: Salted hash only, never the plaintext. Never serialized in
      API responses (MemberResponse has no password field).
    - cpf: National ID (Brazilian CPF), stored as entered.
    - Address fields are optional.
    - department_id / role_id: Foreign keys enforced by the database.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.department import Department
    from app.models.role import Role


class Member(Base):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cpf: Mapped[str] = mapped_column(String(20), nullable=False)

    # ── Address ───────────────────────────────────────────────────────────
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    neighborhood: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # ── Ownership ─────────────────────────────────────────────────────────
    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id"), nullable=False
    )
    role_id: Mapped[int] = mapped_column(Integer, ForeignKey("roles.id"), nullable=False)

    department: Mapped["Department"] = relationship(back_populates="members")
    role: Mapped["Role"] = relationship(back_populates="members")

    def __repr__(self) -> str:
        # Never includes the password hash
        return f"<Member(id={self.id}, email='{self.email}')>"
