"""
Membership Backend — EventType SQLAlchemy Model
=================================================

What:  ORM model representing the `event_types` table.
Why:   Events reference a type by id; the type name is joined into event
       reads and is what the `name` filter on GET /api/events matches.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.event import Event


class EventType(Base):
    __tablename__ = "event_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    events: Mapped[List["Event"]] = relationship(back_populates="event_type")

    def __repr__(self) -> str:
        return f"<EventType(id={self.id}, name='{self.name}')>"
