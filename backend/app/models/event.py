"""
Membership Backend — Event SQLAlchemy Model
=============================================

What:  ORM model representing the `events` table.
Who:   Used by EventService for CRUD operations and by Alembic.

Table Design:
    - event_type_id: Foreign key to event_types; the database rejects
      events pointing at a missing type (surfaced to clients as a 500
      carrying the storage error message).
    - datetime: TIMESTAMP WITH TIME ZONE; day filters compare against
      UTC midnight boundaries.

Query Patterns:
    - Get single event with its type name:
      SELECT events.*, event_types.* FROM events JOIN event_types ... WHERE events.id = :id
      → EventService joins explicitly and loads the relationship from
        that join; async sessions cannot lazy-load on attribute access.
    - Events on a given day:
      SELECT ... WHERE datetime >= :day AND datetime < :day + 1
      → Uses idx_events_datetime for a range scan.
"""

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.event_type import EventType


class Event(Base):
    """An event of a given type happening at a point in time."""

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    event_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("event_types.id"),
        nullable=False,
        comment="Type of this event",
    )

    datetime: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="When the event takes place (UTC)",
    )

    event_type: Mapped["EventType"] = relationship(back_populates="events")

    __table_args__ = (
        Index("idx_events_datetime", "datetime"),
    )

    def __repr__(self) -> str:
        return (
            f"<Event(id={self.id}, event_type_id={self.event_type_id}, "
            f"datetime='{self.datetime}')>"
        )
