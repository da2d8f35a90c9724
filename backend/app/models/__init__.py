"""
Membership Backend — ORM Models
=================================

Importing this package registers every model with Base.metadata, which
Alembic autogenerate and the test suite's create_all rely on.
"""

from app.models.department import Department
from app.models.event import Event
from app.models.event_type import EventType
from app.models.member import Member
from app.models.role import Role

__all__ = ["Department", "Event", "EventType", "Member", "Role"]
