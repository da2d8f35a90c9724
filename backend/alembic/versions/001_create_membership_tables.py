"""Create membership tables

Revision ID: 001
Revises: None
Create Date: 2024-05-20 00:00:00.000000+00:00

What:  Creates departments, roles, event_types, events and members.
Order: Parent tables first so the foreign keys of events and members
       resolve; downgrade drops in reverse.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _named_table(table_name: str) -> None:
    op.create_table(
        table_name,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def upgrade() -> None:
    _named_table("departments")
    _named_table("roles")
    _named_table("event_types")

    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "event_type_id",
            sa.Integer(),
            nullable=False,
            comment="Type of this event",
        ),
        sa.Column(
            "datetime",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            comment="When the event takes place (UTC)",
        ),
        sa.ForeignKeyConstraint(["event_type_id"], ["event_types.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    # Day filter: WHERE datetime >= :start AND datetime < :end
    op.create_index("idx_events_datetime", "events", ["datetime"])

    op.create_table(
        "members",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("cpf", sa.String(20), nullable=False),
        sa.Column("street", sa.String(255), nullable=True),
        sa.Column("neighborhood", sa.String(255), nullable=True),
        sa.Column("city", sa.String(255), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("zip_code", sa.String(20), nullable=True),
        sa.Column("department_id", sa.Integer(), nullable=False),
        sa.Column("role_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"]),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )


def downgrade() -> None:
    """Drops every membership table. All data is lost."""
    op.drop_table("members")
    op.drop_index("idx_events_datetime", table_name="events")
    op.drop_table("events")
    op.drop_table("event_types")
    op.drop_table("roles")
    op.drop_table("departments")
