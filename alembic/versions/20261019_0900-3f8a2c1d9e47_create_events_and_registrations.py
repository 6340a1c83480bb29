"""create_events_and_registrations

Revision ID: 3f8a2c1d9e47
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f8a2c1d9e47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ACTIVE = "status <> 'cancelled'"


def upgrade() -> None:
    """Create events and registrations tables."""
    op.create_table(
        "events",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        # Ownership and description
        sa.Column(
            "organizer_id",
            sa.Uuid(),
            nullable=False,
            comment="Owning organizer's user id",
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        # Time window
        sa.Column("start_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_at", sa.DateTime(timezone=True), nullable=False),
        # Location
        sa.Column("location_type", sa.String(length=20), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("virtual_link", sa.String(length=500), nullable=True),
        # Admission
        sa.Column(
            "capacity",
            sa.Integer(),
            nullable=False,
            comment="Maximum confirmed registrations",
        ),
        sa.Column(
            "registration_deadline", sa.DateTime(timezone=True), nullable=False
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="draft, published, cancelled",
        ),
        # Free-text metadata
        sa.Column(
            "tags",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
        ),
        sa.Column("image_url", sa.String(length=500), nullable=True),
        sa.Column("requirements", sa.Text(), nullable=True),
        sa.Column("agenda", sa.Text(), nullable=True),
        sa.Column(
            "cancellation_requested_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Set while a cancellation cascade is unfinished",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        op.f("ix_events_organizer_id"), "events", ["organizer_id"], unique=False
    )
    op.create_index(op.f("ix_events_status"), "events", ["status"], unique=False)
    op.create_index(
        op.f("ix_events_cancellation_requested_at"),
        "events",
        ["cancellation_requested_at"],
        unique=False,
    )
    op.create_index(
        "ix_events_status_start_at", "events", ["status", "start_at"], unique=False
    )

    op.create_table(
        "registrations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("event_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="confirmed, waitlisted, cancelled",
        ),
        sa.Column(
            "registration_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Admission time, waitlist order",
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("attended", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="RESTRICT"),
    )

    op.create_index(
        op.f("ix_registrations_event_id"),
        "registrations",
        ["event_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_registrations_user_id"),
        "registrations",
        ["user_id"],
        unique=False,
    )
    op.create_index(
        "ix_registrations_event_id_status",
        "registrations",
        ["event_id", "status"],
        unique=False,
    )
    # At most one live registration per (event, user)
    op.create_index(
        "uq_registrations_active_event_user",
        "registrations",
        ["event_id", "user_id"],
        unique=True,
        postgresql_where=sa.text(_ACTIVE),
        sqlite_where=sa.text(_ACTIVE),
    )


def downgrade() -> None:
    """Drop registrations and events tables."""
    op.drop_index(
        "uq_registrations_active_event_user",
        table_name="registrations",
        postgresql_where=sa.text(_ACTIVE),
        sqlite_where=sa.text(_ACTIVE),
    )
    op.drop_index("ix_registrations_event_id_status", table_name="registrations")
    op.drop_index(op.f("ix_registrations_user_id"), table_name="registrations")
    op.drop_index(op.f("ix_registrations_event_id"), table_name="registrations")
    op.drop_table("registrations")

    op.drop_index("ix_events_status_start_at", table_name="events")
    op.drop_index(op.f("ix_events_cancellation_requested_at"), table_name="events")
    op.drop_index(op.f("ix_events_status"), table_name="events")
    op.drop_index(op.f("ix_events_organizer_id"), table_name="events")
    op.drop_table("events")
