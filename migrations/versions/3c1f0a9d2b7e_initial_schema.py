"""initial_schema

Create the schema for collaboration invites:
- Events (display fields read by the invite lifecycle)
- Event collaborators (one row per invite, keyed by invite token)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-17 10:12:41.204518

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE collaborator_status AS ENUM ('pending', 'accepted', 'declined');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # EVENTS table
    # ========================================================================
    op.create_table(
        "events",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("date", sa.Date(), nullable=True),
        sa.Column("venue_name", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # EVENT_COLLABORATORS table
    # ========================================================================
    op.create_table(
        "event_collaborators",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("invite_token", sa.String(255), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "accepted",
                "declined",
                name="collaborator_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("invite_token"),
    )
    op.create_index(
        "idx_event_collaborators_event_id", "event_collaborators", ["event_id"]
    )
    op.create_index(
        "idx_event_collaborators_user_id", "event_collaborators", ["user_id"]
    )
    op.create_index(
        "idx_event_collaborators_email_status",
        "event_collaborators",
        ["email", "status"],
    )

    # One pending invite per email and event
    op.execute("""
        CREATE UNIQUE INDEX idx_event_collaborators_unique_pending
        ON event_collaborators (event_id, email)
        WHERE status = 'pending'
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("event_collaborators")
    op.drop_table("events")
    op.execute("DROP TYPE IF EXISTS collaborator_status")
