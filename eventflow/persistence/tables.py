"""SQLAlchemy table definitions for EventFlow.

Only the tables the invite lifecycle touches. They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Date,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# EVENTS TABLE (read-only for invites)
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("date", Date, nullable=True),
    Column("venue_name", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# EVENT COLLABORATORS TABLE (one row per invite)
# ============================================================================
event_collaborators_table = Table(
    "event_collaborators",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "event_id", UUID, ForeignKey("events.id", ondelete="CASCADE"), nullable=False
    ),
    Column("email", String(255), nullable=False),
    # Free text so roles added later still load
    Column("role", Text, nullable=False),
    Column("invite_token", String(255), nullable=False, unique=True),
    Column(
        "status",
        Enum(
            "pending",
            "accepted",
            "declined",
            name="collaborator_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    # Identity provider user ID, no local users table
    Column("user_id", UUID, nullable=True),
)

Index("idx_event_collaborators_event_id", event_collaborators_table.c.event_id)
Index("idx_event_collaborators_user_id", event_collaborators_table.c.user_id)
Index(
    "idx_event_collaborators_email_status",
    event_collaborators_table.c.email,
    event_collaborators_table.c.status,
)
