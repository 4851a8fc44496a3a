"""Domain value objects for EventFlow."""

from eventflow.domain.value.identifiers import EventId, InviteId, UserId
from eventflow.domain.value.roles import (
    NEUTRAL_ROLE_COLOR,
    ROLE_DISPLAY,
    RoleDisplay,
    role_display,
    role_summary,
    role_title,
)
from eventflow.domain.value.types import (
    AcceptanceStep,
    CollaboratorRole,
    IdentitySession,
    InviteStatus,
    InviteToken,
)

__all__ = [
    # Identifiers
    "EventId",
    "InviteId",
    "UserId",
    # Types
    "AcceptanceStep",
    "CollaboratorRole",
    "IdentitySession",
    "InviteStatus",
    "InviteToken",
    # Role display
    "NEUTRAL_ROLE_COLOR",
    "ROLE_DISPLAY",
    "RoleDisplay",
    "role_display",
    "role_summary",
    "role_title",
]
