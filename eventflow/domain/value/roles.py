"""Display metadata for collaborator roles.

Shared by the invite email and the acceptance page so both describe a
role the same way. Unknown role strings never fail: they render as-is
with neutral styling.
"""

from eventflow.domain.value.common import ValueObject
from eventflow.domain.value.types import CollaboratorRole

NEUTRAL_ROLE_COLOR = "#5a5a72"


class RoleDisplay(ValueObject):
    """Human-readable label, description and accent color for a role."""

    label: str
    description: str
    color: str = NEUTRAL_ROLE_COLOR


ROLE_DISPLAY: dict[CollaboratorRole, RoleDisplay] = {
    CollaboratorRole.ADMIN: RoleDisplay(
        label="Admin",
        description="Full access except transferring ownership",
        color="#818cf8",
    ),
    CollaboratorRole.TICKETING: RoleDisplay(
        label="Ticketing",
        description="Manage ticket tiers, orders and sales",
        color="#c9a84c",
    ),
    CollaboratorRole.CHECK_IN: RoleDisplay(
        label="Check-in",
        description="Scan tickets and manage guest check-in",
        color="#10b981",
    ),
    CollaboratorRole.VIEW_ONLY: RoleDisplay(
        label="View Only",
        description="Read-only access to all sections",
        color=NEUTRAL_ROLE_COLOR,
    ),
}


def _known_role(raw: str) -> CollaboratorRole | None:
    try:
        return CollaboratorRole(raw)
    except ValueError:
        return None


def role_display(raw: str) -> RoleDisplay:
    """Display metadata for a raw role value.

    Args:
        raw: Role as stored on the invite

    Returns:
        Known metadata, or the raw string with an empty description and
        the neutral color
    """
    role = _known_role(raw)
    if role is None:
        return RoleDisplay(label=raw, description="", color=NEUTRAL_ROLE_COLOR)
    return ROLE_DISPLAY[role]


def role_title(raw: str) -> str:
    """Capitalised, spaced role name (``check_in`` -> ``Check in``)."""
    spaced = raw.replace("_", " ").strip()
    if not spaced:
        return raw
    return spaced[0].upper() + spaced[1:]


def role_summary(raw: str) -> str:
    """One-line role summary used in emails.

    ``Check-in — scan tickets and manage guest check-in``. Empty for
    unknown roles.
    """
    role = _known_role(raw)
    if role is None:
        return ""
    display = ROLE_DISPLAY[role]
    description = display.description[0].lower() + display.description[1:]
    return f"{display.label} — {description}"
