"""Domain value objects for EventFlow.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from eventflow.domain.value.common import RootValueObject, ValueObject
from eventflow.domain.value.identifiers import UserId


class CollaboratorRole(str, Enum):
    """Role a collaborator holds on an event's staff roster."""

    ADMIN = "admin"
    TICKETING = "ticketing"
    CHECK_IN = "check_in"
    VIEW_ONLY = "view_only"


class InviteStatus(str, Enum):
    """Status of a collaboration invite.

    Starts PENDING and never returns to it. ACCEPTED and DECLINED are
    terminal and exclusive.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class AcceptanceStep(str, Enum):
    """Step of the invite acceptance flow for one page load."""

    LOADING = "loading"
    INVALID = "invalid"
    DONE = "done"
    PREVIEW = "preview"
    ACCEPTED_REDIRECT = "accepted_redirect"
    DECLINED = "declined"


class InviteToken(RootValueObject[str]):
    """URL-safe invite token.

    The sole lookup key of the acceptance flow and a single-use capability.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    def redacted(self) -> str:
        """Token prefix safe for logs."""
        return self.root[:8] + "..."


class IdentitySession(ValueObject):
    """Signed-in identity as reported by the identity provider."""

    user_id: UserId
    email: str | None = None
