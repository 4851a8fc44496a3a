"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from eventflow.domain.model.invite import Invite
from eventflow.domain.value import EventId, InviteId, InviteStatus, InviteToken, UserId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Lookups return the invite with its event's display fields joined onto
    ``Invite.event``.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Used by the mailer. Joins the event's name and date.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InviteToken) -> Invite | None:
        """Find an invite by token.

        Used when the invitee opens the accept-URL. Joins the event's
        name, date and venue name.

        Args:
            token: The invite token

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_by_event_and_email(
        self, event_id: EventId, email: str
    ) -> Invite | None:
        """Find the pending invite for an email on an event.

        Used during invite creation to prevent duplicates.

        Args:
            event_id: The event's ID
            email: Invitee email (compared case-insensitively)

        Returns:
            The pending invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_for_invitee(
        self, user_id: UserId, email: str | None
    ) -> list[Invite]:
        """Find pending invites addressed to a user.

        Matches on ``user_id`` or on email, without duplicates, newest first.

        Args:
            user_id: Signed-in user's ID
            email: Signed-in user's email, if known

        Returns:
            List of pending invites with event fields joined
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: The invite to save

        Returns:
            The saved invite

        Raises:
            IntegrityError: If the token is already in use
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        token: InviteToken,
        status: InviteStatus,
        *,
        expected: InviteStatus,
        accepted_at: datetime | None = None,
        user_id: UserId | None = None,
    ) -> bool:
        """Conditionally update an invite's status, keyed by token.

        The write only happens while the stored status still equals
        ``expected`` (compare-and-swap). ``accepted_at`` and ``user_id`` are
        written only when given.

        Args:
            token: The invite token
            status: New status
            expected: Status the invite must currently have
            accepted_at: Acceptance time, for ACCEPTED
            user_id: Accepting identity, for ACCEPTED

        Returns:
            True if a row was updated, False if no invite matched the guard
        """
        pass
