"""Invite domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from eventflow.domain.error import (
    DuplicateInviteError,
    InvalidTransitionError,
    InviteNotFoundError,
)
from eventflow.domain.model.invite import Invite
from eventflow.domain.repository import InviteRepository
from eventflow.domain.value import (
    CollaboratorRole,
    EventId,
    InviteId,
    InviteStatus,
    InviteToken,
    UserId,
)

from .base import Service


class InviteService(Service):
    """Domain service for collaboration invite operations.

    All status changes go through a compare-and-swap on the stored status,
    so the first terminal write wins and replays are harmless.
    """

    def __init__(self, invite_repository: InviteRepository) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
        """
        self.invite_repository = invite_repository

    async def create_invite(
        self,
        event_id: EventId,
        email: str,
        role: CollaboratorRole,
        invite_token: InviteToken,
    ) -> Invite:
        """Create a new pending invite.

        Args:
            event_id: Event the invitee will join
            email: Invitee email
            role: Role on the event's staff roster
            invite_token: Unique invite token

        Returns:
            Created invite

        Raises:
            DuplicateInviteError: If a pending invite already exists
        """
        email = email.strip().lower()
        with logfire.span(
            "invite_service.create_invite",
            event_id=str(event_id),
            email=email,
            role=role.value,
        ):
            existing = await self.invite_repository.find_pending_by_event_and_email(
                event_id, email
            )
            if existing:
                logfire.warn(
                    "Invite already exists",
                    event_id=str(event_id),
                    invite_id=str(existing.id),
                )
                raise DuplicateInviteError(str(event_id), email)

            invite = Invite(
                id=InviteId(uuid4()),
                event_id=event_id,
                email=email,
                role=role.value,
                invite_token=invite_token,
                status=InviteStatus.PENDING,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self.invite_repository.save(invite)
            logfire.info(
                "Invite created",
                invite_id=str(saved.id),
                event_id=str(event_id),
            )
            return saved

    async def get_invite_by_token(self, token: InviteToken) -> Invite | None:
        """Get invite by token.

        Args:
            token: Invite token

        Returns:
            Invite if found, None otherwise
        """
        with logfire.span("invite_service.get_invite_by_token", token=token.redacted()):
            invite = await self.invite_repository.find_by_token(token)
            if invite:
                logfire.info(
                    "Invite found",
                    invite_id=str(invite.id),
                    status=invite.status.value,
                )
            else:
                logfire.warn("Invite not found", token=token.redacted())
            return invite

    async def get_invite_by_id(self, invite_id: InviteId) -> Invite:
        """Get invite by ID.

        Args:
            invite_id: Invite ID

        Returns:
            The invite

        Raises:
            InviteNotFoundError: If no invite has this ID
        """
        with logfire.span("invite_service.get_invite_by_id", invite_id=str(invite_id)):
            invite = await self.invite_repository.find_by_id(invite_id)
            if not invite:
                logfire.warn("Invite not found", invite_id=str(invite_id))
                raise InviteNotFoundError(str(invite_id))
            return invite

    async def accept_invite(self, token: InviteToken, user_id: UserId) -> Invite:
        """Mark an invite as accepted by a user.

        Accepting an already accepted invite changes nothing and returns it
        as stored.

        Args:
            token: Invite token
            user_id: Accepting identity

        Returns:
            The accepted invite

        Raises:
            InviteNotFoundError: If no invite has this token
            InvalidTransitionError: If the invite was declined
        """
        with logfire.span(
            "invite_service.accept_invite",
            token=token.redacted(),
            user_id=str(user_id),
        ):
            updated = await self.invite_repository.update_status(
                token,
                InviteStatus.ACCEPTED,
                expected=InviteStatus.PENDING,
                accepted_at=datetime.now(timezone.utc),
                user_id=user_id,
            )
            invite = await self.invite_repository.find_by_token(token)
            if invite is None:
                logfire.error("Invite not found for acceptance", token=token.redacted())
                raise InviteNotFoundError(token.redacted())

            if updated:
                logfire.info(
                    "Invite accepted",
                    invite_id=str(invite.id),
                    user_id=str(user_id),
                )
            elif invite.status == InviteStatus.ACCEPTED:
                logfire.info("Invite already accepted", invite_id=str(invite.id))
            else:
                logfire.warn(
                    "Invite acceptance refused",
                    invite_id=str(invite.id),
                    status=invite.status.value,
                )
                raise InvalidTransitionError(
                    str(invite.id), invite.status.value, InviteStatus.ACCEPTED.value
                )
            return invite

    async def decline_invite(self, token: InviteToken) -> Invite:
        """Mark an invite as declined.

        No identity is involved. Declining twice changes nothing.

        Args:
            token: Invite token

        Returns:
            The declined invite

        Raises:
            InviteNotFoundError: If no invite has this token
            InvalidTransitionError: If the invite was already accepted
        """
        with logfire.span("invite_service.decline_invite", token=token.redacted()):
            updated = await self.invite_repository.update_status(
                token, InviteStatus.DECLINED, expected=InviteStatus.PENDING
            )
            invite = await self.invite_repository.find_by_token(token)
            if invite is None:
                logfire.error("Invite not found for decline", token=token.redacted())
                raise InviteNotFoundError(token.redacted())

            if updated or invite.status == InviteStatus.DECLINED:
                logfire.info("Invite declined", invite_id=str(invite.id))
                return invite

            logfire.warn(
                "Invite decline refused",
                invite_id=str(invite.id),
                status=invite.status.value,
            )
            raise InvalidTransitionError(
                str(invite.id), invite.status.value, InviteStatus.DECLINED.value
            )

    async def list_pending_for_invitee(
        self, user_id: UserId, email: str | None
    ) -> list[Invite]:
        """List pending invites addressed to a signed-in user.

        Args:
            user_id: Signed-in user's ID
            email: Signed-in user's email, if known

        Returns:
            Pending invites, newest first
        """
        with logfire.span(
            "invite_service.list_pending_for_invitee", user_id=str(user_id)
        ):
            invites = await self.invite_repository.find_pending_for_invitee(
                user_id, email.strip().lower() if email else None
            )
            logfire.info(
                "Pending invites listed", user_id=str(user_id), count=len(invites)
            )
            return invites
