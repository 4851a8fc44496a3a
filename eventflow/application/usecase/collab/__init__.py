"""Collaboration invite use cases."""

from eventflow.application.usecase.collab.acceptance import (
    AcceptanceView,
    InviteAcceptanceFlow,
    render_acceptance,
)
from eventflow.application.usecase.collab.completion import (
    PendingInviteCompleter,
    PendingInviteCompletion,
)
from eventflow.application.usecase.collab.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from eventflow.application.usecase.collab.invite_email import (
    InviteEmail,
    render_invite_email,
)
from eventflow.application.usecase.collab.list_pending_invites import (
    ListPendingInvitesRequest,
    ListPendingInvitesResponse,
    ListPendingInvitesUseCase,
    PendingInviteItem,
)
from eventflow.application.usecase.collab.send_invite import (
    SendInviteRequest,
    SendInviteResponse,
    SendInviteUseCase,
)

__all__ = [
    "AcceptanceView",
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "InviteAcceptanceFlow",
    "InviteEmail",
    "ListPendingInvitesRequest",
    "ListPendingInvitesResponse",
    "ListPendingInvitesUseCase",
    "PendingInviteCompleter",
    "PendingInviteCompletion",
    "PendingInviteItem",
    "SendInviteRequest",
    "SendInviteResponse",
    "SendInviteUseCase",
    "render_acceptance",
    "render_invite_email",
]
