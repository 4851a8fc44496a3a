"""Client-context collaborators of the acceptance flow.

Pending-invite handoff across the sign-in redirect, the identity session
surface, and navigation.
"""

from eventflow.adapter.browser.handoff import (
    CookiePendingInviteHandoff,
    InMemoryPendingInviteHandoff,
    PendingInviteHandoff,
)
from eventflow.adapter.browser.identity import (
    IdentityProvider,
    LocalIdentityProvider,
    SessionListener,
    Subscription,
)
from eventflow.adapter.browser.navigation import Navigator, RecordingNavigator

__all__ = [
    "CookiePendingInviteHandoff",
    "IdentityProvider",
    "InMemoryPendingInviteHandoff",
    "LocalIdentityProvider",
    "Navigator",
    "PendingInviteHandoff",
    "RecordingNavigator",
    "SessionListener",
    "Subscription",
]
