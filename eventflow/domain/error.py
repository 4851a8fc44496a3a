"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InviteNotFoundError(NotFoundError):
    """No invite matches the given id or token."""

    def __init__(self, identifier: str):
        super().__init__("Invite", identifier)


class DuplicateInviteError(DomainError):
    """A pending invite already exists for this event and email."""

    def __init__(self, event_id: str, email: str):
        self.event_id = event_id
        self.email = email
        super().__init__(f"Pending invite already exists for {email} on event {event_id}")


class InvalidTransitionError(DomainError):
    """Raised when an invite cannot move to the requested status."""

    def __init__(self, identifier: str, current: str, requested: str):
        self.identifier = identifier
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invite {identifier} is {current}, cannot change to {requested}"
        )
