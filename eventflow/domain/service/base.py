"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the invite rules that span repository calls.
    """

    pass
