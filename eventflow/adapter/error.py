"""Errors raised by adapters to external systems."""


class AdapterError(Exception):
    """Base adapter error."""


class ProviderError(AdapterError):
    """An external provider failed or refused a request.

    Never retried automatically; callers either surface it or degrade.
    """

    provider: str = "external"
