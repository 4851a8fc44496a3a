"""Dependency injection container."""

from collections.abc import Iterable
from typing import Type

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from eventflow.util.di import PROVIDERS, Component, ProviderBase


def mockable_components() -> set[Component]:
    """Names of the components that have swappable implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def select_provider(base: Type[ProviderBase], use_mock: bool) -> Type[ProviderBase]:
    """Pick the implementation of a provider entry.

    Raises:
        ValueError: If a mockable component lacks the requested implementation
    """
    if base.__mock_component__ is None:
        return base

    impl = next(
        (c for c in base.__subclasses__() if c.__is_mock__ == use_mock),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
    return impl


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the container.

    Args:
        mocked: Components to build from their mock implementation;
            production everywhere else

    Returns:
        Container that also backs the FastAPI integration

    Raises:
        ValueError: If a component name is unknown
    """
    mocked = set(mocked)
    unknown = mocked - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        select_provider(base, base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI app."""
    setup_dishka(container, app)
