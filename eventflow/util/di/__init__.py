"""Dependency injection module.

``PROVIDERS`` lists one entry per component. Concrete providers are used
as-is; mockable ones (those with ``__mock_component__`` set) are bases
whose production and mock subclasses are chosen when the container is
built. Mock subclasses live under ``tests/di`` and register themselves on
import.
"""

from typing import Type

from eventflow.util.di.application import ProdApplicationProvider
from eventflow.util.di.base import Component, ProviderBase
from eventflow.util.di.core import ProdConfigProvider
from eventflow.util.di.domain import ProdDomainProvider
from eventflow.util.di.infrastructure import (
    MailProvider,
    PersistenceProvider,
    ProdMailProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    MailProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "MailProvider",
    "PersistenceProvider",
    "ProdMailProvider",
    "ProdPersistenceProvider",
]
