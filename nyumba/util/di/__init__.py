"""Dependency injection wiring.

Providers are grouped by layer. Persistence is the only mockable
component: production uses PostgreSQL, tests use in-memory repositories.
"""

from typing import Type

from nyumba.util.di.application import ProdApplicationProvider
from nyumba.util.di.base import Component, ProviderBase
from nyumba.util.di.core import ProdConfigProvider
from nyumba.util.di.domain import ProdDomainProvider
from nyumba.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Order does not matter to dishka; it is kept layer by layer for reading
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Concrete providers are returned as-is. For a mockable base, the
    subclass whose ``__is_mock__`` matches ``use_mock`` is returned.

    Raises:
        ValueError: If the base has no implementation of the requested kind
    """
    if not base.is_mockable():
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    name = base.__mock_component__ or base.__name__
    raise ValueError(f"No {kind} implementation for {name}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
