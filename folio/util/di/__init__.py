"""Dependency injection module."""

from typing import Type

from folio.util.di.application import ProdApplicationProvider
from folio.util.di.base import Component, ProviderBase
from folio.util.di.core import ProdConfigProvider
from folio.util.di.domain import ProdDomainProvider
from folio.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from folio.util.error import DependencyInjectionError

# Concrete providers first, then mockable components
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components in PROVIDERS that can be swapped for mocks."""
    return {
        base.__mock_component__ for base in PROVIDERS if base.__mock_component__ is not None
    }


def get_provider(base: Type[ProviderBase], use_mock: bool = False) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class that should be instantiated.

    Concrete providers resolve to themselves. Mockable components resolve
    to the subclass whose ``__is_mock__`` matches ``use_mock``; subclasses
    are found through ``__subclasses__()``, so the module defining a mock
    must be imported before this is called.

    Raises:
        DependencyInjectionError: If the component has no matching implementation
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ is use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation registered for component '{base.__mock_component__}'"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
