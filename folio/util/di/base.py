"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base for every Folio provider.

    A provider class that declares ``__mock_component__`` is a mockable
    component: it is never instantiated itself. Instead one subclass with
    ``__is_mock__ = False`` serves production and one with
    ``__is_mock__ = True`` serves tests.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
