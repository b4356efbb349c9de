"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from folio.util.di import PROVIDERS, Component, ProviderBase, get_provider


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per PROVIDERS entry.

    Args:
        mocked: Components that should use their mock implementation

    Returns:
        Provider instances, ready for ``make_async_container``
    """
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables when first requested.
    """
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app; the last call wins.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
