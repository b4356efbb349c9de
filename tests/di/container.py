"""Test container builder with selective unmocking."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from folio.util.di import Component, mockable_components
from folio.util.di.container import build_providers


def build_test_container(unmock: Collection[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Args:
        unmock: Components that should use their production implementation

    Returns:
        Configured test container

    Raises:
        ValueError: If ``unmock`` names a component that cannot be mocked

    Examples:
        # Unit tests - in-memory persistence
        container = build_test_container()

        # Integration tests - PostgreSQL at DATABASE__URL
        container = build_test_container(unmock={"persistence"})
    """
    available = mockable_components()
    unmock = set(unmock or ())
    unknown = unmock - available
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return make_async_container(
        *build_providers(mocked=available - unmock), FastapiProvider()
    )
