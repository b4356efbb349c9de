"""Unit tests for provider selection."""

import pytest

from folio.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    ProviderBase,
    get_provider,
    mockable_components,
)
from folio.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_resolves_to_itself(self):
        """Non-mockable providers are used as-is."""
        assert get_provider(ProdConfigProvider) is ProdConfigProvider
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_mockable_component(self):
        """Mockable components pick the implementation by flag."""
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_missing_implementation(self):
        """A component without the requested implementation is an error."""

        class ScratchProvider(ProviderBase):
            __mock_component__ = "persistence"

        with pytest.raises(DependencyInjectionError, match="persistence"):
            get_provider(ScratchProvider, use_mock=True)

    def test_mockable_components(self):
        """Persistence is the only swappable component."""
        assert mockable_components() == {"persistence"}


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component(self):
        """Unmocking an unknown component is rejected."""
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"email"})
