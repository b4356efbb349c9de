"""Test doubles for the mockable DI components.

Importing this package registers the mock providers with their component
bases.
"""

from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "build_test_container",
]
