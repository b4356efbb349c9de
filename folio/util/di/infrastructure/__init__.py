"""Infrastructure providers.

Production implementations are imported here so that ``get_provider`` can
find them through ``__subclasses__()``.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
