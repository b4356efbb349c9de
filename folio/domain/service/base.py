"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that don't belong to a single
    entity, and talk to storage only through repository interfaces.
    """

    pass
