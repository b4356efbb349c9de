"""Utility layer errors.

Raised while wiring the application together, before any request is
served, so they are never translated into HTTP responses.
"""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are missing or unsafe for the current environment."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches a requested component."""

    pass
