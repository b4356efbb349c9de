"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from folio.domain.error import NotFoundError, ValidationError
from folio.domain.value import Slug


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_slug(value: str) -> Slug:
    """Parse a post slug from a URL segment.

    A malformed slug can never match a post, so it is reported as missing.

    Raises:
        NotFoundError: If the slug is not well-formed
    """
    try:
        return Slug(value)
    except PydanticValidationError:
        raise NotFoundError("Blog post", value)


def parse_uuid(value: str, field: str) -> UUID:
    """Parse a UUID request field.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a valid UUID")
