"""Domain value objects for Folio."""

from folio.domain.value.identifiers import CommentId, PostId
from folio.domain.value.types import (
    UNKNOWN_INITIALS,
    InitialsColor,
    PostStatus,
    Slug,
    derive_initials,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    # Types
    "Slug",
    "PostStatus",
    "InitialsColor",
    "UNKNOWN_INITIALS",
    "derive_initials",
]
