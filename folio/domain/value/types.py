"""Domain value objects for Folio.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and small pieces of business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from folio.domain.value.common import RootValueObject

UNKNOWN_INITIALS = "??"


class PostStatus(str, Enum):
    """Publication state of a blog post.

    Only published posts are visible to (and commentable by) the public.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    SCHEDULED = "scheduled"
    ARCHIVED = "archived"


class InitialsColor(str, Enum):
    """Avatar colour assigned to a commenter's initials."""

    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    ORANGE = "orange"
    RED = "red"
    CYAN = "cyan"


class Slug(RootValueObject[str]):
    """URL-safe slug for blog posts.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'shipping-a-side-project', 'notes-on-fastapi-2025'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


def derive_initials(name: str | None) -> str:
    """Derive avatar initials from an author name.

    Takes the first letter of up to the first two space-separated words and
    uppercases them. Empty fragments (repeated spaces) are skipped.

    Examples:
        "Jane Doe" -> "JD"
        "Madonna" -> "M"
        "" -> "??"

    Args:
        name: Author display name (may be None)

    Returns:
        One or two uppercase letters, or "??" when the name has no words
    """
    if not name:
        return UNKNOWN_INITIALS
    words = [word for word in name.split(" ") if word]
    # Some letters uppercase to more than one character (ß -> SS)
    initials = "".join(word[0] for word in words[:2]).upper()[:2]
    return initials or UNKNOWN_INITIALS
