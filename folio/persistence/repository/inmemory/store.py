"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from folio.domain.model import BlogPost, Comment
from folio.domain.value import CommentId, PostId


@dataclass
class InMemoryStore:
    """Tables backing the in-memory repositories.

    One store is shared by every repository created for the same test
    container, so data written in one request is visible in the next.
    Dicts keep insertion order, which stands in for storage order.
    """

    posts: dict[PostId, BlogPost] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
