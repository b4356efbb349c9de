"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryBlogPostRepository
from .store import InMemoryStore

__all__ = [
    "InMemoryBlogPostRepository",
    "InMemoryCommentRepository",
    "InMemoryStore",
]
