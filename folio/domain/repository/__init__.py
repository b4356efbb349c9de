"""Repository interfaces for the Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from folio.domain.repository.comment import CommentRepository
from folio.domain.repository.post import BlogPostRepository

__all__ = [
    "BlogPostRepository",
    "CommentRepository",
]
