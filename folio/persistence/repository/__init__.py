"""PostgreSQL repository implementations."""

from folio.persistence.repository.comment import PostgresCommentRepository
from folio.persistence.repository.post import PostgresBlogPostRepository

__all__ = [
    "PostgresBlogPostRepository",
    "PostgresCommentRepository",
]
