"""Domain model entities for Folio."""

from folio.domain.model.comment import Comment, CommentNode
from folio.domain.model.post import BlogPost

__all__ = [
    "BlogPost",
    "Comment",
    "CommentNode",
]
