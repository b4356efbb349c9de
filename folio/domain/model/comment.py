"""Comment entity.

Comments are threaded replies on blog posts. They are stored flat, with a
``parent_comment_id`` pointer and a redundant ``depth``, and reassembled
into a tree on read (see ``folio.domain.service.comment_tree``).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import CommentId, InitialsColor, PostId


class Comment(DomainModel):
    """Comment on a blog post, or a reply to another comment.

    Threading is managed through:
    - parent_comment_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)

    Comments are never edited after creation. Deleting one removes its
    whole reply subtree.
    """

    id: CommentId
    post_id: PostId
    parent_comment_id: Optional[CommentId] = None
    author_name: str = Field(min_length=1, max_length=100)
    author_email: Optional[str] = Field(default=None, max_length=255)
    author_initials: str = Field(min_length=1, max_length=2)
    author_initials_color: InitialsColor
    content: str = Field(min_length=1)
    depth: int = Field(default=0, ge=0)
    likes_count: int = Field(default=0, ge=0)
    is_approved: bool = True
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        return self.parent_comment_id is None


@dataclass
class CommentNode:
    """Node in a post's comment tree.

    Wraps a flat comment together with its direct replies, which are
    themselves nodes.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)
