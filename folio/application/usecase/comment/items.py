"""Comment response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from folio.domain.model import Comment, CommentNode


class CommentItem(BaseModel):
    """Flat comment as returned to API callers.

    ``author_email`` is only filled in for admin callers.
    """

    id: str
    post_id: str
    parent_comment_id: str | None
    author_name: str
    author_email: str | None
    author_initials: str
    author_initials_color: str
    content: str
    depth: int
    likes_count: int
    is_approved: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment, include_private: bool = False) -> "CommentItem":
        """Convert a domain comment to a response item.

        Args:
            comment: Domain comment
            include_private: Whether to expose the author's email

        Returns:
            Response item
        """
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            author_name=comment.author_name,
            author_email=comment.author_email if include_private else None,
            author_initials=comment.author_initials,
            author_initials_color=comment.author_initials_color.value,
            content=comment.content,
            depth=comment.depth,
            likes_count=comment.likes_count,
            is_approved=comment.is_approved,
            created_at=comment.created_at,
        )


class CommentNodeItem(CommentItem):
    """Comment with its nested replies.

    Recursive structure mirroring ``CommentNode``.
    """

    replies: list["CommentNodeItem"]

    @classmethod
    def from_node(cls, node: CommentNode, include_private: bool = False) -> "CommentNodeItem":
        """Convert a domain tree node to a response item.

        Args:
            node: Domain comment node
            include_private: Whether to expose author emails

        Returns:
            Response item with replies recursively converted
        """
        flat = CommentItem.from_domain(node.comment, include_private=include_private)
        return cls(
            **flat.model_dump(),
            replies=[cls.from_node(reply, include_private) for reply in node.replies],
        )
