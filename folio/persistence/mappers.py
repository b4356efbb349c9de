"""Mappers for converting between database rows and domain models.

Since the domain models are immutable pydantic models, rows are mapped by
hand instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from folio.domain.model import BlogPost, Comment
from folio.domain.value import CommentId, InitialsColor, PostId, PostStatus, Slug


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_blog_post(row: Dict[str, Any]) -> BlogPost:
    """Convert database row to BlogPost domain model.

    Args:
        row: Database row as dict

    Returns:
        BlogPost domain model
    """
    return BlogPost(
        id=PostId(_as_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        status=PostStatus(row["status"]),
        published_at=row.get("published_at"),
        created_at=row["created_at"],
    )


def blog_post_to_dict(post: BlogPost) -> Dict[str, Any]:
    """Convert BlogPost domain model to database dict."""
    data = post.model_dump()
    data["status"] = post.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        parent_comment_id=CommentId(_as_uuid(parent_id)) if parent_id else None,
        author_name=row["author_name"],
        author_email=row.get("author_email"),
        author_initials=row["author_initials"],
        author_initials_color=InitialsColor(row["author_initials_color"]),
        content=row["content"],
        depth=row["depth"],
        likes_count=row["likes_count"],
        is_approved=row["is_approved"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump()
    data["author_initials_color"] = comment.author_initials_color.value
    return data
