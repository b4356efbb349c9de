"""Comment domain service."""

import random
from datetime import datetime
from uuid import uuid4

import logfire

from folio.config import CommentSettings
from folio.domain.error import NotFoundError, ValidationError
from folio.domain.model import Comment, CommentNode
from folio.domain.repository import CommentRepository
from folio.domain.value import CommentId, PostId, derive_initials

from .base import Service
from .comment_tree import build_comment_tree


class CommentService(Service):
    """Domain service for blog comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        settings: CommentSettings,
        rng: random.Random,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Comment settings (palette, limits, parent policy)
            rng: Random source used to pick avatar colours
        """
        self.comment_repository = comment_repository
        self.settings = settings
        self.rng = rng

    async def create_comment(
        self,
        post_id: PostId,
        author_name: str | None,
        content: str | None,
        author_email: str | None = None,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        The caller is responsible for checking that the post exists and
        accepts comments.

        Args:
            post_id: Post ID
            author_name: Display name of the commenter (required)
            content: Comment body (required)
            author_email: Optional contact email
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Stored comment

        Raises:
            ValidationError: If required fields are blank or too long, or
                the parent belongs to another post (or, with strict_parent,
                does not exist)
            StoreError: If the parent lookup or insert fails
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            author_name = (author_name or "").strip()
            content = (content or "").strip()
            author_email = (author_email or "").strip() or None

            if not author_name:
                raise ValidationError("author_name is required")
            if not content:
                raise ValidationError("content is required")
            if len(author_name) > self.settings.max_author_name_length:
                raise ValidationError(
                    f"author_name must be at most "
                    f"{self.settings.max_author_name_length} characters"
                )
            if len(content) > self.settings.max_content_length:
                raise ValidationError(
                    f"content must be at most {self.settings.max_content_length} characters"
                )
            if author_email and len(author_email) > 255:
                raise ValidationError("author_email must be at most 255 characters")

            depth = 0
            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if parent is None:
                    if self.settings.strict_parent:
                        logfire.warn(
                            "Parent comment not found, rejecting reply",
                            parent_comment_id=str(parent_comment_id),
                            post_id=str(post_id),
                        )
                        raise ValidationError("Parent comment not found")
                    logfire.warn(
                        "Parent comment not found, creating top-level comment",
                        parent_comment_id=str(parent_comment_id),
                        post_id=str(post_id),
                    )
                    parent_comment_id = None
                elif parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_comment_id=str(parent_comment_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment does not belong to this post")
                else:
                    depth = parent.depth + 1

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                parent_comment_id=parent_comment_id,
                author_name=author_name,
                author_email=author_email,
                author_initials=derive_initials(author_name),
                author_initials_color=self.rng.choice(self.settings.palette),
                content=content,
                depth=depth,
                likes_count=0,
                is_approved=True,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=saved.depth,
            )
            return saved

    async def get_comment_tree(self, post_id: PostId) -> list[CommentNode]:
        """Get all comments for a post as a nested tree.

        Args:
            post_id: Post ID

        Returns:
            Root comment nodes, oldest first, with replies nested
        """
        with logfire.span("comment_service.get_comment_tree", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            tree = build_comment_tree(comments)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
                roots=len(tree),
            )
            return tree

    async def get_comment(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Delete a comment and every reply beneath it.

        Deleting an id that does not exist is an error, so a repeated delete
        is reported rather than silently accepted.

        Args:
            comment_id: Comment ID

        Returns:
            Number of comments removed, including the target

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            existing = await self.comment_repository.find_by_id(comment_id)
            if existing is None:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            deleted = await self.comment_repository.delete(comment_id)
            if deleted == 0:
                # Removed concurrently between the lookup and the delete
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(existing.post_id),
                deleted_count=deleted,
            )
            return deleted

    async def list_recent(self, limit: int, offset: int = 0) -> tuple[list[Comment], int]:
        """List the newest comments across every post.

        Args:
            limit: Page size
            offset: Number of comments to skip

        Returns:
            Tuple of (comments newest first, total comment count)
        """
        with logfire.span("comment_service.list_recent", limit=limit, offset=offset):
            comments = await self.comment_repository.find_recent(limit=limit, offset=offset)
            total = await self.comment_repository.count_all()
            logfire.info("Recent comments retrieved", count=len(comments), total=total)
            return comments, total
