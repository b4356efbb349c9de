"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from folio.domain.model.comment import Comment
from folio.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer and raise
    ``StoreError`` when the underlying store fails.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Comments are ordered by ``created_at`` ascending. Ties are broken in
        storage order, which callers must not rely on.

        Args:
            post_id: The post ID

        Returns:
            Flat list of comments in chronological order
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 50, offset: int = 0) -> List[Comment]:
        """Find the most recent comments across all posts, newest first.

        Args:
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def count_all(self) -> int:
        """Count comments across all posts."""
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to store

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and its entire reply subtree.

        Args:
            comment_id: The comment ID to delete

        Returns:
            Number of comments removed (0 if the comment did not exist)
        """
        pass
