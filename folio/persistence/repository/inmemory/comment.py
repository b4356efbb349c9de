"""In-memory comment repository for testing."""

from typing import Optional

from folio.domain.model import Comment
from folio.domain.repository import CommentRepository
from folio.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    There is no foreign key cascade here, so ``delete`` walks the reply
    subtree itself before removing anything.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self._store.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        # Stable sort: ties keep insertion order
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_recent(self, limit: int = 50, offset: int = 0) -> list[Comment]:
        """Find the newest comments across all posts."""
        # Reversed first so that ties put the latest insert first
        comments = sorted(
            reversed(list(self._comments.values())),
            key=lambda c: c.created_at,
            reverse=True,
        )
        return comments[offset : offset + limit]

    async def count_all(self) -> int:
        """Count comments across all posts."""
        return len(self._comments)

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and every reply beneath it."""
        if comment_id not in self._comments:
            return 0

        children: dict[CommentId, list[CommentId]] = {}
        for comment in self._comments.values():
            if comment.parent_comment_id is not None:
                children.setdefault(comment.parent_comment_id, []).append(comment.id)

        doomed: list[CommentId] = []
        seen: set[CommentId] = set()
        stack = [comment_id]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            doomed.append(current)
            stack.extend(children.get(current, []))

        for doomed_id in doomed:
            self._comments.pop(doomed_id, None)
        return len(doomed)
