"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import desc, func, literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Comment
from folio.domain.repository import CommentRepository
from folio.domain.value import CommentId, PostId
from folio.persistence.database import store_operation
from folio.persistence.mappers import comment_to_dict, row_to_comment
from folio.persistence.tables import blog_comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Reply subtrees are removed by the ``ON DELETE CASCADE`` foreign key on
    ``parent_comment_id``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(blog_comments_table).where(blog_comments_table.c.id == comment_id)
        with store_operation("comment.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(blog_comments_table)
            .where(blog_comments_table.c.post_id == post_id)
            .order_by(blog_comments_table.c.created_at)
        )
        with store_operation("comment.find_by_post"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def find_recent(self, limit: int = 50, offset: int = 0) -> List[Comment]:
        """Find the newest comments across all posts."""
        stmt = (
            select(blog_comments_table)
            .order_by(desc(blog_comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        with store_operation("comment.find_recent"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def count_all(self) -> int:
        """Count comments across all posts."""
        stmt = select(func.count()).select_from(blog_comments_table)
        with store_operation("comment.count_all"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        stmt = (
            select(func.count())
            .select_from(blog_comments_table)
            .where(blog_comments_table.c.post_id == post_id)
        )
        with store_operation("comment.count_by_post"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            blog_comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(blog_comments_table)
        )
        with store_operation("comment.save"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment; the foreign key cascade removes its replies.

        The subtree is counted first with a recursive CTE, inside the same
        transaction as the delete.
        """
        subtree = (
            select(blog_comments_table.c.id)
            .where(blog_comments_table.c.id == comment_id)
            .cte("subtree", recursive=True)
        )
        subtree = subtree.union_all(
            select(blog_comments_table.c.id).where(
                blog_comments_table.c.parent_comment_id == subtree.c.id
            )
        )
        count_stmt = select(func.count(literal_column("*"))).select_from(subtree)
        delete_stmt = blog_comments_table.delete().where(
            blog_comments_table.c.id == comment_id
        )

        with store_operation("comment.delete"):
            count = (await self.session.execute(count_stmt)).scalar() or 0
            result = await self.session.execute(delete_stmt)
            await self.session.flush()

        if result.rowcount == 0:
            return 0
        return count
