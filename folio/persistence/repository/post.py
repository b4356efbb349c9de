"""PostgreSQL implementation of BlogPost repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import BlogPost
from folio.domain.repository import BlogPostRepository
from folio.domain.value import PostId, Slug
from folio.persistence.database import store_operation
from folio.persistence.mappers import blog_post_to_dict, row_to_blog_post
from folio.persistence.tables import blog_posts_table


class PostgresBlogPostRepository(BlogPostRepository):
    """PostgreSQL implementation of BlogPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[BlogPost]:
        """Find a post by ID."""
        stmt = select(blog_posts_table).where(blog_posts_table.c.id == post_id)
        with store_operation("blog_post.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_blog_post(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[BlogPost]:
        """Find a post by slug."""
        stmt = select(blog_posts_table).where(blog_posts_table.c.slug == slug.root)
        with store_operation("blog_post.find_by_slug"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_blog_post(row._asdict()) if row else None

    async def save(self, post: BlogPost) -> BlogPost:
        """Insert or update a post."""
        values = blog_post_to_dict(post)
        stmt = insert(blog_posts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[blog_posts_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        with store_operation("blog_post.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return post
