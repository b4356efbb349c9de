"""Integration tests for the PostgreSQL repositories.

These tests run against a real database at DATABASE__URL with the
migrations applied (``python scripts/run_migrations.py``). They are skipped
when the database is unreachable.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.config import Settings
from folio.domain.repository import BlogPostRepository, CommentRepository
from folio.domain.value import CommentId, Slug
from folio.persistence.database import create_engine
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Skip without a database, otherwise start from empty tables."""
    engine = create_engine(Settings())
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    finally:
        await engine.dispose()

    session = await integration_env.get(AsyncSession)
    await session.execute(text("TRUNCATE TABLE blog_comments, blog_posts CASCADE"))
    await session.commit()

    yield


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_round_trips_comment(self, integration_env):
        """Saved comments read back unchanged, oldest first per post."""
        # Arrange
        post_repo = await integration_env.get(BlogPostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post = await post_repo.save(make_post("round-trip"))
        root = make_comment(post.id, author_email="a@example.com", minutes=0)
        reply = make_comment(post.id, parent=root, minutes=1)

        # Act
        await comment_repo.save(root)
        await comment_repo.save(reply)
        found = await comment_repo.find_by_post(post.id)

        # Assert
        assert [c.id for c in found] == [root.id, reply.id]
        assert found[0].author_email == "a@example.com"
        assert found[1].parent_comment_id == root.id
        assert found[1].depth == 1
        assert (await post_repo.find_by_slug(Slug("round-trip"))).id == post.id

    @pytest.mark.asyncio
    async def test_delete_cascades_through_foreign_key(self, integration_env):
        """Deleting a comment removes its subtree and reports its size."""
        # Arrange
        post_repo = await integration_env.get(BlogPostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post = await post_repo.save(make_post("cascade"))
        a = make_comment(post.id, minutes=0)
        b = make_comment(post.id, parent=a, minutes=1)
        c = make_comment(post.id, parent=b, minutes=2)
        d = make_comment(post.id, minutes=3)
        for comment in (a, b, c, d):
            await comment_repo.save(comment)

        # Act
        removed = await comment_repo.delete(a.id)

        # Assert
        assert removed == 3
        assert [x.id for x in await comment_repo.find_by_post(post.id)] == [d.id]
        assert await comment_repo.delete(CommentId(uuid4())) == 0
