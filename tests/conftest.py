"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from dishka import AsyncContainer
from fastapi.testclient import TestClient

from folio.config import Settings
from folio.domain.model import BlogPost, Comment
from folio.domain.value import (
    CommentId,
    InitialsColor,
    PostId,
    PostStatus,
    Slug,
    derive_initials,
)
from folio.persistence.repository.inmemory import InMemoryStore
from folio.util.jwt import create_token

BASE_TIME = datetime(2025, 6, 1, 12, 0, 0)


def make_post(
    slug: str = "hello-world",
    status: PostStatus = PostStatus.PUBLISHED,
    title: str | None = None,
) -> BlogPost:
    """Helper function to build a blog post for tests.

    Args:
        slug: Post slug
        status: Publication status (published by default)
        title: Post title (derived from the slug when omitted)

    Returns:
        BlogPost with a fresh ID
    """
    return BlogPost(
        id=PostId(uuid4()),
        slug=Slug(slug),
        title=title or slug.replace("-", " ").title(),
        status=status,
        published_at=BASE_TIME if status == PostStatus.PUBLISHED else None,
        created_at=BASE_TIME,
    )


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    author_name: str = "Jane Doe",
    content: str = "Nice post",
    minutes: int = 0,
    author_email: str | None = None,
    parent_comment_id: CommentId | None = None,
) -> Comment:
    """Helper function to build a comment for tests.

    ``minutes`` offsets ``created_at`` from a fixed base time so that tests
    control ordering. ``parent_comment_id`` may point at a comment that does
    not exist, for orphan scenarios.
    """
    if parent is not None:
        parent_comment_id = parent.id
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        parent_comment_id=parent_comment_id,
        author_name=author_name,
        author_email=author_email,
        author_initials=derive_initials(author_name),
        author_initials_color=InitialsColor.BLUE,
        content=content,
        depth=parent.depth + 1 if parent is not None else 0,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def admin_headers() -> dict[str, str]:
    """Authorization header carrying an admin token for the configured secret."""
    auth = Settings().auth
    token = create_token("admin-1", auth.admin_role, auth)
    return {"Authorization": f"Bearer {token}"}


def seed_posts(client: TestClient, container: AsyncContainer, *posts: BlogPost) -> None:
    """Store posts in the container's in-memory store from a sync test.

    Runs on the TestClient's event loop, so the client must be entered.
    """

    async def _save() -> None:
        store = await container.get(InMemoryStore)
        for post in posts:
            store.posts[post.id] = post

    client.portal.call(_save)
