"""In-memory blog post repository for testing."""

from typing import Optional

from folio.domain.model import BlogPost
from folio.domain.repository import BlogPostRepository
from folio.domain.value import PostId, Slug

from .store import InMemoryStore


class InMemoryBlogPostRepository(BlogPostRepository):
    """In-memory implementation of BlogPostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[BlogPost]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[BlogPost]:
        """Find a post by slug."""
        for post in self._store.posts.values():
            if post.slug == slug:
                return post
        return None

    async def save(self, post: BlogPost) -> BlogPost:
        """Save or update a post."""
        self._store.posts[post.id] = post
        return post
