"""Blog post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.post import BlogPost
from folio.domain.value import PostId, Slug


class BlogPostRepository(ABC):
    """Repository for BlogPost entity.

    Only the lookups the comment system needs are defined here; post
    editing lives in the admin panel's generic CRUD layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[BlogPost]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[BlogPost]:
        """Find a post by slug, whatever its status.

        Args:
            slug: The post slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: BlogPost) -> BlogPost:
        """Save a post (create or update)."""
        pass
