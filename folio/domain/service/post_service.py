"""Blog post domain service."""

import logfire

from folio.domain.model import BlogPost
from folio.domain.repository import BlogPostRepository
from folio.domain.value import Slug

from .base import Service


class PostService(Service):
    """Domain service for resolving blog posts."""

    def __init__(self, post_repository: BlogPostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Blog post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: BlogPost) -> BlogPost:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span("post_service.save_post", post_id=str(post.id), slug=str(post.slug)):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_slug(self, slug: Slug) -> BlogPost | None:
        """Get a post by slug, whatever its status.

        Args:
            slug: Post slug

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_slug", slug=str(slug)):
            post = await self.post_repository.find_by_slug(slug)

            if post:
                logfire.info(
                    "Post found by slug",
                    slug=str(slug),
                    post_id=str(post.id),
                    status=post.status.value,
                )
            else:
                logfire.warn("Post not found by slug", slug=str(slug))

            return post

    async def get_public_post_by_slug(self, slug: Slug) -> BlogPost | None:
        """Get a post by slug only if it is published.

        Drafts, scheduled and archived posts are treated as missing.

        Args:
            slug: Post slug

        Returns:
            Published post if found, None otherwise
        """
        post = await self.get_post_by_slug(slug)
        if post is not None and not post.is_public:
            logfire.warn(
                "Post is not published",
                slug=str(slug),
                status=post.status.value,
            )
            return None
        return post
