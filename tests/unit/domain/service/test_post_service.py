"""Unit tests for PostService."""

import pytest

from folio.domain.service import PostService
from folio.domain.value import PostStatus, Slug
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostBySlug:
    """Tests for slug lookups."""

    @pytest.mark.asyncio
    async def test_finds_post_of_any_status(self, unit_env):
        """get_post_by_slug ignores publication status."""
        # Arrange
        post_service = await unit_env.get(PostService)
        draft = await post_service.save_post(make_post("draft-post", PostStatus.DRAFT))

        # Act
        found = await post_service.get_post_by_slug(Slug("draft-post"))

        # Assert
        assert found is not None
        assert found.id == draft.id

    @pytest.mark.asyncio
    async def test_unknown_slug(self, unit_env):
        """Unknown slugs resolve to None."""
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_slug(Slug("missing")) is None

    @pytest.mark.asyncio
    async def test_public_lookup_returns_published_post(self, unit_env):
        """Published posts are publicly visible."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post("live-post"))

        # Act
        found = await post_service.get_public_post_by_slug(Slug("live-post"))

        # Assert
        assert found is not None
        assert found.id == post.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status", [PostStatus.DRAFT, PostStatus.SCHEDULED, PostStatus.ARCHIVED]
    )
    async def test_public_lookup_hides_unpublished(self, unit_env, status):
        """Unpublished posts are treated as missing by the public lookup."""
        # Arrange
        post_service = await unit_env.get(PostService)
        await post_service.save_post(make_post("hidden-post", status))

        # Act & Assert
        assert await post_service.get_public_post_by_slug(Slug("hidden-post")) is None
