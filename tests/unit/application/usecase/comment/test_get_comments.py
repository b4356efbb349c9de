"""Unit tests for GetCommentsUseCase."""

import pytest

from folio.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from folio.domain.error import NotFoundError
from folio.domain.repository import BlogPostRepository, CommentRepository
from folio.domain.value import PostStatus
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_tree_and_total(self, unit_env):
        """Replies are nested and the total counts every comment."""
        # Arrange
        post_repo = await unit_env.get(BlogPostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(GetCommentsUseCase)
        post = await post_repo.save(make_post("hello-world"))
        a = make_comment(post.id, minutes=0)
        b = make_comment(post.id, parent=a, minutes=1)
        c = make_comment(post.id, parent=b, minutes=2)
        d = make_comment(post.id, minutes=3)
        for comment in (a, b, c, d):
            await comment_repo.save(comment)

        # Act
        response = await use_case.execute(GetCommentsRequest(post_slug="hello-world"))

        # Assert
        assert response.post_slug == "hello-world"
        assert response.total == 4
        assert [n.id for n in response.comments] == [str(a.id), str(d.id)]
        assert [n.id for n in response.comments[0].replies] == [str(b.id)]
        assert [n.id for n in response.comments[0].replies[0].replies] == [str(c.id)]
        assert response.comments[1].replies == []

    @pytest.mark.asyncio
    async def test_hides_email_from_public(self, unit_env):
        """Public callers never see author emails, at any depth."""
        # Arrange
        post_repo = await unit_env.get(BlogPostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(GetCommentsUseCase)
        post = await post_repo.save(make_post("hello-world"))
        root = make_comment(post.id, author_email="root@example.com")
        reply = make_comment(post.id, parent=root, minutes=1, author_email="re@example.com")
        await comment_repo.save(root)
        await comment_repo.save(reply)

        # Act
        public = await use_case.execute(GetCommentsRequest(post_slug="hello-world"))
        admin = await use_case.execute(
            GetCommentsRequest(post_slug="hello-world", as_admin=True)
        )

        # Assert
        assert public.comments[0].author_email is None
        assert public.comments[0].replies[0].author_email is None
        assert admin.comments[0].author_email == "root@example.com"
        assert admin.comments[0].replies[0].author_email == "re@example.com"

    @pytest.mark.asyncio
    async def test_lists_comments_of_unpublished_post(self, unit_env):
        """Listing resolves the post whatever its status."""
        # Arrange
        post_repo = await unit_env.get(BlogPostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(GetCommentsUseCase)
        post = await post_repo.save(make_post("archived-post", PostStatus.ARCHIVED))
        await comment_repo.save(make_comment(post.id))

        # Act
        response = await use_case.execute(GetCommentsRequest(post_slug="archived-post"))

        # Assert
        assert response.total == 1

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        """An unknown slug is a not-found error."""
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_slug="missing-post"))

    @pytest.mark.asyncio
    async def test_post_without_comments(self, unit_env):
        """A post with no comments gives an empty list and zero total."""
        # Arrange
        post_repo = await unit_env.get(BlogPostRepository)
        use_case = await unit_env.get(GetCommentsUseCase)
        await post_repo.save(make_post("quiet-post"))

        # Act
        response = await use_case.execute(GetCommentsRequest(post_slug="quiet-post"))

        # Assert
        assert response.comments == []
        assert response.total == 0
