"""Unit tests for ListRecentCommentsUseCase."""

from uuid import uuid4

import pytest

from folio.application.usecase.comment import (
    ListRecentCommentsRequest,
    ListRecentCommentsUseCase,
)
from folio.domain.repository import CommentRepository
from folio.domain.value import PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListRecentCommentsUseCase:
    """Tests for ListRecentCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_pages_newest_first_with_emails(self, unit_env):
        """The moderation feed is newest first and shows emails."""
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(ListRecentCommentsUseCase)
        comments = [
            make_comment(PostId(uuid4()), minutes=i, author_email=f"c{i}@example.com")
            for i in range(5)
        ]
        for comment in comments:
            await comment_repo.save(comment)

        # Act
        response = await use_case.execute(ListRecentCommentsRequest(limit=2, offset=1))

        # Assert
        assert response.total == 5
        assert response.limit == 2
        assert response.offset == 1
        assert [c.id for c in response.comments] == [str(comments[3].id), str(comments[2].id)]
        assert response.comments[0].author_email == "c3@example.com"

    @pytest.mark.asyncio
    async def test_offset_past_end(self, unit_env):
        """An offset beyond the data gives an empty page with the real total."""
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(ListRecentCommentsUseCase)
        await comment_repo.save(make_comment(PostId(uuid4())))

        # Act
        response = await use_case.execute(ListRecentCommentsRequest(limit=10, offset=10))

        # Assert
        assert response.comments == []
        assert response.total == 1
