"""List recent comments use case (admin moderation feed)."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import CommentService

from .items import CommentItem


class ListRecentCommentsRequest(BaseModel):
    """List recent comments request."""

    limit: int = Field(default=50, ge=1)
    offset: int = Field(default=0, ge=0)


class ListRecentCommentsResponse(BaseModel):
    """List recent comments response."""

    comments: list[CommentItem]
    total: int
    limit: int
    offset: int


class ListRecentCommentsUseCase(BaseUseCase):
    """Use case for the admin view of the newest comments across all posts."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListRecentCommentsRequest) -> ListRecentCommentsResponse:
        comments, total = await self.comment_service.list_recent(
            limit=request.limit, offset=request.offset
        )
        return ListRecentCommentsResponse(
            comments=[CommentItem.from_domain(c, include_private=True) for c in comments],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
