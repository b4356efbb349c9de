"""Delete comment use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase, parse_slug, parse_uuid
from folio.domain.error import NotFoundError
from folio.domain.service import CommentService, PostService
from folio.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request.

    Only reachable by admins; the interface checks the caller first.
    """

    post_slug: str
    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str
    deleted_count: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment together with its replies."""

    def __init__(self, comment_service: CommentService, post_service: PostService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Steps:
        1. Parse the comment ID
        2. Resolve the post by slug (any status)
        3. Check the comment belongs to that post
        4. Delete the comment and its replies

        Args:
            request: Delete comment request

        Returns:
            Confirmation message and number of removed comments

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If the post does not exist, or the comment does
                not exist on that post
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "id"))

        slug = parse_slug(request.post_slug)
        post = await self.post_service.get_post_by_slug(slug)
        if post is None:
            raise NotFoundError("Blog post", request.post_slug)

        comment = await self.comment_service.get_comment(comment_id)
        if comment is None or comment.post_id != post.id:
            raise NotFoundError("Comment", request.comment_id)

        deleted = await self.comment_service.delete_comment(comment_id)
        return DeleteCommentResponse(
            message="Comment deleted successfully",
            deleted_count=deleted,
        )
