"""Create comment use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase, parse_slug, parse_uuid
from folio.domain.error import NotFoundError
from folio.domain.service import CommentService, PostService
from folio.domain.value import CommentId

from .items import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_slug: str
    author_name: str | None = None
    author_email: str | None = None
    content: str | None = None
    parent_comment_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService, post_service: PostService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Resolve a published post by slug
        2. Create the comment via the comment service (validates fields and parent)

        Args:
            request: Create comment request

        Returns:
            The created flat comment

        Raises:
            NotFoundError: If the post does not exist or is not published
            ValidationError: If required fields are missing or the parent is invalid
        """
        slug = parse_slug(request.post_slug)
        post = await self.post_service.get_public_post_by_slug(slug)
        if post is None:
            raise NotFoundError("Blog post", request.post_slug)

        parent_comment_id = (
            CommentId(parse_uuid(request.parent_comment_id, "parent_comment_id"))
            if request.parent_comment_id
            else None
        )

        comment = await self.comment_service.create_comment(
            post_id=post.id,
            author_name=request.author_name,
            author_email=request.author_email,
            content=request.content,
            parent_comment_id=parent_comment_id,
        )

        return CommentItem.from_domain(comment, include_private=True)
