"""Get comments use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase, parse_slug
from folio.domain.error import NotFoundError
from folio.domain.service import CommentService, PostService, count_comment_tree

from .items import CommentNodeItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_slug: str
    as_admin: bool = False  # Caller already verified as admin by the interface


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_slug: str
    comments: list[CommentNodeItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting a post's comments as a nested tree."""

    def __init__(self, comment_service: CommentService, post_service: PostService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Resolve the post by slug (any status)
        2. Build the comment tree via the comment service
        3. Convert to response items, hiding emails from public callers

        Every stored comment is returned to both audiences; ``is_approved``
        does not filter the listing.

        Args:
            request: Get comments request

        Returns:
            Root comments with nested replies, and the total comment count

        Raises:
            NotFoundError: If the post does not exist
        """
        slug = parse_slug(request.post_slug)
        post = await self.post_service.get_post_by_slug(slug)
        if post is None:
            raise NotFoundError("Blog post", request.post_slug)

        tree = await self.comment_service.get_comment_tree(post.id)

        return GetCommentsResponse(
            post_slug=request.post_slug,
            comments=[
                CommentNodeItem.from_node(node, include_private=request.as_admin)
                for node in tree
            ],
            total=count_comment_tree(tree),
        )
