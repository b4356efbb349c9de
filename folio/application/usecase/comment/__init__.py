"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .items import CommentItem, CommentNodeItem
from .list_recent_comments import (
    ListRecentCommentsRequest,
    ListRecentCommentsResponse,
    ListRecentCommentsUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ListRecentCommentsRequest",
    "ListRecentCommentsResponse",
    "ListRecentCommentsUseCase",
]
