"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import build_comment_tree, count_comment_tree, flatten_comment_tree
from .jwt_service import JWTService
from .post_service import PostService

__all__ = [
    "CommentService",
    "JWTService",
    "PostService",
    "Service",
    "build_comment_tree",
    "count_comment_tree",
    "flatten_comment_tree",
]
