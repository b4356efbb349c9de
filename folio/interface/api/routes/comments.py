"""Blog comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel

from folio.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from folio.domain.error import DomainError, UnauthorizedError
from folio.domain.service import JWTService
from folio.interface.api.security import extract_token, require_admin
from folio.interface.error import to_http_exception

router = APIRouter(prefix="/blog", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Required fields are checked by the domain so that missing and blank
    values are reported the same way.
    """

    author_name: str | None = None
    author_email: str | None = None
    content: str | None = None
    parent_comment_id: str | None = None  # Parent comment ID for replies


@router.get("/{slug}/comments", response_model=GetCommentsResponse)
async def get_comments(
    slug: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    admin: bool = Query(default=False),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCommentsResponse:
    """Get all comments for a blog post as a nested tree.

    With ``admin=true`` the caller must be an admin; the response then
    includes commenter emails.

    Args:
        slug: Blog post slug
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for the admin check (injected)
        admin: Request the admin moderation view
        auth_token: Admin JWT from cookie (optional)
        authorization: Admin JWT as a bearer token (optional)

    Returns:
        Root comments with nested replies, and the total count

    Raises:
        HTTPException: 401 for a non-admin admin view, 404 if the post is missing
    """
    try:
        if admin:
            require_admin(
                jwt_service, extract_token(auth_token, authorization), "view moderation data"
            )
        request = GetCommentsRequest(post_slug=slug, as_admin=admin)
        return await get_comments_use_case.execute(request)
    except UnauthorizedError as e:
        logfire.warn("Unauthorized admin comment listing", slug=slug)
        raise to_http_exception(e)
    except DomainError as e:
        raise to_http_exception(e, admin=admin)


@router.post(
    "/{slug}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    slug: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Comment on a published blog post, or reply to a comment.

    Open to anonymous readers.

    Args:
        slug: Blog post slug
        request: Comment submission
        create_comment_use_case: Create comment use case from DI

    Returns:
        The created comment (flat, without replies)

    Raises:
        HTTPException: 404 if the post is missing or unpublished,
            400 if fields are missing or the parent is invalid
    """
    try:
        use_case_request = CreateCommentRequest(
            post_slug=slug,
            author_name=request.author_name,
            author_email=request.author_email,
            content=request.content,
            parent_comment_id=request.parent_comment_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.warn("Comment creation failed", slug=slug, error=str(e))
        raise to_http_exception(e)


@router.delete("/{slug}/comments", response_model=DeleteCommentResponse)
async def delete_comment(
    slug: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    comment_id: str | None = Query(default=None, alias="id"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies.

    Admin only. The admin check runs before anything else.

    Args:
        slug: Blog post slug the comment must belong to
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for the admin check (injected)
        comment_id: ID of the comment to delete (``?id=``)
        auth_token: Admin JWT from cookie
        authorization: Admin JWT as a bearer token

    Returns:
        Confirmation message and number of removed comments

    Raises:
        HTTPException: 401 if not admin, 400 if the ID is missing or
            malformed, 404 if the post does not exist or the comment is not
            one of its comments
    """
    try:
        require_admin(jwt_service, extract_token(auth_token, authorization), "delete comments")
    except UnauthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", slug=slug)
        raise to_http_exception(e)

    if not comment_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment ID is required",
        )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(post_slug=slug, comment_id=comment_id)
        )
    except DomainError as e:
        logfire.warn("Comment delete failed", slug=slug, comment_id=comment_id, error=str(e))
        raise to_http_exception(e, admin=True)
