"""Admin moderation routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query

from folio.application.usecase.comment import (
    ListRecentCommentsRequest,
    ListRecentCommentsResponse,
    ListRecentCommentsUseCase,
)
from folio.config import CommentSettings
from folio.domain.error import DomainError, UnauthorizedError
from folio.domain.service import JWTService
from folio.interface.api.security import extract_token, require_admin
from folio.interface.error import to_http_exception

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/comments", response_model=ListRecentCommentsResponse)
async def list_recent_comments(
    list_recent_comments_use_case: FromDishka[ListRecentCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[CommentSettings],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListRecentCommentsResponse:
    """List the newest comments across all blog posts.

    Feeds the admin moderation page. ``limit`` defaults to the configured
    page size and is capped at the configured maximum.
    """
    try:
        require_admin(jwt_service, extract_token(auth_token, authorization), "list comments")
    except UnauthorizedError as e:
        logfire.warn("Unauthorized moderation feed request")
        raise to_http_exception(e)

    page_size = min(limit or settings.recent_default_limit, settings.recent_max_limit)
    try:
        return await list_recent_comments_use_case.execute(
            ListRecentCommentsRequest(limit=page_size, offset=offset)
        )
    except DomainError as e:
        raise to_http_exception(e, admin=True)
