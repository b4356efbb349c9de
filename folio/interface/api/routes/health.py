"""Health check routes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from folio.config import Settings
from folio.domain.error import StoreError
from folio.domain.repository import CommentRepository

router = APIRouter(prefix="/health", tags=["health"], route_class=DishkaRoute)

SERVICE_VERSION = "0.1.0"


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    git_sha: str


class ReadinessResponse(BaseModel):
    """Readiness response; ``comments`` proves the store answered."""

    status: str
    comments: int


@router.get("", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Liveness probe: the process is up and serving requests."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version=SERVICE_VERSION,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    comment_repository: FromDishka[CommentRepository],
) -> ReadinessResponse:
    """Readiness probe: the comment store is reachable.

    Raises:
        HTTPException: 503 if the store query fails
    """
    try:
        total = await comment_repository.count_all()
    except StoreError as e:
        logfire.error("Readiness check failed", operation=e.operation)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment store unavailable",
        )
    return ReadinessResponse(status="ready", comments=total)
