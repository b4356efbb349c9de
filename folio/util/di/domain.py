"""Domain layer DI providers."""

import random

from dishka import Scope, provide

from folio.config import AuthSettings, CommentSettings
from folio.domain.repository import BlogPostRepository, CommentRepository
from folio.domain.service import CommentService, JWTService, PostService
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        settings: CommentSettings,
        rng: random.Random,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            settings=settings,
            rng=rng,
        )

    @provide
    def get_post_service(self, post_repository: BlogPostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)
