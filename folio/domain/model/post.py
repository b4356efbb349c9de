"""Blog post entity.

Blog posts are managed by the admin panel; the comment system only needs
to resolve a post by slug and check whether it is publicly visible.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import PostId, PostStatus, Slug


class BlogPost(DomainModel):
    """Blog post (insight) on the portfolio site."""

    id: PostId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    status: PostStatus = PostStatus.DRAFT
    published_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_public(self) -> bool:
        """Whether readers can see (and comment on) this post."""
        return self.status == PostStatus.PUBLISHED
