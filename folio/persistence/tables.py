"""SQLAlchemy table definitions for Folio.

These definitions are used with SQLAlchemy Core; rows are mapped to the
immutable domain models by ``folio.persistence.mappers``. They match the
schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# BLOG POSTS TABLE (subset used by the comment system)
# ============================================================================
blog_posts_table = Table(
    "blog_posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column("slug", String(100), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint(
        "status IN ('draft', 'published', 'scheduled', 'archived')",
        name="blog_posts_status_check",
    ),
)

Index("idx_blog_posts_status", blog_posts_table.c.status)

# ============================================================================
# BLOG COMMENTS TABLE
# ============================================================================
blog_comments_table = Table(
    "blog_comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Replies are removed together with their parent
    Column(
        "parent_comment_id",
        UUID(as_uuid=True),
        ForeignKey("blog_comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("author_name", String(100), nullable=False),
    Column("author_email", String(255), nullable=True),
    Column("author_initials", String(2), nullable=False),
    Column("author_initials_color", String(20), nullable=False),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("is_approved", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint("depth >= 0", name="blog_comments_depth_non_negative"),
    CheckConstraint("likes_count >= 0", name="blog_comments_likes_non_negative"),
)

Index(
    "idx_blog_comments_post_created",
    blog_comments_table.c.post_id,
    blog_comments_table.c.created_at,
)
Index("idx_blog_comments_parent_id", blog_comments_table.c.parent_comment_id)
Index("idx_blog_comments_created_at", blog_comments_table.c.created_at.desc())
