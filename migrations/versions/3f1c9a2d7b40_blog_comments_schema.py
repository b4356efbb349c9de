"""blog_comments_schema

Create the schema for the blog comment system:
- Blog posts (only the columns the comment system reads)
- Blog comments (threaded replies, removed together with their parent)

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-19 10:12:04.518233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # BLOG_POSTS table
    # ========================================================================
    op.create_table(
        "blog_posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("published_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="blog_posts_slug_key"),
        sa.CheckConstraint(
            "status IN ('draft', 'published', 'scheduled', 'archived')",
            name="blog_posts_status_check",
        ),
    )

    op.create_index("idx_blog_posts_status", "blog_posts", ["status"])

    # ========================================================================
    # BLOG_COMMENTS table
    # ========================================================================
    op.create_table(
        "blog_comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        sa.Column("author_name", sa.String(100), nullable=False),
        sa.Column("author_email", sa.String(255), nullable=True),
        sa.Column("author_initials", sa.String(2), nullable=False),
        sa.Column("author_initials_color", sa.String(20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "is_approved", sa.Boolean(), nullable=False, server_default=sa.text("true")
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["blog_posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_comment_id"], ["blog_comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="blog_comments_depth_non_negative"),
        sa.CheckConstraint(
            "likes_count >= 0", name="blog_comments_likes_non_negative"
        ),
    )

    op.create_index(
        "idx_blog_comments_post_created", "blog_comments", ["post_id", "created_at"]
    )
    op.create_index(
        "idx_blog_comments_parent_id", "blog_comments", ["parent_comment_id"]
    )
    op.execute(
        "CREATE INDEX idx_blog_comments_created_at ON blog_comments (created_at DESC)"
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("blog_comments")
    op.drop_table("blog_posts")
