"""initial_schema

Create the blog schema:
- Posts (the aggregate root)
- Comments (owned by a post, kept in submission order)
- Post tags and post categories (lower-cased names per post)

Child rows are removed together with their post.

Revision ID: 3c5f0e7a9b21
Revises:
Create Date: 2026-10-19 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c5f0e7a9b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False, server_default=""),
        sa.Column("slug", sa.String(300), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("excerpt", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "is_published", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column(
            "pub_date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "last_modified",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_posts_slug_lower", "posts", [sa.text("lower(slug)")])
    op.create_index("idx_posts_pub_date", "posts", [sa.text("pub_date DESC")])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("author", sa.String(255), nullable=False, server_default=""),
        sa.Column("email", sa.String(255), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "pub_date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id", "position"])

    # ========================================================================
    # POST_TAGS table
    # ========================================================================
    op.create_table(
        "post_tags",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),  # Lower-cased
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "name", name="pk_post_tags"),
    )
    op.create_index("idx_post_tags_name", "post_tags", ["name"])

    # ========================================================================
    # POST_CATEGORIES table
    # ========================================================================
    op.create_table(
        "post_categories",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),  # Lower-cased
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "name", name="pk_post_categories"),
    )
    op.create_index("idx_post_categories_name", "post_categories", ["name"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("post_categories")
    op.drop_table("post_tags")
    op.drop_table("comments")
    op.drop_table("posts")
