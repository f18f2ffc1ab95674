"""SQLAlchemy table definitions for the blog.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    PrimaryKeyConstraint,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False, server_default=""),
    Column("slug", Text, nullable=False, server_default=""),
    Column("content", Text, nullable=False, server_default=""),
    Column("excerpt", Text, nullable=False, server_default=""),
    Column("is_published", Boolean, nullable=False, server_default="true"),
    Column(
        "pub_date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_modified",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# Slugs are looked up case-insensitively and are not unique
Index("idx_posts_slug_lower", func.lower(posts_table.c.slug))
Index("idx_posts_pub_date", posts_table.c.pub_date.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False, server_default="0"),
    Column("author", Text, nullable=False, server_default=""),
    Column("email", Text, nullable=False, server_default=""),
    Column("content", Text, nullable=False, server_default=""),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "pub_date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.position)

# ============================================================================
# POST_TAGS TABLE
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", Text, nullable=False),  # Lower-cased
    Column("position", Integer, nullable=False, server_default="0"),
    PrimaryKeyConstraint("post_id", "name", name="pk_post_tags"),
)

Index("idx_post_tags_name", post_tags_table.c.name)

# ============================================================================
# POST_CATEGORIES TABLE
# ============================================================================
post_categories_table = Table(
    "post_categories",
    metadata,
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", Text, nullable=False),  # Lower-cased
    Column("position", Integer, nullable=False, server_default="0"),
    PrimaryKeyConstraint("post_id", "name", name="pk_post_categories"),
)

Index("idx_post_categories_name", post_categories_table.c.name)

# ============================================================================
# FILES TABLE
# ============================================================================
files_table = Table(
    "files",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("file_name", Text, nullable=False),
    Column("content", LargeBinary, nullable=False),
)

# Files are looked up by exact name
Index("idx_files_file_name", files_table.c.file_name)
