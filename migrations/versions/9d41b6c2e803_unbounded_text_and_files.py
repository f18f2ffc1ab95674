"""unbounded_text_and_files

- Widen post, comment and name columns to TEXT
- Add the files table served by the file endpoint

Revision ID: 9d41b6c2e803
Revises: 3c5f0e7a9b21
Create Date: 2026-10-19 15:03:27.540193

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9d41b6c2e803"
down_revision: Union[str, Sequence[str], None] = "3c5f0e7a9b21"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (table, column, previous length)
_WIDENED = [
    ("posts", "title", 300),
    ("posts", "slug", 300),
    ("comments", "author", 255),
    ("comments", "email", 255),
    ("post_tags", "name", 100),
    ("post_categories", "name", 100),
]


def upgrade() -> None:
    """Upgrade schema."""
    # 1. Drop length limits
    for table, column, length in _WIDENED:
        op.alter_column(
            table,
            column,
            type_=sa.Text(),
            existing_type=sa.String(length),
            existing_nullable=False,
        )

    # 2. Files
    op.create_table(
        "files",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("file_name", sa.Text(), nullable=False),
        sa.Column("content", sa.LargeBinary(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_files_file_name", "files", ["file_name"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("files")

    # Values longer than the old limits make this fail
    for table, column, length in _WIDENED:
        op.alter_column(
            table,
            column,
            type_=sa.String(length),
            existing_type=sa.Text(),
            existing_nullable=False,
        )
