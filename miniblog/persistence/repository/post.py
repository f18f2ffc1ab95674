"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import AsyncIterator, Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy import and_, delete, desc, exists, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from miniblog.domain.error import StorageError
from miniblog.domain.model import Comment, Post
from miniblog.domain.repository.post import PostCriteria, PostRepository
from miniblog.domain.value import PostId
from miniblog.persistence.mappers import (
    comment_to_dict,
    post_to_dict,
    row_to_comment,
    row_to_post,
)
from miniblog.persistence.tables import (
    comments_table,
    post_categories_table,
    post_tags_table,
    posts_table,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession, batch_size: int = 50) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            batch_size: Number of posts whose children are loaded per query
        """
        self.session = session
        self.batch_size = batch_size

    async def _fetch_children(
        self, post_ids: list[UUID]
    ) -> tuple[
        dict[UUID, list[Comment]], dict[UUID, list[str]], dict[UUID, list[str]]
    ]:
        """Fetch comments, tags and categories for several posts.

        Args:
            post_ids: List of post IDs

        Returns:
            Three dicts mapping post_id -> comments / tag names / category names
        """
        comment_map: dict[UUID, list[Comment]] = defaultdict(list)
        tag_map: dict[UUID, list[str]] = defaultdict(list)
        category_map: dict[UUID, list[str]] = defaultdict(list)

        if not post_ids:
            return comment_map, tag_map, category_map

        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id.in_(post_ids))
            .order_by(comments_table.c.post_id, comments_table.c.position)
        )
        for row in (await self.session.execute(stmt)).fetchall():
            comment_map[row.post_id].append(row_to_comment(row._asdict()))

        for table, target in (
            (post_tags_table, tag_map),
            (post_categories_table, category_map),
        ):
            stmt = (
                select(table.c.post_id, table.c.name)
                .where(table.c.post_id.in_(post_ids))
                .order_by(table.c.post_id, table.c.position)
            )
            for row in (await self.session.execute(stmt)).fetchall():
                target[row.post_id].append(row.name)

        return comment_map, tag_map, category_map

    async def _build_posts(self, rows: list) -> list[Post]:
        comment_map, tag_map, category_map = await self._fetch_children(
            [row.id for row in rows]
        )
        return [
            row_to_post(
                row._asdict(),
                comments=comment_map.get(row.id),
                tag_names=tag_map.get(row.id),
                category_names=category_map.get(row.id),
            )
            for row in rows
        ]

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span(
            "post_repository.find_by_id", post_id=str(post_id), for_update=for_update
        ):
            try:
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                if for_update:
                    stmt = stmt.with_for_update()
                row = (await self.session.execute(stmt)).fetchone()

                if not row:
                    logfire.warn("Post not found", post_id=str(post_id))
                    return None

                posts = await self._build_posts([row])
                return posts[0]
            except SQLAlchemyError as e:
                raise StorageError("find_by_id", str(e)) from e

    async def scan(self, criteria: PostCriteria) -> AsyncIterator[Post]:
        """Stream posts matching the criteria, newest first."""
        stmt = select(posts_table)

        if criteria.slug is not None:
            stmt = stmt.where(func.lower(posts_table.c.slug) == criteria.slug.lower())

        if criteria.category is not None:
            stmt = stmt.where(
                exists().where(
                    and_(
                        post_categories_table.c.post_id == posts_table.c.id,
                        post_categories_table.c.name == criteria.category.lower(),
                    )
                )
            )

        if criteria.tag is not None:
            stmt = stmt.where(
                exists().where(
                    and_(
                        post_tags_table.c.post_id == posts_table.c.id,
                        post_tags_table.c.name == criteria.tag.lower(),
                    )
                )
            )

        stmt = stmt.order_by(desc(posts_table.c.pub_date), posts_table.c.id)

        try:
            rows = (await self.session.execute(stmt)).fetchall()
            logfire.debug(
                "Post scan",
                slug=criteria.slug,
                category=criteria.category,
                tag=criteria.tag,
                count=len(rows),
            )

            # Children are loaded one batch at a time as the caller consumes posts
            for start in range(0, len(rows), self.batch_size):
                batch = await self._build_posts(rows[start : start + self.batch_size])
                for post in batch:
                    yield post
        except SQLAlchemyError as e:
            raise StorageError("scan", str(e)) from e

    async def save(self, post: Post) -> Post:
        """Save a post (create or update) together with its children."""
        if post.id is None:
            post = post.model_copy(update={"id": PostId(uuid4())})

        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            title=post.title,
            comments=len(post.comments),
        ):
            try:
                post_dict = post_to_dict(post)
                upsert_post = insert(posts_table).values(**post_dict)
                upsert_post = upsert_post.on_conflict_do_update(
                    index_elements=[posts_table.c.id],
                    set_={k: v for k, v in post_dict.items() if k != "id"},
                )
                await self.session.execute(upsert_post)

                await self._save_comments(post)
                await self._save_names(post_tags_table, post.id, post.tag_names)
                await self._save_names(
                    post_categories_table, post.id, post.category_names
                )

                await self.session.flush()
            except SQLAlchemyError as e:
                raise StorageError("save", str(e)) from e

            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def _save_comments(self, post: Post) -> None:
        keep_ids = [comment.id for comment in post.comments]

        # Drop comments that are no longer part of the post
        await self.session.execute(
            delete(comments_table).where(
                comments_table.c.post_id == post.id,
                comments_table.c.id.not_in(keep_ids),
            )
        )

        for position, comment in enumerate(post.comments):
            values = comment_to_dict(comment, post.id, position)
            stmt = insert(comments_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[comments_table.c.id],
                set_={k: v for k, v in values.items() if k not in ("id", "post_id")},
            )
            await self.session.execute(stmt)

    async def _save_names(self, table, post_id: PostId, names: list[str]) -> None:
        await self.session.execute(
            delete(table).where(table.c.post_id == post_id, table.c.name.not_in(names))
        )

        for position, name in enumerate(names):
            stmt = insert(table).values(post_id=post_id, name=name, position=position)
            stmt = stmt.on_conflict_do_update(
                index_elements=[table.c.post_id, table.c.name],
                set_={"position": position},
            )
            await self.session.execute(stmt)

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (children cascade)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            try:
                stmt = posts_table.delete().where(posts_table.c.id == post_id)
                await self.session.execute(stmt)
                await self.session.flush()
            except SQLAlchemyError as e:
                raise StorageError("delete", str(e)) from e
