"""Integration tests for PostgresPostRepository.

These tests need a migrated PostgreSQL database reachable through
DATABASE__URL and are skipped otherwise.
"""

import os
from uuid import uuid4

import pytest

from miniblog.domain.model import Post
from miniblog.domain.model.common import utc_now
from miniblog.domain.repository import PostCriteria, PostRepository
from miniblog.domain.service import reconcile, to_wire_form
from tests.conftest import days_ago, make_comment, make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="requires a PostgreSQL database (set DATABASE__URL)",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _scan(repo: PostRepository, criteria: PostCriteria) -> list[Post]:
    return [post async for post in repo.scan(criteria)]


class TestPostRepositoryIntegration:
    """Integration tests for PostgresPostRepository.

    Names and slugs are randomized because rows persist between tests.
    """

    @pytest.mark.asyncio
    async def test_save_and_find_round_trips_the_aggregate(self, integration_env):
        """Children come back in their saved order."""
        repo = await integration_env.get(PostRepository)
        tag = f"tag-{uuid4().hex[:8]}"
        comments = [make_comment(f"comment {i}") for i in range(3)]
        post = make_post(
            "Round trip", tags=[tag, "b"], categories=["c"], comments=comments
        )

        await repo.save(post)
        found = await repo.find_by_id(post.id, for_update=True)

        assert found.id == post.id
        assert [c.id for c in found.comments] == [c.id for c in comments]
        assert found.tag_names == [tag, "b"]
        assert found.category_names == ["c"]

    @pytest.mark.asyncio
    async def test_save_replaces_children(self, integration_env):
        """Dropped children are deleted, retained ones keep their keys."""
        repo = await integration_env.get(PostRepository)
        keep = make_comment("keep")
        existing = make_post(
            "Edit", tags=["x", "y"], comments=[keep, make_comment("drop")]
        )
        await repo.save(existing)

        wire = to_wire_form(existing)
        incoming = wire.model_copy(
            update={"tags": ["y", "z"], "comments": [wire.comments[0]]}
        )
        await repo.save(reconcile(existing, incoming, utc_now()))
        found = await repo.find_by_id(existing.id)

        assert [c.id for c in found.comments] == [keep.id]
        assert found.tag_names == ["y", "z"]

    @pytest.mark.asyncio
    async def test_scan_filters_and_orders(self, integration_env):
        """Scans filter by name and return newest first."""
        repo = await integration_env.get(PostRepository)
        category = f"cat-{uuid4().hex[:8]}"
        older = make_post("Older", categories=[category], pub_date=days_ago(3))
        newer = make_post("Newer", categories=[category.upper()], pub_date=days_ago(1))
        await repo.save(older)
        await repo.save(newer)

        result = await _scan(repo, PostCriteria(category=category))

        assert [p.id for p in result] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_scan_by_slug_is_case_insensitive(self, integration_env):
        """Slugs are compared in lower case."""
        repo = await integration_env.get(PostRepository)
        slug = f"Slug-{uuid4().hex[:8]}"
        post = make_post("Slugged", slug=slug)
        await repo.save(post)

        result = await _scan(repo, PostCriteria(slug=slug.lower()))

        assert [p.id for p in result] == [post.id]

    @pytest.mark.asyncio
    async def test_delete_cascades(self, integration_env):
        """Deleting a post removes it with its children; repeating is a no-op."""
        repo = await integration_env.get(PostRepository)
        post = make_post("Gone", tags=["t"], comments=[make_comment()])
        await repo.save(post)

        await repo.delete(post.id)
        await repo.delete(post.id)

        assert await repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_long_text_values_are_stored(self, integration_env):
        """Titles, slugs, comment fields and names have no length limit."""
        repo = await integration_env.get(PostRepository)
        long_tag = f"{uuid4().hex}{'t' * 200}"
        comment = make_comment(author="a" * 300, email=f"{'e' * 300}@example.com")
        post = make_post(
            "T" * 400, tags=[long_tag], categories=["c" * 150], comments=[comment]
        )

        await repo.save(post)
        found = await repo.find_by_id(post.id)

        assert found.title == post.title
        assert found.slug == post.slug
        assert found.comments == [comment]
        assert found.tag_names == [long_tag]
