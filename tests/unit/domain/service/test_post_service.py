"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from miniblog.domain.error import InvalidArgumentError, NotAuthorizedError
from miniblog.domain.model import CommentRepresentation, PostRepresentation
from miniblog.domain.repository import PostCriteria, PostRepository
from miniblog.domain.service import PostService, to_wire_form
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSavePost:
    """Tests for save_post method."""

    @pytest.mark.asyncio
    async def test_save_new_post_assigns_keys(self, unit_env):
        """A new post and its comments receive keys on save."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        submission = PostRepresentation(
            title="Hello",
            slug="hello",
            tags=["Python", "python"],
            comments=[CommentRepresentation(content="first")],
        )

        # Act
        saved = await post_service.save_post(submission, is_privileged=True)

        # Assert
        assert saved.id is not None
        assert saved.tag_names == ["python"]
        assert saved.comments[0].id is not None

        # Verify it was saved
        stored = await post_repo.find_by_id(saved.id)
        assert stored == saved

    @pytest.mark.asyncio
    async def test_save_existing_post_reconciles_children(self, unit_env):
        """Editing a post keeps retained comments and drops omitted ones."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        keep = make_comment("keep")
        drop = make_comment("drop")
        existing = make_post("Post", tags=["a"], comments=[keep, drop])
        await post_repo.save(existing)

        submission = to_wire_form(existing).model_copy(
            update={
                "title": "Edited",
                "tags": ["a", "b"],
                "comments": [CommentRepresentation(id=str(keep.id))],
            }
        )

        # Act
        saved = await post_service.save_post(submission, is_privileged=True)

        # Assert
        assert saved.id == existing.id
        assert saved.title == "Edited"
        assert saved.comments == [keep]
        assert saved.tag_names == ["a", "b"]
        assert saved.last_modified > existing.last_modified

    @pytest.mark.asyncio
    async def test_save_accepts_long_names_and_titles(self, unit_env):
        """Long tags, categories and titles are saved unchanged."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        long_tag = "t" * 101
        long_title = "T" * 301

        saved = await post_service.save_post(
            PostRepresentation(
                title=long_title, slug="long", tags=[long_tag], categories=["c" * 101]
            ),
            is_privileged=True,
        )

        stored = await post_repo.find_by_id(saved.id)
        assert stored.title == long_title
        assert stored.tag_names == [long_tag]
        assert stored.category_names == ["c" * 101]

    @pytest.mark.asyncio
    async def test_save_with_unknown_key_creates_new_post(self, unit_env):
        """A key that matches nothing stored is replaced by a fresh one."""
        post_service = await unit_env.get(PostService)
        unknown = str(uuid4())

        saved = await post_service.save_post(
            PostRepresentation(id=unknown, title="x"), is_privileged=True
        )

        assert str(saved.id) != unknown

    @pytest.mark.asyncio
    async def test_save_none_raises_invalid_argument(self, unit_env):
        """Saving nothing is an invalid argument."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(InvalidArgumentError):
            await post_service.save_post(None, is_privileged=True)

    @pytest.mark.asyncio
    async def test_save_requires_privilege(self, unit_env):
        """Anonymous callers cannot save posts."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        with pytest.raises(NotAuthorizedError):
            await post_service.save_post(
                PostRepresentation(title="x"), is_privileged=False
            )

        assert [p async for p in post_repo.scan(PostCriteria())] == []


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_delete_by_id_removes_post(self, unit_env):
        """Deleting by key removes the whole aggregate."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post(comments=[make_comment()])
        await post_repo.save(post)

        await post_service.delete_post(str(post.id), is_privileged=True)

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_delete_by_representation(self, unit_env):
        """A representation can be passed instead of a key."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)

        await post_service.delete_post(to_wire_form(post), is_privileged=True)

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", ["", "garbage", str(uuid4())])
    async def test_delete_absent_post_is_noop(self, unit_env, post_id):
        """Deleting what is not there succeeds."""
        post_service = await unit_env.get(PostService)

        await post_service.delete_post(post_id, is_privileged=True)

    @pytest.mark.asyncio
    async def test_delete_none_raises_invalid_argument(self, unit_env):
        """Deleting nothing is an invalid argument."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(InvalidArgumentError):
            await post_service.delete_post(None, is_privileged=True)

    @pytest.mark.asyncio
    async def test_delete_requires_privilege(self, unit_env):
        """Anonymous callers cannot delete posts."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(str(post.id), is_privileged=False)

        assert await post_repo.find_by_id(post.id) == post
