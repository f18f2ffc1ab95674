"""End-to-end tests for the blog HTTP API."""

import pytest
from fastapi.testclient import TestClient

from miniblog.config import Settings
from miniblog.domain.repository import FileStore
from miniblog.interface.api.app import create_app
from miniblog.util.jwt import create_token
from tests.conftest import days_ago
from tests.di import build_test_container


@pytest.fixture
def container():
    """Container with in-memory persistence."""
    return build_test_container()


@pytest.fixture
def app(container):
    """Create the app on top of in-memory persistence."""
    return create_app(container)


@pytest.fixture
def client(app):
    """Anonymous reader."""
    return TestClient(app)


@pytest.fixture
def operator(app):
    """Client carrying a valid operator token."""
    token = create_token(Settings().auth)
    return TestClient(app, cookies={"auth_token": token})


def _post_body(title: str, **overrides) -> dict:
    body = {
        "title": title,
        "slug": title.lower().replace(" ", "-"),
        "content": f"<p>{title}</p>",
        "excerpt": title,
        "is_published": True,
        "pub_date": days_ago(1).isoformat(),
        "tags": [],
        "categories": [],
        "comments": [],
    }
    body.update(overrides)
    return body


def _save(operator: TestClient, title: str, **overrides) -> dict:
    response = operator.put("/posts", json=_post_body(title, **overrides))
    assert response.status_code == 200, response.text
    return response.json()


class TestHealth:
    """Health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSaveAndRead:
    """Saving posts and reading them back."""

    def test_operator_saves_and_anyone_reads(self, operator, client):
        """A saved published post is publicly readable."""
        saved = _save(operator, "Hello World", tags=["Python"], categories=["Eng"])

        response = client.get(f"/posts/{saved['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Hello World"
        assert data["tags"] == ["python"]
        assert data["categories"] == ["eng"]

    def test_anonymous_save_is_unauthorized(self, client):
        """Saving without the operator token fails."""
        response = client.put("/posts", json=_post_body("Nope"))

        assert response.status_code == 401

    def test_invalid_token_is_anonymous(self, app):
        """A forged cookie does not grant privileges."""
        forged = TestClient(app, cookies={"auth_token": "forged"})

        response = forged.put("/posts", json=_post_body("Nope"))

        assert response.status_code == 401

    def test_draft_is_hidden_from_anonymous_readers(self, operator, client):
        """Drafts are only visible with the operator token."""
        draft = _save(operator, "Draft", is_published=False)

        assert client.get(f"/posts/{draft['id']}").status_code == 404
        assert operator.get(f"/posts/{draft['id']}").status_code == 200

    def test_unparsable_id_is_not_found(self, client):
        """Garbage keys are simply not found."""
        assert client.get("/posts/not-a-key").status_code == 404

    def test_get_by_slug_ignores_case(self, operator, client):
        """Slugs match case-insensitively."""
        saved = _save(operator, "Hello World")

        response = client.get("/posts/slug/HELLO-WORLD")

        assert response.status_code == 200
        assert response.json()["id"] == saved["id"]

    def test_edit_reconciles_comments(self, operator, client):
        """Editing keeps retained comments and adds new ones."""
        saved = _save(
            operator,
            "Commented",
            comments=[{"content": "first"}, {"content": "second"}],
        )
        first = saved["comments"][0]

        edited = _save(
            operator,
            "Commented",
            id=saved["id"],
            comments=[first, {"content": "third"}],
        )

        assert edited["id"] == saved["id"]
        assert [c["content"] for c in edited["comments"]] == ["first", "third"]
        assert edited["comments"][0]["id"] == first["id"]
        assert edited["comments"][1]["id"] not in ("", first["id"])

        public = client.get(f"/posts/{saved['id']}").json()
        assert [c["content"] for c in public["comments"]] == ["first", "third"]


class TestListing:
    """Listing endpoints."""

    def test_default_page_size(self, operator, client):
        """Without count, one page of blog.posts_per_page posts is returned."""
        for i in range(6):
            _save(operator, f"Post {i}", pub_date=days_ago(i + 1).isoformat())

        response = client.get("/posts")

        assert response.status_code == 200
        titles = [p["title"] for p in response.json()["posts"]]
        assert len(titles) == Settings().blog.posts_per_page
        assert titles[0] == "Post 0"

    def test_count_and_skip(self, operator, client):
        """count and skip page the listing, newest first."""
        for i in range(3):
            _save(operator, f"Post {i}", pub_date=days_ago(i + 1).isoformat())

        response = client.get("/posts", params={"count": 1, "skip": 1})

        assert [p["title"] for p in response.json()["posts"]] == ["Post 1"]

    def test_negative_paging_is_rejected(self, client):
        """Negative paging values fail validation."""
        assert client.get("/posts", params={"count": -1}).status_code == 422
        assert client.get("/posts", params={"skip": -1}).status_code == 422

    def test_category_and_tag_listings(self, operator, client):
        """Posts can be listed by category or tag."""
        _save(operator, "Py", tags=["python"], categories=["eng"])
        _save(operator, "Go", tags=["go"], categories=["eng"])
        _save(operator, "Hidden", tags=["python"], is_published=False)

        by_category = client.get("/posts/category/ENG").json()["posts"]
        by_tag = client.get("/posts/tag/python").json()["posts"]

        assert sorted(p["title"] for p in by_category) == ["Go", "Py"]
        assert [p["title"] for p in by_tag] == ["Py"]

    def test_tags_and_categories(self, operator, client):
        """Name listings only include names of visible posts."""
        _save(operator, "Py", tags=["python"], categories=["eng"])
        _save(
            operator,
            "Hidden",
            tags=["secret"],
            categories=["drafts"],
            is_published=False,
        )

        assert client.get("/tags").json()["tags"] == ["python"]
        assert client.get("/categories").json()["categories"] == ["eng"]
        assert sorted(operator.get("/tags").json()["tags"]) == ["python", "secret"]


class TestDelete:
    """Deleting posts."""

    def test_operator_deletes_post(self, operator, client):
        """Delete removes the post and is idempotent."""
        saved = _save(operator, "Doomed")

        assert operator.delete(f"/posts/{saved['id']}").status_code == 204
        assert operator.delete(f"/posts/{saved['id']}").status_code == 204
        assert client.get(f"/posts/{saved['id']}").status_code == 404

    def test_anonymous_delete_is_unauthorized(self, operator, client):
        """Anonymous readers cannot delete."""
        saved = _save(operator, "Safe")

        assert client.delete(f"/posts/{saved['id']}").status_code == 401
        assert client.get(f"/posts/{saved['id']}").status_code == 200


class TestFiles:
    """File endpoints."""

    def test_upload_is_not_implemented(self, client):
        response = client.post(
            "/files", params={"file_name": "cat.png"}, content=b"\x89PNG"
        )

        assert response.status_code == 501

    def test_download_serves_stored_file(self, app, container):
        """Stored files are served by exact name."""
        with TestClient(app) as client:
            file_store = client.portal.call(container.get, FileStore)
            file_store.put("cat.png", b"\x89PNG")

            response = client.get("/files/cat.png")

        assert response.status_code == 200
        assert response.content == b"\x89PNG"

    def test_missing_file_is_not_found(self, client):
        assert client.get("/files/cat.png").status_code == 404
