"""End-to-end tests for post endpoints."""

import pytest
from fastapi.testclient import TestClient

from blog.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


def _create(client, title="Hello", text="World", tags=None):
    response = client.post(
        "/api/posts", json={"title": title, "text": text, "tags": tags or []}
    )
    assert response.status_code == 201
    return response.json()


class TestPostEndpoints:
    """End-to-end tests for the post API."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_and_get_post(self, client):
        created = _create(client, tags=["x", "y"])

        response = client.get(f"/api/posts/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body == {
            "id": created["id"],
            "title": "Hello",
            "text": "World",
            "tags": ["x", "y"],
            "likesCount": 0,
            "commentsCount": 0,
        }

    def test_get_missing_post_returns_404(self, client):
        assert client.get("/api/posts/12345").status_code == 404

    def test_create_with_blank_title_returns_400(self, client):
        response = client.post("/api/posts", json={"title": " ", "text": "x"})

        assert response.status_code == 400
        assert client.get("/api/posts").json()["postsCount"] == 0

    def test_list_paginates_and_truncates(self, client):
        for i in range(12):
            _create(client, title=f"Post {i}", text="a" * 200)

        response = client.get(
            "/api/posts", params={"search": "", "pageNumber": 3, "pageSize": 5}
        )

        assert response.status_code == 200
        page = response.json()
        assert page["postsCount"] == 12
        assert page["lastPage"] == 3
        assert page["hasPrev"] is True
        assert page["hasNext"] is False
        assert len(page["posts"]) == 2
        assert page["posts"][0]["text"] == "a" * 128 + "…"

    def test_list_with_defaults(self, client):
        for i in range(6):
            _create(client, title=f"Post {i}")

        page = client.get("/api/posts").json()

        assert len(page["posts"]) == 5
        assert page["posts"][0]["title"] == "Post 5"

    def test_search(self, client):
        _create(client, title="Foo bar")
        _create(client, title="baz", text="FOO")
        _create(client, title="qux")

        page = client.get("/api/posts", params={"search": "foo"}).json()

        assert page["postsCount"] == 2

    def test_blank_search_lists_everything(self, client):
        _create(client, title="Foo bar")
        _create(client, title="qux")

        response = client.get("/api/posts?search=%20%20")

        assert response.status_code == 200
        assert response.json()["postsCount"] == 2

    def test_update_replaces_tags(self, client):
        created = _create(client, tags=["a", "b"])

        response = client.put(
            f"/api/posts/{created['id']}",
            json={"title": "New", "text": "Body", "tags": ["b", "c"]},
        )

        assert response.status_code == 200
        assert sorted(response.json()["tags"]) == ["b", "c"]

    def test_update_missing_post_returns_404(self, client):
        response = client.put(
            "/api/posts/999", json={"title": "New", "text": "Body", "tags": []}
        )

        assert response.status_code == 404

    def test_delete_post(self, client):
        created = _create(client)

        assert client.delete(f"/api/posts/{created['id']}").status_code == 204
        assert client.get(f"/api/posts/{created['id']}").status_code == 404
        assert client.delete(f"/api/posts/{created['id']}").status_code == 404

    def test_likes(self, client):
        created = _create(client)

        first = client.post(f"/api/posts/{created['id']}/likes")
        second = client.post(f"/api/posts/{created['id']}/likes")

        assert first.json() == 1
        assert second.json() == 2
        assert client.get(f"/api/posts/{created['id']}").json()["likesCount"] == 2

    def test_like_missing_post_returns_404(self, client):
        assert client.post("/api/posts/999/likes").status_code == 404

    def test_image_upload_and_download(self, client):
        created = _create(client)

        upload = client.put(
            f"/api/posts/{created['id']}/image",
            files={"image": ("photo.jpg", b"\xff\xd8\xffdata", "image/jpeg")},
        )
        download = client.get(f"/api/posts/{created['id']}/image")

        assert upload.status_code == 200
        assert download.status_code == 200
        assert download.content == b"\xff\xd8\xffdata"
        assert download.headers["content-type"] == "image/jpeg"

    def test_image_missing_returns_404(self, client):
        created = _create(client)

        assert client.get(f"/api/posts/{created['id']}/image").status_code == 404

    def test_empty_image_upload_returns_400(self, client):
        created = _create(client)

        response = client.put(
            f"/api/posts/{created['id']}/image",
            files={"image": ("empty.jpg", b"", "image/jpeg")},
        )

        assert response.status_code == 400

    def test_image_upload_to_missing_post_returns_404(self, client):
        response = client.put(
            "/api/posts/999/image",
            files={"image": ("photo.jpg", b"data", "image/jpeg")},
        )

        assert response.status_code == 404
