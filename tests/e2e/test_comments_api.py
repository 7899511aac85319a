"""End-to-end tests for comment endpoints."""

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


@pytest.fixture
def post_id(client) -> int:
    response = client.post("/api/posts", json={"title": "Hello", "text": "World"})
    return response.json()["id"]


class TestCommentEndpoints:
    """End-to-end tests for the comment API."""

    def test_create_and_list_comments(self, client, post_id):
        created = client.post(
            f"/api/posts/{post_id}/comments", json={"text": "Nice", "author": "ann"}
        )
        unsigned = client.post(f"/api/posts/{post_id}/comments", json={"text": "Second"})

        assert created.status_code == 201
        body = created.json()
        assert body["postId"] == post_id
        assert body["author"] == "ann"
        assert "createdAt" in body
        assert unsigned.json()["author"] == "Anonymous"

        listed = client.get(f"/api/posts/{post_id}/comments").json()
        assert [c["text"] for c in listed] == ["Nice", "Second"]
        assert client.get(f"/api/posts/{post_id}").json()["commentsCount"] == 2

    def test_comment_on_missing_post_returns_404(self, client):
        response = client.post("/api/posts/999/comments", json={"text": "Nice"})

        assert response.status_code == 404

    def test_list_comments_of_missing_post_returns_404(self, client):
        assert client.get("/api/posts/999/comments").status_code == 404

    def test_blank_comment_returns_400(self, client, post_id):
        response = client.post(f"/api/posts/{post_id}/comments", json={"text": ""})

        assert response.status_code == 400

    def test_get_update_delete_comment(self, client, post_id):
        comment_id = client.post(
            f"/api/posts/{post_id}/comments", json={"text": "old"}
        ).json()["id"]
        url = f"/api/posts/{post_id}/comments/{comment_id}"

        assert client.get(url).json()["text"] == "old"

        updated = client.put(url, json={"text": "new"})
        assert updated.status_code == 200
        assert updated.json()["text"] == "new"

        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404
        assert client.delete(url).status_code == 404

    def test_update_missing_comment_returns_404(self, client, post_id):
        response = client.put(
            f"/api/posts/{post_id}/comments/999", json={"text": "new"}
        )

        assert response.status_code == 404

    def test_deleting_post_removes_comments(self, client, post_id):
        comment_id = client.post(
            f"/api/posts/{post_id}/comments", json={"text": "bye"}
        ).json()["id"]

        client.delete(f"/api/posts/{post_id}")

        assert client.get(f"/api/posts/{post_id}/comments/{comment_id}").status_code == 404
