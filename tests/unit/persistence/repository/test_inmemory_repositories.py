"""Unit tests for the in-memory repositories sharing one store."""

import pytest

from blog.domain.value import PostId
from blog.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryTagRepository,
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def post_repo(store) -> InMemoryPostRepository:
    return InMemoryPostRepository(store)


@pytest.fixture
def tag_repo(store) -> InMemoryTagRepository:
    return InMemoryTagRepository(store)


@pytest.fixture
def comment_repo(store) -> InMemoryCommentRepository:
    return InMemoryCommentRepository(store)


class TestInMemoryPostRepository:
    """Tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_ids_are_assigned_in_order(self, post_repo):
        first = await post_repo.create("a", "b")
        second = await post_repo.create("c", "d")

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_search_orders_newest_first_and_slices(self, post_repo):
        posts = [await post_repo.create(f"t{i}", "body") for i in range(5)]

        window = await post_repo.search("", limit=2, offset=1)

        assert [p.id for p in window] == [posts[3].id, posts[2].id]

    @pytest.mark.asyncio
    async def test_search_and_count_agree(self, post_repo):
        await post_repo.create("Python tips", "x")
        await post_repo.create("Other", "all about PYTHON")
        await post_repo.create("Other", "nothing")

        assert await post_repo.count("python") == 2
        assert len(await post_repo.search("python", limit=10)) == 2
        assert await post_repo.count() == 3

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, post_repo):
        assert await post_repo.update_content(PostId(1), "t", "b") is None

    @pytest.mark.asyncio
    async def test_increment_missing_returns_none(self, post_repo):
        assert await post_repo.increment_likes(PostId(1)) is None

    @pytest.mark.asyncio
    async def test_set_image_on_missing_post_returns_false(self, post_repo):
        assert await post_repo.set_image(PostId(1), b"x") is False


class TestSharedStore:
    """Behaviour that spans several repositories."""

    @pytest.mark.asyncio
    async def test_post_delete_cascades(self, post_repo, tag_repo, comment_repo):
        post = await post_repo.create("t", "b")
        await tag_repo.add_many(post.id, ["a", "b"])
        await comment_repo.create(post.id, "hello")
        await post_repo.set_image(post.id, b"img")

        assert await post_repo.delete(post.id) is True

        assert await tag_repo.find_by_post(post.id) == []
        assert await comment_repo.count_by_post(post.id) == 0
        assert await post_repo.get_image(post.id) is None
        assert await post_repo.delete(post.id) is False

    @pytest.mark.asyncio
    async def test_replace_for_post_only_touches_that_post(self, post_repo, tag_repo):
        first = await post_repo.create("one", "b")
        second = await post_repo.create("two", "b")
        await tag_repo.add_many(first.id, ["a"])
        await tag_repo.add_many(second.id, ["z"])

        await tag_repo.replace_for_post(first.id, ["b", "b"])

        assert [t.tag for t in await tag_repo.find_by_post(first.id)] == ["b", "b"]
        assert [t.tag for t in await tag_repo.find_by_post(second.id)] == ["z"]

    @pytest.mark.asyncio
    async def test_batch_lookups(self, post_repo, tag_repo, comment_repo):
        first = await post_repo.create("one", "b")
        second = await post_repo.create("two", "b")
        await tag_repo.add_many(first.id, ["a", "b"])
        await comment_repo.create(second.id, "x")
        await comment_repo.create(second.id, "y")

        assert await tag_repo.find_by_posts([first.id, second.id]) == {
            first.id: ["a", "b"]
        }
        assert await comment_repo.count_by_posts([first.id, second.id]) == {
            second.id: 2
        }
