"""Unit tests for TagService."""

import pytest

from blog.domain.error import ValidationError
from blog.domain.service import PostService, TagService
from blog.domain.value import PostId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestValidateTags:
    """Tests for validate_tags."""

    def test_none_becomes_empty_list(self):
        assert TagService.validate_tags(None) == []

    def test_order_and_duplicates_are_preserved(self):
        assert TagService.validate_tags(["b", "a", "b"]) == ["b", "a", "b"]

    @pytest.mark.parametrize("tags", [[""], ["ok", " "], ["x" * 256]])
    def test_invalid_tags_raise(self, tags):
        with pytest.raises(ValidationError):
            TagService.validate_tags(tags)


class TestTagSets:
    """Tests for tag reads and writes."""

    @pytest.mark.asyncio
    async def test_tags_for_posts_includes_posts_without_tags(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        tagged = await post_service.create_post("Tagged", "post", ["a", "b"])
        bare = await post_service.create_post("Bare", "post", [])

        tags = await tag_service.tags_for_posts([tagged.id, bare.id])

        assert tags == {tagged.id: ["a", "b"], bare.id: []}

    @pytest.mark.asyncio
    async def test_replace_tags_is_a_full_overwrite(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        post = await post_service.create_post("Hello", "World", ["a", "b"])

        await tag_service.replace_tags(post.id, ["b", "c"])

        assert sorted(await tag_service.tags_for(post.id)) == ["b", "c"]

    @pytest.mark.asyncio
    async def test_add_tags_with_empty_list_is_a_no_op(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        post = await post_service.create_post("Hello", "World", ["a"])

        assert await tag_service.add_tags(post.id, []) == []
        assert await tag_service.tags_for(post.id) == ["a"]

    @pytest.mark.asyncio
    async def test_delete_tags_for_untagged_post(self, unit_env):
        tag_service = await unit_env.get(TagService)

        assert await tag_service.delete_tags_for(PostId(1)) == 0
