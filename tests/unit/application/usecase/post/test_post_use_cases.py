"""Unit tests for post use cases."""

import pytest

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetImageRequest,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostImageUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
    UploadImageRequest,
)
from blog.domain.error import NotFoundError, ValidationError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPostUseCases:
    """Post use cases resolved from the container."""

    @pytest.mark.asyncio
    async def test_create_then_get(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        get = await unit_env.get(GetPostUseCase)

        created = await create.execute(
            CreatePostRequest(title="Hello", body="World", tags=["x"])
        )
        fetched = await get.execute(GetPostRequest(post_id=created.id))

        assert fetched == created

    @pytest.mark.asyncio
    async def test_get_missing_post_returns_none(self, unit_env):
        get = await unit_env.get(GetPostUseCase)

        assert await get.execute(GetPostRequest(post_id=404)) is None

    @pytest.mark.asyncio
    async def test_create_with_blank_title_raises(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ValidationError):
            await create.execute(CreatePostRequest(title="", body="x"))

    @pytest.mark.asyncio
    async def test_list_uses_defaults(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)
        for i in range(6):
            await create.execute(CreatePostRequest(title=f"Post {i}", body="b"))

        page = await list_posts.execute(ListPostsRequest())

        assert len(page.posts) == 5
        assert page.posts_count == 6
        assert page.has_next is True

    @pytest.mark.asyncio
    async def test_update_replaces_tags(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        update = await unit_env.get(UpdatePostUseCase)
        created = await create.execute(
            CreatePostRequest(title="Hello", body="World", tags=["a"])
        )

        updated = await update.execute(
            UpdatePostRequest(post_id=created.id, title="Hi", body="There", tags=["b"])
        )

        assert updated.title == "Hi"
        assert updated.tags == ["b"]

    @pytest.mark.asyncio
    async def test_delete_then_get(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        delete = await unit_env.get(DeletePostUseCase)
        get = await unit_env.get(GetPostUseCase)
        created = await create.execute(CreatePostRequest(title="Hello", body="World"))

        await delete.execute(DeletePostRequest(post_id=created.id))

        assert await get.execute(GetPostRequest(post_id=created.id)) is None
        with pytest.raises(NotFoundError):
            await delete.execute(DeletePostRequest(post_id=created.id))

    @pytest.mark.asyncio
    async def test_like(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        like = await unit_env.get(LikePostUseCase)
        created = await create.execute(CreatePostRequest(title="Hello", body="World"))

        assert await like.execute(LikePostRequest(post_id=created.id)) == 1

    @pytest.mark.asyncio
    async def test_image_upload_and_fetch(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        images = await unit_env.get(PostImageUseCase)
        created = await create.execute(CreatePostRequest(title="Hello", body="World"))

        await images.execute(UploadImageRequest(post_id=created.id, image=b"jpeg"))

        assert await images.fetch(GetImageRequest(post_id=created.id)) == b"jpeg"
