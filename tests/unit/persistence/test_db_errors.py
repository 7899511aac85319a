"""Unit tests for database error translation."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from blog.domain.error import NotFoundError, StorageError
from blog.persistence.error import handle_db_errors


class TestHandleDbErrors:
    """Tests for handle_db_errors."""

    @pytest.mark.asyncio
    async def test_result_passes_through(self):
        @handle_db_errors
        async def ok() -> int:
            return 3

        assert await ok() == 3

    @pytest.mark.asyncio
    async def test_operational_error_becomes_storage_error(self):
        @handle_db_errors
        async def broken():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        with pytest.raises(StorageError, match="Database operation failed"):
            await broken()

    @pytest.mark.asyncio
    async def test_integrity_error_becomes_storage_error(self):
        @handle_db_errors
        async def violating():
            raise IntegrityError("INSERT", {}, Exception("fk violation"))

        with pytest.raises(StorageError, match="Data integrity violation"):
            await violating()

    @pytest.mark.asyncio
    async def test_domain_errors_are_not_wrapped(self):
        @handle_db_errors
        async def missing():
            raise NotFoundError("Post", 1)

        with pytest.raises(NotFoundError):
            await missing()
