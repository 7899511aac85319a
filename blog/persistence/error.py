"""Translation of database driver failures into domain storage errors."""

from functools import wraps
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blog.domain.error import StorageError

P = ParamSpec("P")
R = TypeVar("R")


def handle_db_errors(function: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Decorator to turn SQLAlchemy failures into ``StorageError``.

    Args:
        function: Async repository method to wrap

    Returns:
        Wrapped coroutine function
    """

    @wraps(function)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await function(*args, **kwargs)
        except IntegrityError as e:
            logfire.error(
                "Data integrity violation", operation=function.__qualname__, error=str(e)
            )
            raise StorageError(f"Data integrity violation: {e.orig}") from e
        except SQLAlchemyError as e:
            logfire.error(
                "Database operation failed", operation=function.__qualname__, error=str(e)
            )
            raise StorageError(f"Database operation failed: {e}") from e

    return wrapper
