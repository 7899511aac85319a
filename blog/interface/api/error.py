"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from blog.domain.error import NotFoundError, StorageError, ValidationError


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logfire.warn("Request rejected", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn(
        "Resource not found",
        path=request.url.path,
        resource=exc.resource,
        identifier=str(exc.identifier),
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logfire.error("Storage failure", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage temporarily unavailable"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to 400, 404 and 503 responses.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
