"""
Error responses.

Domain errors are mapped to a status by class and keep their own code and
message. Anything unexpected becomes a 500 ``INTERNAL_ERROR`` without the
exception text. Framework errors (unknown route, wrong method, request
validation) are rendered in the same ``ErrorResponse`` shape.
"""

from collections.abc import Awaitable, Callable
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from src.application.dto.responses import ErrorResponse
from src.config import get_logger
from src.core.exceptions import (
    ItemNotFoundError,
    ItemStatsError,
    StorageError,
    ValidationError,
    WatchError,
)

logger = get_logger(__name__)


# First match wins, so subclasses go before their bases
ERROR_STATUS: dict[type[ItemStatsError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ItemNotFoundError: status.HTTP_404_NOT_FOUND,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    WatchError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

ERROR_HINTS: dict[str, str] = {
    "ITEM_NOT_FOUND": "Check the item ID and try GET /api/items to list available items.",
    "STORE_READ_ERROR": "The item data file is missing or not a valid JSON array. Check server logs.",
    "STORE_WRITE_ERROR": "The item data file could not be written. Check permissions and disk space.",
    "WATCH_SETUP_FAILED": "File watching is unavailable; stats are recomputed on every request.",
    "VALIDATION_ERROR": "Check the query parameters and request body against the API schema.",
    "NOT_FOUND": "No such endpoint. The API lives under /api/items, /api/stats and /api/health.",
    "METHOD_NOT_ALLOWED": "This endpoint does not accept that HTTP method.",
    "INTERNAL_ERROR": "An internal error occurred. Check server logs.",
}


def error_json(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    detail: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        hint=ERROR_HINTS.get(error_code),
        detail=detail,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


def status_for(exc: ItemStatsError) -> int:
    for exc_type, code in ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns exceptions escaping the routes into ``ErrorResponse`` bodies."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except ItemStatsError as e:
            status_code = status_for(e)
            log = logger.error if status_code >= 500 else logger.info
            log(
                "request_failed",
                request_id=getattr(request.state, "request_id", None),
                path=request.url.path,
                error_code=e.code,
                error=e.message,
            )
            return error_json(request, status_code, e.code, e.message)
        except Exception:
            logger.exception(
                "unhandled_exception",
                request_id=getattr(request.state, "request_id", None),
                path=request.url.path,
            )
            return error_json(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "Internal server error",
            )


def setup_exception_handlers(app: FastAPI) -> None:
    """Render framework errors in the ``ErrorResponse`` shape."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        problems = [
            f"{' -> '.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return error_json(
            request,
            422,
            "VALIDATION_ERROR",
            "Request validation failed",
            detail="; ".join(problems),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        # Starlette raises these for unknown routes and unsupported methods
        error_code = HTTPStatus(exc.status_code).name
        return error_json(
            request, exc.status_code, error_code, str(exc.detail), headers=exc.headers
        )
