"""Domain errors and the exception handlers that render them with request_id."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.projectdesk.core.logging import get_logger

logger = get_logger(__name__)


class ProjectDeskError(Exception):
    """Base error carrying an HTTP status and an optional machine-readable code."""

    status_code: int = 500

    def __init__(self, message: str, *, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error


class NotFoundError(ProjectDeskError):
    status_code = 404


class BadRequestError(ProjectDeskError):
    status_code = 400


class NoFilesError(BadRequestError):
    def __init__(self) -> None:
        super().__init__("No files were uploaded", error="NO_FILES")


class TooManyFilesError(BadRequestError):
    def __init__(self, limit: int):
        super().__init__(
            f"Too many files. At most {limit} files can be uploaded at once.",
            error="LIMIT_FILE_COUNT",
        )
        self.limit = limit


class UnexpectedFileFieldError(BadRequestError):
    def __init__(self, field: str, expected: str):
        super().__init__(
            f"Unexpected file field '{field}'. Files must be sent in the '{expected}' field.",
            error="LIMIT_UNEXPECTED_FILE",
        )
        self.field = field


class FileTooLargeError(BadRequestError):
    def __init__(self, filename: str, limit: int):
        super().__init__(
            f"File '{filename}' is too large. The maximum allowed size is "
            f"{limit // (1024 * 1024)}MB.",
            error="LIMIT_FILE_SIZE",
        )
        self.filename = filename
        self.limit = limit


class UnsupportedFileTypeError(BadRequestError):
    def __init__(self, mimetype: str):
        super().__init__(
            f"File type '{mimetype}' is not allowed. Only images (JPEG, PNG, GIF, WebP) "
            "and documents (PDF, Word, Excel, PowerPoint, TXT, CSV) are accepted.",
            error="FILE_UPLOAD_ERROR",
        )
        self.mimetype = mimetype


class PersistenceError(ProjectDeskError):
    """Storage failure; `error` holds the underlying detail."""

    status_code = 500


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(ProjectDeskError)
    async def project_desk_exception_handler(
        request: Request, exc: ProjectDeskError
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                path=request.url.path,
                detail=exc.message,
                error=exc.error,
            )
        content: dict[str, str | None] = {
            "detail": exc.message,
            "request_id": correlation_id.get(),
        }
        if exc.error is not None:
            content["error"] = exc.error
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database error", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Database error",
                "error": str(exc),
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
