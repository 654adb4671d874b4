"""
Exception hierarchy and the centralized error translator.

Rule: services raise, only the handlers in this module build error
responses. Every error response carries the same envelope:
`{statusCode, date, restErrorMessage, detailedErrorMessage}`.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from project_tracker.core import constants
from project_tracker.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class ProjectError(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_503_SERVICE_UNAVAILABLE
    rest_error_message: str = constants.REST_SERVICE_UNAVAILABLE

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self._message = message
        self._cause = cause
        self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        """Underlying fault, kept for logging only."""
        return self._cause


class BadRequestError(ProjectError):
    http_status = status.HTTP_400_BAD_REQUEST
    rest_error_message = constants.REST_BAD_REQUEST


class UnauthorizedError(ProjectError):
    http_status = status.HTTP_401_UNAUTHORIZED
    rest_error_message = constants.REST_UNAUTHORIZED


class ForbiddenError(ProjectError):
    http_status = status.HTTP_403_FORBIDDEN
    rest_error_message = constants.REST_FORBIDDEN


class NotFoundError(ProjectError):
    http_status = status.HTTP_404_NOT_FOUND
    rest_error_message = constants.REST_NOT_FOUND


class ConflictError(ProjectError):
    http_status = status.HTTP_409_CONFLICT
    rest_error_message = constants.REST_CONFLICT


class InternalServerError(ProjectError):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    rest_error_message = constants.REST_INTERNAL_SERVER_ERROR


class ServiceUnavailableError(ProjectError):
    http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    rest_error_message = constants.REST_SERVICE_UNAVAILABLE


# ---------------------------------------------------------------------------
# Status mapping
# ---------------------------------------------------------------------------

# Rest messages for statuses produced by the framework itself (unknown
# route, wrong method, ...), keyed by status code.
_REST_MESSAGES: dict[int, str] = {
    cls.http_status: cls.rest_error_message
    for cls in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        NotFoundError,
        ConflictError,
        InternalServerError,
        ServiceUnavailableError,
    )
}
_REST_MESSAGES[status.HTTP_415_UNSUPPORTED_MEDIA_TYPE] = constants.REST_MEDIA_TYPE_NOT_SUPPORTED


def resolve_status(exc: BaseException) -> tuple[int, str]:
    """Return `(http_status, rest_error_message)` for an exception.

    Anything outside the ProjectError hierarchy resolves to
    503 Service Unavailable.
    """
    if isinstance(exc, ProjectError):
        return exc.http_status, exc.rest_error_message
    return ServiceUnavailableError.http_status, ServiceUnavailableError.rest_error_message


def rest_message_for_status(status_code: int) -> str:
    """Rest message for an arbitrary HTTP status, e.g. `405: Method Not Allowed`."""
    if status_code in _REST_MESSAGES:
        return _REST_MESSAGES[status_code]
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    return f"{status_code}: {phrase}"


def _detail_of(exc: BaseException) -> str:
    if isinstance(exc, ProjectError):
        return exc.message
    return str(exc) or type(exc).__name__


def _log(status_code: int, rest_message: str, detail: str, exc: BaseException | None) -> None:
    # 5xx carry the traceback, including the chained cause
    if status_code >= 500:
        logger.error("%s | %s", rest_message, detail, exc_info=exc)
    else:
        logger.warning("%s | %s", rest_message, detail)


def error_response(status_code: int, rest_message: str, detail: str) -> ErrorResponse:
    return ErrorResponse(
        status_code=status_code,
        date=datetime.now(timezone.utc),
        rest_error_message=rest_message,
        detailed_error_message=detail,
    )


def build_error_response(exc: BaseException) -> ErrorResponse:
    """Translate an exception into the error envelope and log it.

    The status is taken from the exception class; the detail from its
    message. Unrecognized exceptions become 503 responses.
    """
    status_code, rest_message = resolve_status(exc)
    detail = _detail_of(exc)
    _log(status_code, rest_message, detail, exc)
    return error_response(status_code, rest_message, detail)


def _to_json(body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=body.status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def project_exception_handler(request: Request, exc: ProjectError) -> JSONResponse:
    return _to_json(build_error_response(exc))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or unparseable request bodies are a plain 400."""
    _log(status.HTTP_400_BAD_REQUEST, constants.REST_BAD_REQUEST, constants.INVALID_JSON, None)
    return _to_json(
        error_response(
            status.HTTP_400_BAD_REQUEST,
            constants.REST_BAD_REQUEST,
            constants.INVALID_JSON,
        )
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework-raised HTTP errors (404 route, 405 method) in the envelope."""
    rest_message = rest_message_for_status(exc.status_code)
    detail = str(exc.detail)
    _log(exc.status_code, rest_message, detail, None)
    response = _to_json(error_response(exc.status_code, rest_message, detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

async def catch_unhandled_exceptions(request: Request, call_next) -> Response:
    """Render anything the exception handlers did not claim as a 503.

    Registered as HTTP middleware inside CORSMiddleware, so the envelope
    carries the same CORS headers as every other response.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return _to_json(build_error_response(exc))
