"""
Project router.

GET /project/success
GET /project/badrequest
GET /project/unauthorized
GET /project/forbidden
GET /project/notfound
GET /project/conflict
GET /project/internalservererror
GET /project/serviceunavailable

Each endpoint has a fixed outcome. Errors are raised by the service and
rendered by the handlers registered in project_tracker.main.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from project_tracker.schemas.common import ErrorResponse
from project_tracker.services.project import ProjectDAO, ProjectService

router = APIRouter(prefix="/project", tags=["project"])


def get_project_service(request: Request) -> ProjectService:
    config = request.app.state.settings
    return ProjectService(ProjectDAO(), input_file_path=config.INPUT_FILE_PATH)


def _error(description: str) -> dict:
    return {"model": ErrorResponse, "description": description}


@router.get(
    "/success",
    response_class=PlainTextResponse,
    summary="Always succeeds",
    responses={200: {"description": "Plain text `Success`."}},
)
def success(service: ProjectService = Depends(get_project_service)):
    return service.succeed()


@router.get(
    "/badrequest",
    response_class=PlainTextResponse,
    summary="Always fails with 400",
    responses={400: _error("The project is missing its name, description and start date.")},
)
def bad_request(service: ProjectService = Depends(get_project_service)):
    return service.bad_request()


@router.get(
    "/unauthorized",
    response_class=PlainTextResponse,
    summary="Always fails with 401",
    responses={401: _error("Unauthorized request.")},
)
def unauthorized(service: ProjectService = Depends(get_project_service)):
    return service.unauthorized()


@router.get(
    "/forbidden",
    response_class=PlainTextResponse,
    summary="Always fails with 403",
    responses={403: _error("Caller may not see the resource.")},
)
def forbidden(service: ProjectService = Depends(get_project_service)):
    return service.forbidden()


@router.get(
    "/notfound",
    response_class=PlainTextResponse,
    summary="Always fails with 404",
    responses={404: _error("The project was not found.")},
)
def not_found(service: ProjectService = Depends(get_project_service)):
    return service.not_found()


@router.get(
    "/conflict",
    response_class=PlainTextResponse,
    summary="Always fails with 409",
    responses={409: _error("The project already exists.")},
)
def conflict(service: ProjectService = Depends(get_project_service)):
    return service.conflict()


@router.get(
    "/internalservererror",
    response_class=PlainTextResponse,
    summary="Fails with 500 after a division by zero",
    responses={500: _error("Division by zero wrapped in an internal error.")},
)
def internal_server_error(service: ProjectService = Depends(get_project_service)):
    """Divides by zero and reports the caught fault as a 500."""
    return service.internal_server_error()


@router.get(
    "/serviceunavailable",
    response_class=PlainTextResponse,
    summary="Fails with 503 when the input file is missing",
    responses={503: _error("File does not exist.")},
)
def service_unavailable(service: ProjectService = Depends(get_project_service)):
    """
    Tries to open the configured input file (`INPUT_FILE_PATH`).
    Returns **503** when it cannot be opened.
    """
    return service.service_unavailable()
