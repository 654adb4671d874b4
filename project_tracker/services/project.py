"""
Project service.

Every method is a demonstration stub with a hard-coded outcome: it either
returns the success literal or raises one of the ProjectError subclasses.
Translation to HTTP happens in project_tracker.core.errors.
"""
from __future__ import annotations

import logging

from project_tracker.core.constants import (
    DONT_DIVIDE_BY_ZERO,
    FILE_DOES_NOT_EXIST,
    NOT_PERMITTED_TO_SEE_THIS,
    PROJECT_ALREADY_EXISTS,
    PROJECT_MUST_HAVE_DESCRIPTION,
    PROJECT_MUST_HAVE_NAME,
    PROJECT_MUST_HAVE_START_DATE,
    PROJECT_NOT_FOUND,
    REST_BAD_REQUEST,
    SUCCESS,
    UNAUTHORIZED_REQUEST,
)
from project_tracker.core.errors import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


class ProjectDAO:
    """Data-access stub. There is no storage behind it."""

    def get_project(self, good_data: bool) -> str:
        if not good_data:
            raise BadRequestError(REST_BAD_REQUEST)
        return SUCCESS


class ProjectService:
    def __init__(self, dao: ProjectDAO, input_file_path: str = "input.txt"):
        self.dao = dao
        self.input_file_path = input_file_path

    def succeed(self) -> str:
        return self.dao.get_project(True)

    def bad_request(self) -> str:
        messages = [
            PROJECT_MUST_HAVE_NAME,
            PROJECT_MUST_HAVE_DESCRIPTION,
            PROJECT_MUST_HAVE_START_DATE,
        ]
        raise BadRequestError("".join(messages))

    def unauthorized(self) -> str:
        raise UnauthorizedError(UNAUTHORIZED_REQUEST)

    def forbidden(self) -> str:
        raise ForbiddenError(NOT_PERMITTED_TO_SEE_THIS)

    def not_found(self) -> str:
        raise NotFoundError(PROJECT_NOT_FOUND)

    def conflict(self) -> str:
        raise ConflictError(PROJECT_ALREADY_EXISTS)

    def internal_server_error(self) -> str:
        numerator, denominator = 1, 0
        try:
            result = numerator // denominator
        except ZeroDivisionError as ex:
            raise InternalServerError(DONT_DIVIDE_BY_ZERO, cause=ex) from ex
        return str(result)

    def service_unavailable(self) -> str:
        """Open the configured input file; a missing file means 503."""
        try:
            with open(self.input_file_path, "rb"):
                pass
        except OSError as ex:
            raise ServiceUnavailableError(FILE_DOES_NOT_EXIST, cause=ex) from ex
        logger.info("Input file %s is present", self.input_file_path)
        return SUCCESS
