"""
Shared pytest fixtures.

The service-unavailable endpoint opens a file; tests point it at a path
inside tmp_path so the outcome does not depend on the working directory.
"""
import pytest
from fastapi.testclient import TestClient

from project_tracker.main import app
from project_tracker.routers.project import get_project_service
from project_tracker.services.project import ProjectDAO, ProjectService


@pytest.fixture()
def missing_input_file(tmp_path):
    return str(tmp_path / "input.txt")


@pytest.fixture()
def service(missing_input_file):
    return ProjectService(ProjectDAO(), input_file_path=missing_input_file)


@pytest.fixture()
def client(service):
    app.dependency_overrides[get_project_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
