from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from project_tracker import __version__
from project_tracker.core.config import Settings, settings
from project_tracker.core.errors import (
    ProjectError,
    catch_unhandled_exceptions,
    http_exception_handler,
    project_exception_handler,
    validation_exception_handler,
)
from project_tracker.core.logging import configure_logging
from project_tracker.routers import project as project_router


def create_app(config: Settings = settings) -> FastAPI:
    app = FastAPI(
        title="Project Tracker API",
        description=(
            "Demonstrates mapping application exceptions to HTTP error responses.\n\n"
            "All error responses follow the "
            "`{statusCode, date, restErrorMessage, detailedErrorMessage}` envelope."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # Read by request dependencies, see routers.project.get_project_service
    app.state.settings = config

    # --- Catch-all, added before CORS so CORS stays outermost ---
    app.middleware("http")(catch_unhandled_exceptions)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Exception handlers (most specific first) ---
    app.add_exception_handler(ProjectError, project_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # --- Routers ---
    app.include_router(project_router.router)

    return app


configure_logging(settings.LOG_LEVEL)
app = create_app()
