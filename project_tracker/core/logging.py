"""
Logging for the `project_tracker` package.

Only the package logger gets a handler; the root logger and whatever the
server (gunicorn, uvicorn) installed on it are left alone. Records still
propagate to root.
"""
import logging
import logging.config

PACKAGE_LOGGER = "project_tracker"


def build_logging_config(level: str = "INFO") -> dict:
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "service": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "service",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {"level": level_name, "handlers": ["stdout"]},
        },
    }


def configure_logging(level: str = "INFO") -> None:
    """Attach a stdout handler to the package logger at `level`.

    Unknown level names fall back to INFO. Safe to call more than once.
    """
    logging.config.dictConfig(build_logging_config(level))
