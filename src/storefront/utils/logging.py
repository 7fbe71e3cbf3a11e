"""Logging configuration for the storefront.

Modules log through ``structlog.get_logger(__name__)``. ``configure_logging``
is called once by the entry point (``src/manage.py``); it routes structlog
events through standard library handlers (console plus a rotating file under
``logs/``). The deployment environment picks both the level and the renderer:
JSON lines in production and staging, the console renderer elsewhere.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_JSON_ENVIRONMENTS = ("production", "staging")


def get_environment() -> str:
    """Deployment environment from ENV, then ENVIRONMENT; development when neither is set."""
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or "development").lower()


def get_log_level(env: str | None = None) -> str:
    """LOG_LEVEL when set, otherwise the default level for the environment."""
    env = env or get_environment()
    return os.getenv("LOG_LEVEL", _LEVELS.get(env, "INFO")).upper()


def _renderer(env: str):
    if env in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
    )


def configure_logging(log_dir: str | Path = "logs", log_file_prefix: str = "storefront") -> None:
    """Install the root handlers and the structlog processor chain."""
    env = get_environment()
    level = get_log_level(env)

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [
        logging.StreamHandler(sys.stdout),
        logging.handlers.RotatingFileHandler(
            filename=log_dir / f"{log_file_prefix}.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        ),
    ]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(env),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
