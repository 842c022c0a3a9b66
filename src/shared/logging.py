"""Logging configuration shared by the Ordering and Payments domains.

The deployment environment is read from ``ENV``, ``ENVIRONMENT`` or
``PROTEAN_ENV`` (first one set wins) and drives both the log level and the
structlog renderer. ``LOG_LEVEL`` overrides the level.
"""

import logging
import os
import sys

import structlog

_configured = False

_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
_JSON_ENVIRONMENTS = {"production", "staging"}


def get_environment() -> str:
    """Name of the environment the process runs in, lower-cased."""
    env = os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development"
    return env.lower()


def get_log_level(env: str | None = None) -> str:
    env = env or get_environment()
    return os.getenv("LOG_LEVEL", _LEVELS.get(env, "INFO"))


def build_renderer(env: str):
    """JSON lines for deployed environments, readable console output elsewhere."""
    if env in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=False,
        exception_formatter=structlog.dev.RichTracebackFormatter(
            show_locals=False,
            max_frames=2,
        ),
    )


def setup_stdlib_logging(env: str) -> None:
    log_level = get_log_level(env)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # Protean is chatty at DEBUG
    logging.getLogger("protean").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def setup_structlog(env: str) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            build_renderer(env),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers are created at import time; caching would pin them to
        # whatever configuration was active first
        cache_logger_on_first_use=False,
    )


def configure_logging(force: bool = False) -> None:
    """Configure stdlib logging and structlog once per process."""
    global _configured
    if _configured and not force:
        return
    env = get_environment()
    setup_stdlib_logging(env)
    setup_structlog(env)
    _configured = True
