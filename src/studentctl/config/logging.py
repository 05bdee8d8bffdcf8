"""Logging setup: structlog rendering over the stdlib logging tree.

Everything goes to one stderr handler so stdout carries only command
output.  Console rendering by default, one JSON object per line with
``--log-json``.  SQL statements (``[database] echo``) are logged through
the ``sqlalchemy.engine`` logger into that same handler.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "studentctl"
SQL_LOGGER = "sqlalchemy.engine"

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _stderr_handler(log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_SHARED_PROCESSORS),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    sql_echo: bool = False,
) -> None:
    """Install the stderr handler and set logger levels.

    Safe to call repeatedly; the root handler is replaced, not stacked.

    Args:
        verbose: ``studentctl`` loggers emit DEBUG instead of WARNING+.
        log_json: JSON lines instead of the console renderer.
        sql_echo: Log every SQL statement at INFO.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    # -v never opens up SQLAlchemy; only sql_echo does.
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.WARNING)


def bind_command(name: str) -> None:
    """Tag every subsequent log line with the running CLI command."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=name)
