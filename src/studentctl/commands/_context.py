"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the process-wide storage handle: the engine is
created lazily on first use so ``--help`` and ``--version`` never touch
the database, and it is disposed when the root context closes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
from sqlalchemy.exc import SQLAlchemyError

from studentctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from studentctl.config.settings import StudentSettings
    from studentctl.services.result import ServiceResult
    from studentctl.services.students import StudentService

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: StudentSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._service: StudentService | None = None

        from studentctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            sql_echo=settings.database.echo,
        )

    @property
    def engine(self) -> Engine:
        """The SQLite engine (created lazily on first access)."""
        if self._engine is None:
            from studentctl.infrastructure.database.engine import init_database

            db_path = self.settings.resolved_db_path
            db = self.settings.database
            try:
                self._engine = init_database(db_path, timeout=db.timeout)
            except (SQLAlchemyError, OSError) as exc:
                logger.error("Cannot open database %s: %s", db_path, exc)
                raise click.ClickException(f"Cannot open database at {db_path}: {exc}") from exc
        return self._engine

    @property
    def service(self) -> StudentService:
        """The student service bound to this context's engine."""
        if self._service is None:
            from studentctl.infrastructure.repositories.students import StudentRepository
            from studentctl.services.students import StudentService

            self._service = StudentService(StudentRepository(self.engine))
        return self._service

    def close(self) -> None:
        """Release the storage handle. Safe to call more than once."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._service = None

    @property
    def output_settings(self) -> OutputSettings:
        display = self.settings.display
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            max_column_width=display.max_column_width,
            gpa_precision=display.gpa_precision,
        )

    def render(self, result: ServiceResult) -> str:
        return format_result(result, settings=self.output_settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = self.render(result)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
