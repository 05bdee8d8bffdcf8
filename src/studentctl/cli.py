"""Root CLI group for studentctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from studentctl import __version__
from studentctl.commands import register_commands
from studentctl.commands._base import StudentGroup
from studentctl.commands._context import AppContext
from studentctl.config.logging import bind_command
from studentctl.config.settings import StudentSettings


@click.group(
    cls=StudentGroup,
    invoke_without_command=True,
    examples="""\
  studentctl add --first-name Ada --last-name Lovelace --email ada@example.com \\
      --phone 1234567890 --dob 1815-12-10 --major Mathematics --gpa 4.0
  studentctl list
  studentctl --db school.db run""",
)
@click.version_option(version=__version__, prog_name="studentctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (IDs only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Database file (overrides [database] path).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    db_path: Path | None,
) -> None:
    """studentctl — student record management."""
    settings = StudentSettings.from_cli(
        config_path=config_path,
        db_path=db_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
    else:
        bind_command(ctx.invoked_subcommand)


register_commands(cli)
