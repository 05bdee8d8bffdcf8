"""Commands: list every record, search by name, filter by major or GPA."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from studentctl.commands._base import StudentCommand
from studentctl.commands._params import NUMBER

if TYPE_CHECKING:
    from studentctl.commands._context import AppContext


@click.command(
    "list",
    cls=StudentCommand,
    examples="""\
  studentctl list
  studentctl --quiet list
  studentctl --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all students ordered by ID."""
    app.emit(app.service.list_students())


@click.command(
    cls=StudentCommand,
    examples="""\
  studentctl search ada
  studentctl search "love" """,
)
@click.argument("name")
@click.pass_obj
def search(app: AppContext, name: str) -> None:
    """Find students whose first or last name contains NAME."""
    app.emit(app.service.search_by_name(name))


@click.command(
    cls=StudentCommand,
    examples="""\
  studentctl major math
  studentctl major "computer" """,
)
@click.argument("fragment")
@click.pass_obj
def major(app: AppContext, fragment: str) -> None:
    """Find students whose major contains FRAGMENT, highest GPA first."""
    app.emit(app.service.filter_by_major(fragment))


@click.command(
    cls=StudentCommand,
    examples="""\
  studentctl gpa 3.5
  studentctl --quiet gpa 3.0""",
)
@click.argument("min_gpa", type=NUMBER)
@click.pass_obj
def gpa(app: AppContext, min_gpa: float) -> None:
    """Find students with GPA at or above MIN_GPA, highest first."""
    app.emit(app.service.filter_by_min_gpa(min_gpa))
