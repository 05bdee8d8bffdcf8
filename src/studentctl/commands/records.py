"""Commands: add, show, update, and delete single student records."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from studentctl.commands._base import StudentCommand
from studentctl.commands._params import BIRTH_DATE, NUMBER

if TYPE_CHECKING:
    from studentctl.commands._context import AppContext


@click.command(
    cls=StudentCommand,
    examples="""\
  studentctl add --first-name Ada --last-name Lovelace --email ada@example.com \\
      --phone 1234567890 --dob 1815-12-10 --major Mathematics --gpa 4.0
  studentctl --json add --first-name Alan --last-name Turing --email alan@example.com \\
      --phone "+44 20 7946 0000" --dob 1912-06-23 --major "Computer Science" --gpa 3.9""",
)
@click.option("--first-name", required=True, help="First name (letters and spaces).")
@click.option("--last-name", required=True, help="Last name (letters and spaces).")
@click.option("--email", required=True, help="Email address (unique).")
@click.option("--phone", required=True, help="Phone number, 10-15 digits.")
@click.option("--dob", "date_of_birth", required=True, type=BIRTH_DATE, help="Date of birth.")
@click.option("--major", required=True, help="Major, 2-50 characters.")
@click.option("--gpa", required=True, type=NUMBER, help="GPA between 0.0 and 4.0.")
@click.pass_obj
def add(
    app: AppContext,
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    date_of_birth: date,
    major: str,
    gpa: float,
) -> None:
    """Add a new student record."""
    app.emit(
        app.service.create_student(
            first_name.strip(),
            last_name.strip(),
            email.strip(),
            phone.strip(),
            date_of_birth,
            major.strip(),
            gpa,
        )
    )


@click.command(
    cls=StudentCommand,
    examples="""\
  studentctl show 1
  studentctl --json show 1""",
)
@click.argument("student_id", type=int)
@click.pass_obj
def show(app: AppContext, student_id: int) -> None:
    """Show one student record by ID."""
    app.emit(app.service.get_student(student_id))


@click.command(
    cls=StudentCommand,
    examples="""\
  studentctl update 1 --gpa 3.5
  studentctl update 1 --email ada.lovelace@example.com --major "Applied Mathematics" """,
)
@click.argument("student_id", type=int)
@click.option("--first-name", default=None, help="New first name.")
@click.option("--last-name", default=None, help="New last name.")
@click.option("--email", default=None, help="New email address.")
@click.option("--phone", default=None, help="New phone number.")
@click.option("--dob", "date_of_birth", default=None, type=BIRTH_DATE, help="New date of birth.")
@click.option("--major", default=None, help="New major.")
@click.option("--gpa", default=None, type=NUMBER, help="New GPA.")
@click.pass_obj
def update(
    app: AppContext,
    student_id: int,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    phone: str | None,
    date_of_birth: date | None,
    major: str | None,
    gpa: float | None,
) -> None:
    """Update a student record; omitted fields keep their current value."""
    if all(
        v is None for v in (first_name, last_name, email, phone, date_of_birth, major, gpa)
    ):
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)

    svc = app.service
    current = svc.get_student(student_id)
    if not current.ok:
        app.emit(current)
        return

    d = current.data
    app.emit(
        svc.update_student(
            student_id,
            first_name.strip() if first_name is not None else d["first_name"],
            last_name.strip() if last_name is not None else d["last_name"],
            email.strip() if email is not None else d["email"],
            phone.strip() if phone is not None else d["phone"],
            date_of_birth or date.fromisoformat(d["date_of_birth"]),
            major.strip() if major is not None else d["major"],
            gpa if gpa is not None else float(d["gpa"]),
        )
    )


@click.command(
    cls=StudentCommand,
    examples="""\
  studentctl delete 1
  studentctl delete 1 --yes""",
)
@click.argument("student_id", type=int)
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def delete(app: AppContext, student_id: int, yes: bool) -> None:
    """Delete a student record."""
    svc = app.service
    if not yes:
        current = svc.get_student(student_id)
        if not current.ok:
            app.emit(current)
            return
        click.echo(app.render(current))
        if not click.confirm("Are you sure you want to delete this student?", default=False):
            click.echo("Delete operation cancelled.")
            return
    app.emit(svc.delete_student(student_id))
