"""Command: the interactive record-management menu.

A closed, line-oriented loop over the same service the one-shot commands
use.  All free-text parsing happens here, before the service is called.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from studentctl.commands._base import StudentCommand
from studentctl.domain.validation import is_valid_gpa, parse_date, parse_float, parse_int

if TYPE_CHECKING:
    from collections.abc import Callable

    from studentctl.commands._context import AppContext
    from studentctl.services.result import ServiceResult

_RULE = "=" * 60


def _ask(label: str, default: str | None = None) -> str:
    """Prompt for one line; an empty answer returns *default* (or "")."""
    if default is None:
        value = click.prompt(label, default="", show_default=False)
    else:
        value = click.prompt(label, default=default)
    return str(value).strip()


def _heading(title: str) -> None:
    click.echo(f"\n{_RULE}\n{title.center(60).rstrip()}\n{_RULE}")


def _show(app: AppContext, result: ServiceResult) -> None:
    click.echo(app.render(result))


def _ask_id(label: str) -> int | None:
    student_id = parse_int(_ask(label))
    if student_id is None:
        click.echo("Invalid Student ID format.")
    return student_id


def _failure_message(result: ServiceResult) -> str:
    return result.error.message if result.error else "Unknown error"


# ── Menu actions ──────────────────────────────────────────────────────


def _add_student(app: AppContext) -> None:
    _heading("ADD NEW STUDENT")
    first_name = _ask("First Name")
    last_name = _ask("Last Name")
    email = _ask("Email")
    phone = _ask("Phone")
    date_of_birth = parse_date(_ask("Date of Birth (yyyy-MM-dd)"))
    major = _ask("Major")
    gpa = parse_float(_ask("GPA (0.0-4.0)"))

    if date_of_birth is None:
        click.echo("Invalid date format. Please use yyyy-MM-dd format.")
        return
    if gpa is None:
        click.echo("Invalid GPA format. Please enter a valid number.")
        return

    result = app.service.create_student(
        first_name, last_name, email, phone, date_of_birth, major, gpa
    )
    if result.ok:
        click.echo(f"Student added successfully! Student ID: {result.data['id']}")
    else:
        click.echo(f"Failed to add student: {_failure_message(result)}")


def _view_all(app: AppContext) -> None:
    _heading("ALL STUDENTS")
    _show(app, app.service.list_students())


def _view_one(app: AppContext) -> None:
    _heading("VIEW STUDENT BY ID")
    student_id = _ask_id("Student ID")
    if student_id is not None:
        _show(app, app.service.get_student(student_id))


def _update_student(app: AppContext) -> None:
    _heading("UPDATE STUDENT")
    student_id = _ask_id("Student ID to update")
    if student_id is None:
        return

    svc = app.service
    current = svc.get_student(student_id)
    _show(app, current)
    if not current.ok:
        return

    d = current.data
    click.echo("\nEnter new information (press Enter to keep current value):")
    first_name = _ask("First Name", d["first_name"])
    last_name = _ask("Last Name", d["last_name"])
    email = _ask("Email", d["email"])
    phone = _ask("Phone", d["phone"])
    dob_text = _ask("Date of Birth (yyyy-MM-dd)", d["date_of_birth"])
    major = _ask("Major", d["major"])
    gpa_text = _ask("GPA", str(d["gpa"]))

    date_of_birth: date | None = (
        date.fromisoformat(d["date_of_birth"])
        if dob_text == d["date_of_birth"]
        else parse_date(dob_text)
    )
    gpa = parse_float(gpa_text)
    if date_of_birth is None:
        click.echo("Invalid date format. Update cancelled.")
        return
    if gpa is None:
        click.echo("Invalid GPA format. Update cancelled.")
        return

    result = svc.update_student(
        student_id, first_name, last_name, email, phone, date_of_birth, major, gpa
    )
    if result.ok:
        click.echo("Student updated successfully!")
        _show(app, svc.get_student(student_id))
    else:
        click.echo(f"Failed to update student: {_failure_message(result)}")


def _delete_student(app: AppContext) -> None:
    _heading("DELETE STUDENT")
    student_id = _ask_id("Student ID to delete")
    if student_id is None:
        return

    svc = app.service
    current = svc.get_student(student_id)
    _show(app, current)
    if not current.ok:
        return

    if not click.confirm("Are you sure you want to delete this student?", default=False):
        click.echo("Delete operation cancelled.")
        return

    result = svc.delete_student(student_id)
    if result.ok:
        click.echo("Student deleted successfully!")
    else:
        click.echo(f"Failed to delete student: {_failure_message(result)}")


def _search_by_name(app: AppContext) -> None:
    _heading("SEARCH STUDENTS BY NAME")
    name = _ask("Name to search")
    if not name:
        click.echo("Please enter a name to search.")
        return
    _show(app, app.service.search_by_name(name))


def _filter_by_major(app: AppContext) -> None:
    _heading("FILTER STUDENTS BY MAJOR")
    major = _ask("Major to filter")
    if not major:
        click.echo("Please enter a major to filter.")
        return
    _show(app, app.service.filter_by_major(major))


def _filter_by_gpa(app: AppContext) -> None:
    _heading("FILTER STUDENTS BY GPA")
    min_gpa = parse_float(_ask("Minimum GPA (0.0-4.0)"))
    if min_gpa is None or not is_valid_gpa(min_gpa):
        click.echo("Invalid GPA. Please enter a value between 0.0 and 4.0.")
        return
    _show(app, app.service.filter_by_min_gpa(min_gpa))


MENU: dict[int, tuple[str, Callable[[AppContext], None]]] = {
    1: ("Add New Student", _add_student),
    2: ("View All Students", _view_all),
    3: ("View Student by ID", _view_one),
    4: ("Update Student", _update_student),
    5: ("Delete Student", _delete_student),
    6: ("Search Students by Name", _search_by_name),
    7: ("Filter Students by Major", _filter_by_major),
    8: ("Filter Students by GPA", _filter_by_gpa),
}
EXIT_CHOICE = 9


def _print_menu() -> None:
    _heading("MAIN MENU")
    for number, (label, _) in MENU.items():
        click.echo(f"{number}. {label}")
    click.echo(f"{EXIT_CHOICE}. Exit")
    click.echo(_RULE)


@click.command(
    cls=StudentCommand,
    examples="""\
  studentctl run
  studentctl --db ~/school/students.db run""",
)
@click.pass_obj
def run(app: AppContext) -> None:
    """Start the interactive student management menu."""
    click.echo("STUDENT MANAGEMENT SYSTEM")
    try:
        while True:
            _print_menu()
            choice = parse_int(_ask(f"Enter your choice (1-{EXIT_CHOICE})"))
            if choice == EXIT_CHOICE:
                break
            entry = MENU.get(choice) if choice is not None else None
            if entry is None:
                click.echo("Invalid choice. Please try again.")
                continue
            entry[1](app)
    except click.Abort:
        # End of input closes the menu like choosing Exit.
        click.echo()
    click.echo("Goodbye!")
