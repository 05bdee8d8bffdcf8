"""Field validation and free-text parsing for student records.

Every function here is total: bad input (including ``None``) yields
``False`` or ``None``, never an exception.  The parsers return an
explicit ``X | None`` so a failed parse is visible in the signature.

:func:`validate_student` composes the predicates in a fixed order and
reports the first failure only (fail-fast, not aggregate).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date

NAME_PATTERN = re.compile(r"[A-Za-z ]+")
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@(.+)")
# ASCII whitespace only; str patterns would let \s match U+00A0 and friends.
PHONE_PATTERN = re.compile(r"[+]?[0-9 \t\n\x0b\f\r\-()]{10,15}")
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

MIN_NAME_LENGTH = 2
MIN_MAJOR_LENGTH = 2
MAX_MAJOR_LENGTH = 50
MIN_GPA = 0.0
MAX_GPA = 4.0
EARLIEST_BIRTH_DATE = date(1900, 1, 1)

FIRST_NAME_ERROR = (
    "Invalid first name. Must contain only letters and be at least 2 characters long."
)
LAST_NAME_ERROR = "Invalid last name. Must contain only letters and be at least 2 characters long."
EMAIL_ERROR = "Invalid email format."
PHONE_ERROR = "Invalid phone number format."
BIRTH_DATE_ERROR = "Invalid date of birth. Must be between 1900-01-01 and today."
MAJOR_ERROR = "Invalid major. Must be between 2 and 50 characters long."
GPA_ERROR = "Invalid GPA. Must be between 0.0 and 4.0."


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_valid_name(name: str | None) -> bool:
    """Letters and spaces only, at least two characters once trimmed."""
    if name is None:
        return False
    trimmed = name.strip()
    return len(trimmed) >= MIN_NAME_LENGTH and NAME_PATTERN.fullmatch(trimmed) is not None


def is_valid_email(email: str | None) -> bool:
    """Minimal ``local@domain`` shape check; the domain part is not validated."""
    return email is not None and EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone(phone: str | None) -> bool:
    """10-15 digits, spaces, dashes or parentheses, optional leading ``+``.

    The raw value is checked; surrounding whitespace is not trimmed.
    """
    return phone is not None and PHONE_PATTERN.fullmatch(phone) is not None


def is_valid_major(major: str | None) -> bool:
    if major is None:
        return False
    return MIN_MAJOR_LENGTH <= len(major.strip()) <= MAX_MAJOR_LENGTH


def is_valid_gpa(gpa: float | None) -> bool:
    """Inclusive ``[0.0, 4.0]``. NaN is rejected."""
    if isinstance(gpa, bool) or not isinstance(gpa, (int, float)):
        return False
    return not math.isnan(gpa) and MIN_GPA <= gpa <= MAX_GPA


def is_valid_birth_date(value: date | None, *, today: date | None = None) -> bool:
    """Birth dates must fall within ``[1900-01-01, today]``."""
    if value is None:
        return False
    return EARLIEST_BIRTH_DATE <= value <= (today or date.today())


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def parse_date(text: str | None, *, today: date | None = None) -> date | None:
    """Parse a strict ``yyyy-MM-dd`` birth date.

    Returns None when the text is malformed, names an impossible day,
    lies in the future, or precedes 1900-01-01.
    """
    if text is None or DATE_PATTERN.fullmatch(text) is None:
        return None
    try:
        parsed = date.fromisoformat(text)
    except ValueError:
        return None
    if not is_valid_birth_date(parsed, today=today):
        return None
    return parsed


def parse_float(text: str | None) -> float | None:
    """Decimal number, surrounding whitespace allowed.

    Digit-group underscores, ``nan`` and ``inf`` are rejected.
    """
    if text is None or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_int(text: str | None) -> int | None:
    """Optionally signed ASCII digits, nothing else."""
    if text is None or INT_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


# ---------------------------------------------------------------------------
# Composite check
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :func:`validate_student`: ``error`` is set when invalid."""

    valid: bool
    error: str | None = None
    field: str | None = None


def validate_student(
    *,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    phone: str | None,
    date_of_birth: date | None,
    major: str | None,
    gpa: float | None,
    today: date | None = None,
) -> ValidationResult:
    """Check all record fields, stopping at the first failure.

    Order: first name, last name, email, phone, date of birth, major, GPA.
    """
    checks: list[tuple[str, bool, str]] = [
        ("first_name", is_valid_name(first_name), FIRST_NAME_ERROR),
        ("last_name", is_valid_name(last_name), LAST_NAME_ERROR),
        ("email", is_valid_email(email), EMAIL_ERROR),
        ("phone", is_valid_phone(phone), PHONE_ERROR),
        ("date_of_birth", is_valid_birth_date(date_of_birth, today=today), BIRTH_DATE_ERROR),
        ("major", is_valid_major(major), MAJOR_ERROR),
        ("gpa", is_valid_gpa(gpa), GPA_ERROR),
    ]
    for field_name, ok, message in checks:
        if not ok:
            return ValidationResult(valid=False, error=message, field=field_name)
    return ValidationResult(valid=True)
