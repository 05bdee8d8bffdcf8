"""Click parameter types backed by the domain parsers."""

from __future__ import annotations

from datetime import date
from typing import Any

import click

from studentctl.domain.validation import parse_date, parse_float


class BirthDateType(click.ParamType):
    """``yyyy-MM-dd`` date between 1900-01-01 and today."""

    name = "yyyy-MM-dd"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> date:
        if isinstance(value, date):
            return value
        parsed = parse_date(str(value).strip())
        if parsed is None:
            self.fail(
                f"{value!r} is not a valid date of birth "
                "(use yyyy-MM-dd, between 1900-01-01 and today).",
                param,
                ctx,
            )
        return parsed


class NumberType(click.ParamType):
    """A decimal number; range rules are left to the service."""

    name = "number"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> float:
        if isinstance(value, float):
            return value
        parsed = parse_float(str(value).strip())
        if parsed is None:
            self.fail(f"{value!r} is not a valid number.", param, ctx)
        return parsed


BIRTH_DATE = BirthDateType()
NUMBER = NumberType()
