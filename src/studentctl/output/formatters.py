"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich tables and panels) or
machines (--json).  ``--quiet`` reduces output to identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from studentctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from studentctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be presented."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    max_column_width: int = 30
    gpa_precision: int = 2


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the full Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        max_column_width=settings.max_column_width,
        gpa_precision=settings.gpa_precision,
    )
