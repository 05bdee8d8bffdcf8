"""Locate ``studentctl.toml``.

``STUDENTCTL_CONFIG`` names the file directly.  Otherwise the nearest
``studentctl.toml`` in the start directory or one of its ancestors wins.
An explicit ``--config`` bypasses this module (see ``StudentSettings``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "studentctl.toml"
CONFIG_ENV_VAR = "STUDENTCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: CWD), or None.

    A ``STUDENTCTL_CONFIG`` pointing at a missing file means "no config";
    the walk-up search is not tried in that case.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path.resolve() if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
