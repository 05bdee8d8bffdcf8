"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, studentctl.toml only contains
overrides.  An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- studentctl.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section.

    ``path`` is resolved against the directory holding studentctl.toml
    (or the CWD when there is no config file).
    """

    model_config = {"frozen": True}

    path: str = "studentctl.db"
    timeout: float = 5.0
    echo: bool = False


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    max_column_width: int = Field(default=30, ge=4)
    gpa_precision: int = Field(default=2, ge=0, le=4)
