"""Inspecting the migration files already generated in a project."""

from __future__ import annotations

import os
import re
from pathlib import Path

from mongr8.project import go_file_names, project_root_dir, read_file

MIGRATION_DIR = Path("mongr8") / "migration"
MIGRATION_VAR_PREFIX = "Migration"

_MIGRATION_FILE = re.compile(r"[0-9]{8}_[0-9]{6}\.go")
_MIGRATION_VAR = re.compile(MIGRATION_VAR_PREFIX + r"[0-9]+")


def migration_var_names(root: str | os.PathLike[str] | None = None) -> list[str]:
    """Names of the migration variables declared by each versioned migration file.

    Only files named like ``YYYYMMDD_HHMMSS.go`` are inspected; a file without
    a migration variable is skipped. ``root`` defaults to the project root.
    """
    base = Path(root) if root is not None else project_root_dir()
    directory = base / MIGRATION_DIR
    names = []
    for file_name in go_file_names(directory):
        if _MIGRATION_FILE.fullmatch(file_name) is None:
            continue
        match = _MIGRATION_VAR.search(read_file(directory / file_name))
        if match is not None:
            names.append(match.group(0))
    return names


def next_suffix(root: str | os.PathLike[str] | None = None) -> int:
    """The number to give the next migration variable: one past the highest in use."""
    suffixes = (
        int(name[len(MIGRATION_VAR_PREFIX):]) for name in migration_var_names(root)
    )
    return max(suffixes, default=0) + 1