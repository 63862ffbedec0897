"""Locating the working project, its module name and its files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

MODULE_FILE = "go.mod"


def project_root_dir(start: str | os.PathLike[str] | None = None) -> Path:
    """Walk up from ``start`` (default: the working directory) to the module root."""
    current = Path(start if start is not None else Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / MODULE_FILE).exists():
            return directory
    raise FileNotFoundError("Project root directory not found")


def package_dir() -> Path:
    """The directory this package is installed in."""
    return Path(__file__).resolve().parent


def templates_dir() -> Path:
    """The directory holding the code templates shipped with the package."""
    return package_dir() / "templates"


def template_path(category: str, path: str) -> Path:
    """Path of a template file within a template category."""
    return templates_dir() / category / path


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the text of a file, or an empty string when it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.error("Error: %s", exc)
        return ""


def module_name(root: str | os.PathLike[str]) -> str:
    """The module name declared in the project's module file, or ``""``."""
    for line in read_file(Path(root) / MODULE_FILE).split("\n"):
        if line.startswith("module "):
            return line[len("module"):].strip()
    return ""


def go_file_names(path: str | os.PathLike[str]) -> list[str]:
    """Names of the regular ``.go`` files directly inside ``path``, sorted."""
    try:
        with os.scandir(path) as entries:
            names = [
                entry.name
                for entry in entries
                if not entry.is_dir(follow_symlinks=False)
                and entry.name.endswith(".go")
            ]
    except OSError:
        return []
    return sorted(names)