"""Discovering collection definitions in a project and preparing template data."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from mongr8.project import go_file_names, module_name, project_root_dir, read_file
from mongr8.textcase import to_capitalized_camel_case, to_snake_case

logger = logging.getLogger(__name__)

MONGR8_DIR = "mongr8"
COLLECTION_DIR = Path(MONGR8_DIR) / "collection"

_STRUCT_PATTERN = re.compile(r"type [a-zA-Z0-9]+ struct")
_NAME_PATTERN = re.compile(r'metadata.InitMetadata\("[a-zA-Z0-9_]+"\)')

PathLike = str | os.PathLike[str]


@dataclass
class CollectionTemplateVars:
    """Values filled into a new collection definition file."""

    create_date: str
    entity: str
    collection: str


@dataclass
class CombinedCollectionsTemplateVars:
    """Values filled into the file that lists every collection."""

    create_date: str
    module_name: str
    collections: list[str] = field(default_factory=list)


def collection_struct_name(path: PathLike) -> str:
    """The name of the first struct type declared in a collection file."""
    match = _STRUCT_PATTERN.search(read_file(path))
    if match is None:
        raise ValueError("no valid collection struct was found")
    return match.group(0).split(" ")[1]


def collection_name(path: PathLike) -> str:
    """The collection name passed to the metadata initializer in a file."""
    match = _NAME_PATTERN.search(read_file(path))
    if match is None:
        raise ValueError("no valid collection name was found")
    return match.group(0).split('"')[1]


def _resolve_root(root: PathLike | None) -> Path | None:
    if root is not None:
        return Path(root)
    try:
        return project_root_dir()
    except FileNotFoundError:
        return None


def _scan_collections(root: PathLike | None, extract: Callable[[Path], str]) -> list[str]:
    base = _resolve_root(root)
    if base is None:
        return []
    directory = base / COLLECTION_DIR
    found = []
    for name in go_file_names(directory):
        try:
            found.append(extract(directory / name))
        except ValueError as exc:
            logger.warning("%s: %s", name, exc)
    return found


def collection_struct_names(root: PathLike | None = None) -> list[str]:
    """Struct names of every collection file in the project."""
    return _scan_collections(root, collection_struct_name)


def collection_names(root: PathLike | None = None) -> list[str]:
    """Collection names declared by every collection file in the project."""
    return _scan_collections(root, collection_name)


def _today() -> str:
    return date.today().isoformat()


def collection_template_vars(
    name: str, root: PathLike | None = None
) -> CollectionTemplateVars:
    """Template values for a new collection; the name is normalized to snake case."""
    collection = to_snake_case(name)
    if not collection:
        raise ValueError("an empty string provided")
    if collection in collection_names(root):
        raise ValueError("the provided collection name already exists")
    return CollectionTemplateVars(
        create_date=_today(),
        entity=to_capitalized_camel_case(collection),
        collection=collection,
    )


def combined_collections_template_vars(
    root: PathLike | None = None,
) -> CombinedCollectionsTemplateVars:
    """Template values for the file that gathers every collection instance."""
    base = Path(root) if root is not None else project_root_dir()
    return CombinedCollectionsTemplateVars(
        create_date=_today(),
        module_name=module_name(base),
        collections=[f"Instance{name}" for name in collection_struct_names(base)],
    )