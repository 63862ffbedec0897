"""The ``go-mongr8`` command line: generating, applying and consolidating migrations."""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from collections.abc import Sequence

from mongr8.options import (
    ARG_DESC,
    ARG_USE_FORCE_CONVERSION,
    ARG_USE_SCHEMA_VALIDATION,
    ARG_USE_SORTED_SCHEMA,
)
from mongr8.project import project_root_dir

logger = logging.getLogger(__name__)

PROG = "go-mongr8"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_GENERATE_BOOL_FLAGS = (
    (ARG_USE_SORTED_SCHEMA, "Use sorted schema on migration"),
    (ARG_USE_FORCE_CONVERSION, "Force on type convertion on migration"),
    (ARG_USE_SCHEMA_VALIDATION, "Apply schema validation on migration"),
)


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def _dest(flag: str) -> str:
    return flag.replace("-", "_")


def _flag_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _command_identifier(command: str) -> str:
    """Turn a dashed command name into its camel-case identifier."""
    first, *rest = command.split("-")
    return first + "".join(part.capitalize() for part in rest)


def _forwarded_flags(namespace: argparse.Namespace, flags: Sequence[str]) -> list[str]:
    """Render parsed options as arguments for the project's migration program."""
    args: list[str] = []
    for flag in flags:
        if not hasattr(namespace, _dest(flag)):
            continue
        value = _flag_text(getattr(namespace, _dest(flag)))
        args.append(f"-{flag}")
        if value != "true":
            args.append(value)
    return args


def _run_migration_program(operation: str, action: str, extra_args: list[str]) -> int:
    """Run the project's migration program for ``operation`` and echo its output."""
    try:
        root = project_root_dir()
    except FileNotFoundError as exc:
        logger.error("Error %s migration: %s", action, exc)
        return 1

    command = ["go", "run", "main.go", *extra_args]
    try:
        completed = subprocess.run(
            command,
            cwd=root / "mongr8" / "cmd" / operation,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.error("Error %s migration: %s", action, exc)
        return 1

    if completed.returncode != 0:
        logger.error(
            "Error %s migration: exit status %d: %s",
            action,
            completed.returncode,
            completed.stdout,
        )
        return 1

    sys.stdout.write(completed.stdout or "")
    return 0


def _apply_migration(namespace: argparse.Namespace) -> int:
    return _run_migration_program("apply", "applying", _forwarded_flags(namespace, ()))


def _generate_migration(namespace: argparse.Namespace) -> int:
    flags = [flag for flag, _ in _GENERATE_BOOL_FLAGS] + [ARG_DESC]
    return _run_migration_program(
        "generate", "generating", _forwarded_flags(namespace, flags)
    )


def _consolidate_migration(namespace: argparse.Namespace) -> int:
    command = getattr(namespace, "command", None) or "consolidate-migration"
    sys.stdout.write(f"{_command_identifier(command)} called\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the command and its sub-commands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "go-mongr8, a lightweight yet robust package for MongoDB migration "
            "management. Simplify the management of MongoDB schema changes."
        ),
    )
    parser.add_argument(
        "-t", "--toggle", action="store_true", help="Help message for toggle"
    )
    commands = parser.add_subparsers(dest="command", metavar="command")

    apply = commands.add_parser(
        "apply-migration",
        help="Apply all migrations",
        description="Apply migration changes to MongoDB",
    )
    apply.set_defaults(handler=_apply_migration)

    generate = commands.add_parser(
        "generate-migration",
        help="Generate migration files",
        description="Generate migration files based on defined collections",
    )
    for flag, help_text in _GENERATE_BOOL_FLAGS:
        generate.add_argument(
            f"--{flag}",
            dest=_dest(flag),
            nargs="?",
            const=True,
            default=True,
            type=_parse_bool,
            help=help_text,
        )
    generate.add_argument(
        f"--{ARG_DESC}",
        dest=_dest(ARG_DESC),
        default="",
        help="Description for current migration",
    )
    generate.set_defaults(handler=_generate_migration)

    consolidate = commands.add_parser(
        "consolidate-migration",
        help="Consolidate migration with current database schema",
        description=(
            "This command will consolidate current migration files with current "
            "schema/data in database"
        ),
    )
    consolidate.set_defaults(handler=_consolidate_migration)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    parser = build_parser()
    namespace = parser.parse_args(argv)
    handler = getattr(namespace, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(namespace)


if __name__ == "__main__":
    sys.exit(main())