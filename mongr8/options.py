"""Migration options read from the command line, and shared migration constants."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

MIGRATION_OPTION_KEY = "migration-option"

ARG_USE_SORTED_SCHEMA = "use-sorted-schema"
ARG_USE_FORCE_CONVERSION = "use-force-conversion"
ARG_USE_SCHEMA_VALIDATION = "use-schema-validation"
ARG_USE_TRANSACTION = "use-transaction"
ARG_DESC = "desc"

MIGRATION_HISTORY_COLLECTION = "mongr8_migration_history"
MIGRATION_ID_FORMAT = "%Y%m%d_%H%M%S"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


@dataclass
class MigrationOption:
    """Switches that control how a migration is generated or applied."""

    use_sorted_schema: bool = False
    use_force_conversion: bool = False
    use_schema_validation: bool = False
    use_transaction: bool = False
    desc: str = ""


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


_BOOL_FLAGS = (
    (ARG_USE_SORTED_SCHEMA, "use_sorted_schema", "Define option for Sorted MongoDb Schema"),
    (ARG_USE_FORCE_CONVERSION, "use_force_conversion", "Define option for forced conversion on migration"),
    (ARG_USE_SCHEMA_VALIDATION, "use_schema_validation", "Define option for Schema Validation on migration"),
    (ARG_USE_TRANSACTION, "use_transaction", "Define option for Transaction Usage on migration"),
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(allow_abbrev=False)
    for flag, dest, help_text in _BOOL_FLAGS:
        parser.add_argument(
            f"-{flag}",
            f"--{flag}",
            dest=dest,
            nargs="?",
            const=True,
            default=False,
            type=_parse_bool,
            help=help_text,
        )
    parser.add_argument(
        f"-{ARG_DESC}",
        f"--{ARG_DESC}",
        dest="desc",
        default="",
        help="Description for the current migration",
    )
    return parser


def migration_option_from_args(argv: Sequence[str] | None = None) -> MigrationOption:
    """Parse migration options; ``-flag`` or ``-flag=false`` set the switches."""
    namespace = _build_parser().parse_args(argv)
    return MigrationOption(
        use_sorted_schema=namespace.use_sorted_schema,
        use_force_conversion=namespace.use_force_conversion,
        use_schema_validation=namespace.use_schema_validation,
        use_transaction=namespace.use_transaction,
        desc=namespace.desc,
    )


def min_time() -> datetime:
    """The earliest time used when no migration has run yet: the Unix epoch."""
    return datetime(1970, 1, 1, tzinfo=timezone.utc)