"""Checks that collection definitions are consistent before a migration is built."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from mongr8.collection import Collection
from mongr8.fields import FieldSpec, FieldType
from mongr8.indexes import OPTION_PARTIAL_FILTER_EXP, OPTION_TTL, IndexSpec
from mongr8.options import MIGRATION_HISTORY_COLLECTION

MAX_FIELD_NAME_LENGTH = 128

_ALLOWED_ID_TYPES = frozenset(
    {FieldType.INT32, FieldType.INT64, FieldType.DOUBLE, FieldType.STRING}
)


class ValidationError(ValueError):
    """Raised when a collection definition is invalid."""


def validate_collections(collections: Iterable[Collection]) -> None:
    """Reject reserved and duplicated collection names."""
    seen: set[str] = set()
    for collection in collections:
        name = collection.metadata.name
        if name == MIGRATION_HISTORY_COLLECTION:
            raise ValidationError(
                f"Collection name cannot be {MIGRATION_HISTORY_COLLECTION}"
            )
        if name in seen:
            raise ValidationError(f"Duplicate collection found with name: {name}")
        seen.add(name)


def validate_id(collection_name: str, fields: Iterable[FieldSpec]) -> None:
    """An ``_id`` field must be an integer, a double or a string."""
    for spec in fields:
        if spec.name == "_id" and spec.type not in _ALLOWED_ID_TYPES:
            raise ValidationError(
                f"{collection_name}: ID field type invalid. "
                "Allowed types: integers, double, and string"
            )


def validate_field_duplication(collection_name: str, fields: Iterable[FieldSpec]) -> None:
    """Reject sibling fields sharing a name, at any depth."""

    def check(parent: str, specs: Iterable[FieldSpec]) -> None:
        seen: set[str] = set()
        for spec in specs:
            if spec.name in seen:
                raise ValidationError(
                    f"{collection_name}: duplicate field found: {parent}{spec.name}"
                )
            seen.add(spec.name)
            if spec.array_fields is not None:
                check(f"{spec.name}.", spec.array_fields)
            if spec.object is not None:
                check(f"{spec.name}.", spec.object)

    check("", fields)


def validate_individual_field(
    collection_name: str, path: str, field: FieldSpec, inside_array: bool
) -> None:
    """Check a field's name and the shape of its children, recursively."""
    if len(field.name) > MAX_FIELD_NAME_LENGTH:
        raise ValidationError(
            f"{collection_name}: Cannot have a field name more than 128 characters "
            f"len on field: {path}.{field.name}"
        )
    if not inside_array and field.name == "":
        raise ValidationError(
            f"{collection_name}: Field name must not be empty for path: {path}, "
            f"type: {field.type}"
        )

    if path:
        path += "."

    if field.type is FieldType.ARRAY:
        if field.array_fields is None:
            raise ValidationError(
                f"{collection_name}: ArrayFields must not be empty for path: {path}, "
                f"type: {field.type}"
            )
        if len(field.array_fields) != 1:
            raise ValidationError(
                f"{collection_name}: ArrayFields must have exactly 1 child for path: "
                f"{path}, type: {field.type}"
            )
        for child in field.array_fields:
            validate_individual_field(collection_name, path + field.name, child, True)
    elif field.type is FieldType.OBJECT:
        if field.object is None:
            raise ValidationError(
                f"{collection_name}: Object must not be empty for path: {path}, "
                f"type: {field.type}"
            )
        for child in field.object:
            validate_individual_field(collection_name, path + field.name, child, False)


def validate_fields(collection_name: str, fields: list[FieldSpec]) -> None:
    validate_field_duplication(collection_name, fields)
    for spec in fields:
        validate_individual_field(collection_name, "", spec, False)


def validate_index_duplication(collection_name: str, indexes: Iterable[IndexSpec]) -> None:
    seen: set[str] = set()
    for index in indexes:
        key = index.key()
        if key in seen:
            raise ValidationError(f"{collection_name}: duplicate index found: {key}")
        seen.add(key)


def _children(spec: FieldSpec) -> list[FieldSpec]:
    if spec.type is FieldType.ARRAY:
        return spec.array_fields or []
    if spec.type is FieldType.OBJECT:
        return spec.object or []
    return []


def _field_exists(path: list[str], spec: FieldSpec) -> bool:
    if path[0] != spec.name:
        return False
    if len(path) == 1:
        return True
    return any(_field_exists(path[1:], child) for child in _children(spec))


def _field_has_type(path: list[str], spec: FieldSpec, expected: FieldType) -> bool:
    if path[0] != spec.name:
        return False
    if len(path) > 1 and any(
        _field_has_type(path[1:], child, expected) for child in _children(spec)
    ):
        return True
    return spec.type == expected


def validate_index_with_fields(
    collection_name: str, fields: list[FieldSpec], index: IndexSpec
) -> None:
    """Check that an index refers to existing fields and that its options fit them."""
    if not index.fields:
        raise ValidationError(
            f"{collection_name}: Index Fields cannot be empty: {index.index_name()}"
        )

    def path_exists(path: list[str]) -> bool:
        return any(_field_exists(path, spec) for spec in fields)

    def path_has_type(path: list[str], expected: FieldType) -> bool:
        return any(_field_has_type(path, spec, expected) for spec in fields)

    for index_field in index.fields:
        if not path_exists(index_field.key.split(".")):
            raise ValidationError(
                f"{collection_name}: index key is invalid: {index_field.key}"
            )

    if index.rules is None:
        return

    if index.has_rule(OPTION_PARTIAL_FILTER_EXP):
        for key in index.rules[OPTION_PARTIAL_FILTER_EXP]:
            if not path_exists(key.split(".")):
                raise ValidationError(
                    f"{collection_name}: Partial filter key is invalid: {key}"
                )

    if index.has_rule(OPTION_TTL):
        if not any(
            path_has_type(index_field.key.split("."), FieldType.TIMESTAMP)
            for index_field in index.fields
        ):
            raise ValidationError(
                f"{collection_name}: Timestamp field must exist in TTL index: "
                f"{index.index_name()}"
            )


def validate_indexes(
    collection_name: str, fields: list[FieldSpec], indexes: list[IndexSpec]
) -> None:
    validate_index_duplication(collection_name, indexes)
    for index in indexes:
        validate_index_with_fields(collection_name, fields, index)


@dataclass
class Validation:
    """Runs every check over a set of collection definitions."""

    collections: list[Collection] = field(default_factory=list)

    def _checks(self) -> list[Callable[[], None]]:
        checks: list[Callable[[], None]] = [
            lambda: validate_collections(self.collections)
        ]
        for collection in self.collections:
            name = collection.metadata.name
            checks.append(lambda c=collection, n=name: validate_id(n, c.fields))
            checks.append(lambda c=collection, n=name: validate_fields(n, c.fields))
            checks.append(
                lambda c=collection, n=name: validate_indexes(n, c.fields, c.indexes)
            )
        return checks

    def validate(self) -> None:
        """Raise ValidationError at the first failing check."""
        for check in self._checks():
            check()