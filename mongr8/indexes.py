"""Index definitions for a collection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class IndexType(str, Enum):
    """Kinds of index a collection may declare."""

    SINGLE_FIELD = "TypeSingleField"
    COMPOUND = "TypeCompound"
    TEXT = "TypeText"
    GEOSPATIAL_2DSPHERE = "TypeGeopatial2dsphere"
    HASHED = "TypeHashedIndex"
    RAW = "TypeRaw"

    def __str__(self) -> str:
        return self.value


OPTION_SPARSE = "sparse"
OPTION_BACKGROUND = "background"
OPTION_UNIQUE = "unique"
OPTION_HIDDEN = "hidden"
OPTION_PARTIAL_FILTER_EXP = "partialFilterExpression"
OPTION_TTL = "expireAfterSeconds"
OPTION_COLLATION = "collation"


def _format_value(value: Any) -> str:
    """Render a value in a stable, language-neutral textual form."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda item: str(item[0]))
        body = " ".join(f"{key}:{_format_value(val)}" for key, val in items)
        return f"map[{body}]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


@dataclass(frozen=True)
class IndexField:
    """A key of an index together with its value (direction, kind...)."""

    key: str
    value: Any = None

    def nested_field(self, name: str) -> IndexField:
        """Return a copy whose key has ``name`` appended as a nested path."""
        key = f"{self.key}.{name}" if self.key else name
        return replace(self, key=key)

    def must_have_value(self, purpose: str) -> None:
        if self.value is None:
            raise ValueError(f"{self.key}: Value should be provided for {purpose}")


@dataclass
class IndexSpec:
    """A single index: its type, keys, options and an optional custom name."""

    type: IndexType
    fields: list[IndexField]
    rules: dict[str, Any] | None = None
    name: str | None = None

    def key(self) -> str:
        """A string identifying the whole structure, used to spot duplicates."""
        parts = [str(self.type)]
        for index_field in self.fields:
            parts.append(index_field.key)
            parts.append(_format_value(index_field.value))
        if self.rules is not None:
            parts.append(_format_value(self.rules))
        return "".join(parts)

    def index_name(self) -> str:
        """The custom name if set, otherwise one derived from keys and rules."""
        if self.name is not None:
            return self.name

        parts = [
            f"{index_field.key}_{_format_value(index_field.value)}"
            for index_field in self.fields
        ]
        result = "_".join(parts)

        def walk(current: Any) -> str:
            text = ""
            if isinstance(current, dict):
                for key, val in current.items():
                    text += f"_{key}" + walk(val)
            elif isinstance(current, list):
                for val in current:
                    text += walk(val)
            else:
                text += f"_{_format_value(current)}"
            return text

        if self.rules is not None:
            result += walk(self.rules)
        return result

    def has_rule(self, option: str) -> bool:
        return self.rules is not None and option in self.rules

    def _must_not_raw(self) -> None:
        if self.type is IndexType.RAW:
            raise ValueError("Index type must not be raw")

    def _set_rule(self, option: str, value: Any) -> IndexSpec:
        self._must_not_raw()
        if self.rules is None:
            self.rules = {}
        self.rules[option] = value
        return self

    def as_sparse(self) -> IndexSpec:
        """Only index documents that have the indexed field."""
        return self._set_rule(OPTION_SPARSE, True)

    def as_background(self) -> IndexSpec:
        """Build the index in the background."""
        return self._set_rule(OPTION_BACKGROUND, True)

    def as_unique(self) -> IndexSpec:
        """Add a uniqueness constraint."""
        return self._set_rule(OPTION_UNIQUE, True)

    def as_hidden(self) -> IndexSpec:
        """Hide the index from the query planner."""
        return self._set_rule(OPTION_HIDDEN, True)

    def set_partial_expression(self, expression: dict[str, Any]) -> IndexSpec:
        return self._set_rule(OPTION_PARTIAL_FILTER_EXP, expression)

    def set_ttl(self, expire_after_seconds: int) -> IndexSpec:
        return self._set_rule(OPTION_TTL, expire_after_seconds)

    def set_collation(self, collation: dict[str, Any]) -> IndexSpec:
        return self._set_rule(OPTION_COLLATION, collation)

    def set_custom_name(self, name: str) -> IndexSpec:
        self.name = name
        return self


def _base_index(
    index_type: IndexType,
    fields: list[IndexField],
    rules: dict[str, Any] | None = None,
) -> IndexSpec:
    if not fields:
        raise ValueError("Index must have at least a field")
    return IndexSpec(index_type, list(fields), rules)


def field(name: str, *args: Any) -> IndexField:
    """An index key, optionally with its value."""
    if len(args) > 1:
        raise ValueError("Index field value at most declared once")
    return IndexField(name, args[0] if args else None)


def single_field_index(field: IndexField) -> IndexSpec:
    field.must_have_value("Single Field Index")
    return _base_index(IndexType.SINGLE_FIELD, [field])


def compound_index(*args: IndexField) -> IndexSpec:
    for index_field in args:
        index_field.must_have_value("Compound Index")
    return _base_index(IndexType.COMPOUND, list(args))


def text_index(field: IndexField) -> IndexSpec:
    return _base_index(IndexType.TEXT, [replace(field, value="text")])


def geospatial_2dsphere_index(field: IndexField) -> IndexSpec:
    return _base_index(IndexType.GEOSPATIAL_2DSPHERE, [field])


def hashed_index(field: IndexField) -> IndexSpec:
    return _base_index(IndexType.HASHED, [field])


def raw_index(fields: dict[str, Any], rules: dict[str, Any] | None) -> IndexSpec:
    """An index built from raw key/value pairs and raw options."""
    index_fields = [IndexField(key, value) for key, value in fields.items()]
    return _base_index(IndexType.RAW, index_fields, rules)