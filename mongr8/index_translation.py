"""Translating index definitions into key documents and option documents."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mongr8.indexes import IndexSpec, IndexType
from mongr8.values import string, to_value_type


def _require_fields(index: IndexSpec, minimum: int) -> None:
    if len(index.fields) < minimum:
        raise ValueError(
            "Provided field array must at least have "
            f"{minimum} length in the index definition"
        )


def _fields_object(index: IndexSpec) -> dict[str, Any]:
    return {
        index_field.key: to_value_type(index_field.value)
        for index_field in index.fields
    }


def _keyed(minimum: int) -> Callable[[IndexSpec], dict[str, Any]]:
    def build(index: IndexSpec) -> dict[str, Any]:
        _require_fields(index, minimum)
        return _fields_object(index)

    return build


def _fixed_kind(kind: str) -> Callable[[IndexSpec], dict[str, Any]]:
    def build(index: IndexSpec) -> dict[str, Any]:
        _require_fields(index, 1)
        return {index.fields[0].key: string(kind)}

    return build


_BUILDERS: dict[IndexType, Callable[[IndexSpec], dict[str, Any]]] = {
    IndexType.SINGLE_FIELD: _keyed(1),
    IndexType.COMPOUND: _keyed(2),
    IndexType.TEXT: _fixed_kind("text"),
    IndexType.GEOSPATIAL_2DSPHERE: _fixed_kind("2dsphere"),
    IndexType.HASHED: _fixed_kind("hashed"),
    IndexType.RAW: _keyed(1),
}


@dataclass
class TranslatedIndex:
    """An index together with its rendering as key and option documents."""

    index: IndexSpec

    def object(self) -> dict[str, Any]:
        """The index keys mapped to typed placeholder values."""
        return _BUILDERS[self.index.type](self.index)

    def rules(self) -> dict[str, Any] | None:
        """The index options as typed placeholder values, or None if unset."""
        if self.index.rules is None:
            return None
        return to_value_type(self.index.rules)


def translate_index(index: IndexSpec) -> TranslatedIndex:
    """Wrap an index for translation; unsupported types raise ValueError."""
    if index.type not in _BUILDERS:
        raise ValueError(f"Unsupported index type for translation: {index.type}")
    return TranslatedIndex(index)