"""Translating field definitions into sample documents of typed placeholder values."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from mongr8.fields import FieldExtra, FieldSpec, FieldType
from mongr8.values import (
    array,
    boolean,
    float64,
    int32,
    int64,
    string,
    time_value,
)


def _is_drop_checkpoint(spec: FieldSpec) -> bool:
    if not spec.extra or FieldExtra.DROP not in spec.extra:
        return False
    drop = spec.extra[FieldExtra.DROP]
    if not isinstance(drop, bool):
        raise TypeError("ExtraDrop must be a boolean")
    return drop


def _array_object(spec: FieldSpec) -> dict[str, Any]:
    items: list[Any] = []
    if not _is_drop_checkpoint(spec):
        for child in spec.array_fields or ():
            items.append(translate_field(child).object()[child.name])
    return {spec.name: items}


def _object_object(spec: FieldSpec) -> dict[str, Any]:
    children: dict[str, Any] = {}
    if not _is_drop_checkpoint(spec):
        for child in spec.object or ():
            children[child.name] = translate_field(child).object()[child.name]
    return {spec.name: children}


def _geo(geo_type: str, coordinates: Callable[[], Any]) -> Callable[[FieldSpec], dict[str, Any]]:
    def build(spec: FieldSpec) -> dict[str, Any]:
        return {spec.name: {"type": geo_type, "coordinates": coordinates()}}

    return build


def _zero() -> Any:
    return float64(0.0)


def _geometry_collection_object(spec: FieldSpec) -> dict[str, Any]:
    geometries = array()
    geometries.extend(translate_field(child).object() for child in spec.array_fields or ())
    return {spec.name: {"type": "GeometryCollection", "geometries": geometries}}


_BUILDERS: dict[FieldType, Callable[[FieldSpec], dict[str, Any]]] = {
    FieldType.STRING: lambda spec: {spec.name: string("")},
    FieldType.INT32: lambda spec: {spec.name: int32(0)},
    FieldType.INT64: lambda spec: {spec.name: int64(0)},
    FieldType.DOUBLE: lambda spec: {spec.name: float64(0.0)},
    FieldType.BOOLEAN: lambda spec: {spec.name: boolean(False)},
    FieldType.ARRAY: _array_object,
    FieldType.OBJECT: _object_object,
    FieldType.TIMESTAMP: lambda spec: {spec.name: time_value(datetime.now())},
    FieldType.GEOJSON_POINT: _geo("Point", lambda: array(_zero())),
    FieldType.GEOJSON_LINE_STRING: _geo("LineString", lambda: array(array(_zero()))),
    FieldType.GEOJSON_POLYGON_SINGLE_RING: _geo(
        "Polygon", lambda: array(array(array(_zero())))
    ),
    FieldType.GEOJSON_POLYGON_MULTIPLE_RING: _geo(
        "Polygon", lambda: array(array(array(_zero())), array(array(_zero())))
    ),
    FieldType.GEOJSON_MULTI_POINT: _geo(
        "MultiPoint", lambda: array(array(_zero(), _zero()))
    ),
    FieldType.GEOJSON_MULTI_LINE_STRING: _geo(
        "MultiLineString", lambda: array(array(array(_zero(), _zero())))
    ),
    FieldType.GEOJSON_MULTI_POLYGON: _geo(
        "MultiPolygon",
        lambda: array(
            array(array(array(_zero(), _zero()))),
            array(array(array(_zero(), _zero()))),
        ),
    ),
    FieldType.GEOJSON_GEOMETRY_COLLECTION: _geometry_collection_object,
}


@dataclass
class TranslatedField:
    """A field together with its rendering as a sample document."""

    field: FieldSpec

    def object(self) -> dict[str, Any]:
        """The field as ``{name: placeholder}``, recursing into children."""
        return _BUILDERS[self.field.type](self.field)

    def array(self) -> list[Any]:
        """The field's array form; a point yields an empty list."""
        if self.field.type is FieldType.GEOJSON_POINT:
            return []
        return array()


def translate_field(field: FieldSpec) -> TranslatedField:
    """Wrap a field for translation; unsupported types raise ValueError."""
    if field.type not in _BUILDERS:
        raise ValueError(f"Unsupported field type for translation: {field.type}")
    return TranslatedField(field)