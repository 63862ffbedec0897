"""Field definitions that describe the shape of a collection's documents."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Kinds of field a collection schema can hold."""

    STRING = "TypeString"
    INT32 = "TypeInt32"
    INT64 = "TypeInt64"
    DOUBLE = "TypeDouble"
    BOOLEAN = "TypeBoolean"
    ARRAY = "TypeArray"
    OBJECT = "TypeObject"
    TIMESTAMP = "TypeTimestamp"
    GEOJSON_POINT = "TypeGeoJSONPoint"
    GEOJSON_LINE_STRING = "TypeGeoJSONLineString"
    GEOJSON_POLYGON_SINGLE_RING = "TypeGeoJSONPolygonSingleRing"
    GEOJSON_POLYGON_MULTIPLE_RING = "TypeGeoJSONPolygonMultipleRing"
    GEOJSON_MULTI_POINT = "TypeGeoJSONMultiPoint"
    GEOJSON_MULTI_LINE_STRING = "TypeGeoJSONMultiLineString"
    GEOJSON_MULTI_POLYGON = "TypeGeoJSONMultiPolygon"
    GEOJSON_GEOMETRY_COLLECTION = "TypeGeoJSONGeometryCollection"
    LEGACY_COORDINATE_ARRAY = "TypeLegacyCoordinateArray"
    LEGACY_COORDINATE_EMBEDDED_DOC = "TypeLegacyCoordinateEmbeddedDoc"

    def __str__(self) -> str:
        return self.value

    def is_numeric(self) -> bool:
        """Return True for the integer and double types."""
        return self in _NUMERIC_TYPES


_NUMERIC_TYPES = frozenset({FieldType.INT32, FieldType.INT64, FieldType.DOUBLE})


class FieldExtra(str, Enum):
    """Keys of the extra information a field may carry."""

    DROP = "drop"


@dataclass
class FieldSpec:
    """A single field, possibly holding array items or object children."""

    name: str
    type: FieldType
    array_fields: list[FieldSpec] | None = None
    object: list[FieldSpec] | None = None
    nullable: bool = False
    index: int = 0
    extra: dict[FieldExtra, Any] | None = None

    def _add_array_fields(self, *children: FieldSpec) -> FieldSpec:
        if self.array_fields is None:
            self.array_fields = []
        self.array_fields.extend(copy.copy(child) for child in children)
        return self

    def _add_object_fields(self, *children: FieldSpec) -> FieldSpec:
        if self.object is None:
            self.object = []
        self.object.extend(copy.copy(child) for child in children)
        return self

    def object_has_key(self, key: str) -> bool:
        """Return True if an object child with this name exists."""
        return any(child.name == key for child in self.object or ())

    def set_nullable(self) -> FieldSpec:
        self.nullable = True
        return self

    def set_extra(self, key: FieldExtra, value: Any) -> FieldSpec:
        if self.extra is None:
            self.extra = {}
        self.extra[key] = value
        return self


@dataclass
class LegacyCoordinateSpec(FieldSpec):
    """An embedded document holding a legacy x/y coordinate pair."""

    _x_is_set: bool = field(default=False, repr=False, compare=False)
    _y_is_set: bool = field(default=False, repr=False, compare=False)

    def _set_coordinate(self, name: str, is_x: bool) -> None:
        if (is_x and self._x_is_set) or (not is_x and self._y_is_set):
            axis = "x" if is_x else "y"
            raise ValueError(
                f"{axis} field is already set on Legacy Coordinate: {self.name}"
            )
        if self.object_has_key(name):
            raise ValueError(f"Key {name} already exists in {self.name} object")
        if is_x:
            self._x_is_set = True
        else:
            self._y_is_set = True
        self._add_object_fields(double_field(name))

    def set_coordinate_x(self, name: str) -> LegacyCoordinateSpec:
        self._set_coordinate(name, True)
        return self

    def set_coordinate_y(self, name: str) -> LegacyCoordinateSpec:
        self._set_coordinate(name, False)
        return self


def string_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.STRING)


def int32_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.INT32)


def int64_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.INT64)


def double_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.DOUBLE)


def boolean_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.BOOLEAN)


def array_field(name: str, *args: FieldSpec) -> FieldSpec:
    """An array field with at most one item type; no item keeps it a bare type."""
    if len(args) > 1:
        raise ValueError("ArrayField needs 1 field must be declared")
    return FieldSpec(name, FieldType.ARRAY)._add_array_fields(*args)


def object_field(name: str, *args: FieldSpec) -> FieldSpec:
    return FieldSpec(name, FieldType.OBJECT)._add_object_fields(*args)


def timestamp_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.TIMESTAMP)


def geojson_point_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.GEOJSON_POINT)


def geojson_line_string_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.GEOJSON_LINE_STRING)


def geojson_polygon_single_ring_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.GEOJSON_POLYGON_SINGLE_RING)


def geojson_polygon_multiple_ring_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.GEOJSON_POLYGON_MULTIPLE_RING)


def geojson_multi_point_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.GEOJSON_MULTI_POINT)


def geojson_multi_line_string_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.GEOJSON_MULTI_LINE_STRING)


def geojson_multi_polygon_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.GEOJSON_MULTI_POLYGON)


def geojson_geometry_collection_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.GEOJSON_GEOMETRY_COLLECTION)


def legacy_coordinate_array_field(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.LEGACY_COORDINATE_ARRAY)


def legacy_coordinate_embedded_doc_field(name: str) -> LegacyCoordinateSpec:
    return LegacyCoordinateSpec(name, FieldType.LEGACY_COORDINATE_EMBEDDED_DOC)