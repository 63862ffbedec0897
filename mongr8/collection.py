"""A collection definition: metadata, fields and indexes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from mongr8 import fields as f
from mongr8.fields import FieldSpec, FieldType
from mongr8.indexes import IndexSpec
from mongr8.metadata import Metadata


@dataclass
class Collection:
    """Everything that describes one MongoDB collection."""

    metadata: Metadata
    fields: list[FieldSpec] = field(default_factory=list)
    indexes: list[IndexSpec] = field(default_factory=list)


_CONSTRUCTORS: dict[FieldType, Callable[[str], FieldSpec]] = {
    FieldType.STRING: f.string_field,
    FieldType.INT32: f.int32_field,
    FieldType.INT64: f.int64_field,
    FieldType.DOUBLE: f.double_field,
    FieldType.BOOLEAN: f.boolean_field,
    FieldType.ARRAY: f.array_field,
    FieldType.OBJECT: f.object_field,
    FieldType.TIMESTAMP: f.timestamp_field,
    FieldType.GEOJSON_POINT: f.geojson_point_field,
    FieldType.GEOJSON_LINE_STRING: f.geojson_line_string_field,
    FieldType.GEOJSON_POLYGON_SINGLE_RING: f.geojson_polygon_single_ring_field,
    FieldType.GEOJSON_POLYGON_MULTIPLE_RING: f.geojson_polygon_multiple_ring_field,
    FieldType.GEOJSON_MULTI_POINT: f.geojson_multi_point_field,
    FieldType.GEOJSON_MULTI_LINE_STRING: f.geojson_multi_line_string_field,
    FieldType.GEOJSON_MULTI_POLYGON: f.geojson_multi_polygon_field,
    FieldType.GEOJSON_GEOMETRY_COLLECTION: f.geojson_geometry_collection_field,
}


def field_from_type(name: str, field_type: FieldType) -> FieldSpec:
    """Build a childless field of the given type."""
    try:
        constructor = _CONSTRUCTORS[FieldType(field_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported field type: {field_type}") from None
    return constructor(name)