import pytest

from mongr8.fields import (
    FieldExtra,
    FieldSpec,
    FieldType,
    LegacyCoordinateSpec,
    array_field,
    boolean_field,
    double_field,
    geojson_geometry_collection_field,
    geojson_line_string_field,
    geojson_multi_line_string_field,
    geojson_multi_point_field,
    geojson_multi_polygon_field,
    geojson_point_field,
    geojson_polygon_multiple_ring_field,
    geojson_polygon_single_ring_field,
    int32_field,
    int64_field,
    legacy_coordinate_array_field,
    legacy_coordinate_embedded_doc_field,
    object_field,
    string_field,
    timestamp_field,
)


@pytest.mark.parametrize(
    "factory, field_type",
    [
        (string_field, FieldType.STRING),
        (int32_field, FieldType.INT32),
        (int64_field, FieldType.INT64),
        (double_field, FieldType.DOUBLE),
        (boolean_field, FieldType.BOOLEAN),
        (timestamp_field, FieldType.TIMESTAMP),
        (geojson_point_field, FieldType.GEOJSON_POINT),
        (geojson_line_string_field, FieldType.GEOJSON_LINE_STRING),
        (geojson_polygon_single_ring_field, FieldType.GEOJSON_POLYGON_SINGLE_RING),
        (geojson_polygon_multiple_ring_field, FieldType.GEOJSON_POLYGON_MULTIPLE_RING),
        (geojson_multi_point_field, FieldType.GEOJSON_MULTI_POINT),
        (geojson_multi_line_string_field, FieldType.GEOJSON_MULTI_LINE_STRING),
        (geojson_multi_polygon_field, FieldType.GEOJSON_MULTI_POLYGON),
        (geojson_geometry_collection_field, FieldType.GEOJSON_GEOMETRY_COLLECTION),
        (legacy_coordinate_array_field, FieldType.LEGACY_COORDINATE_ARRAY),
    ],
)
def test_plain_fields(factory, field_type):
    result = factory("name")
    assert result == FieldSpec("name", field_type)
    assert result.nullable is False
    assert result.array_fields is None
    assert result.object is None


def test_field_type_values():
    assert FieldType.STRING.value == "TypeString"
    assert FieldType("TypeGeoJSONMultiPolygon") is FieldType.GEOJSON_MULTI_POLYGON
    assert str(FieldType.INT64) == "TypeInt64"


def test_array_of_plain():
    actual = array_field("name", int32_field("name"))
    expected = FieldSpec(
        "name", FieldType.ARRAY, array_fields=[FieldSpec("name", FieldType.INT32)]
    )
    assert actual == expected


def test_array_of_array():
    actual = array_field("name", array_field("child_name", string_field("child_child_name")))
    expected = FieldSpec(
        "name",
        FieldType.ARRAY,
        array_fields=[
            FieldSpec(
                "child_name",
                FieldType.ARRAY,
                array_fields=[FieldSpec("child_child_name", FieldType.STRING)],
            )
        ],
    )
    assert actual == expected


def test_array_of_object():
    actual = array_field("name", object_field("", string_field("name"), int32_field("score")))
    expected = FieldSpec(
        "name",
        FieldType.ARRAY,
        array_fields=[
            FieldSpec(
                "",
                FieldType.OBJECT,
                object=[
                    FieldSpec("name", FieldType.STRING),
                    FieldSpec("score", FieldType.INT32),
                ],
            )
        ],
    )
    assert actual == expected


def test_array_without_items_has_empty_list():
    assert array_field("tags").array_fields == []


def test_array_with_two_items_raises():
    with pytest.raises(ValueError, match="needs 1 field"):
        array_field("name", string_field("a"), string_field("b"))


def test_object_field():
    actual = object_field("name", string_field("name"), int32_field("score"))
    expected = FieldSpec(
        "name",
        FieldType.OBJECT,
        object=[FieldSpec("name", FieldType.STRING), FieldSpec("score", FieldType.INT32)],
    )
    assert actual == expected


def test_object_of_array():
    actual = object_field("name", array_field("child_name", string_field("child_child_name")))
    expected = FieldSpec(
        "name",
        FieldType.OBJECT,
        object=[
            FieldSpec(
                "child_name",
                FieldType.ARRAY,
                array_fields=[FieldSpec("child_child_name", FieldType.STRING)],
            )
        ],
    )
    assert actual == expected


def test_object_of_object():
    actual = object_field(
        "name", object_field("child_name", string_field("name"), int32_field("score"))
    )
    expected = FieldSpec(
        "name",
        FieldType.OBJECT,
        object=[
            FieldSpec(
                "child_name",
                FieldType.OBJECT,
                object=[
                    FieldSpec("name", FieldType.STRING),
                    FieldSpec("score", FieldType.INT32),
                ],
            )
        ],
    )
    assert actual == expected


def test_children_are_copied():
    child = string_field("child")
    parent = object_field("parent", child)
    child.set_nullable()
    assert parent.object[0].nullable is False


def test_object_has_key():
    obj = object_field("obj", string_field("a"))
    assert obj.object_has_key("a") is True
    assert obj.object_has_key("b") is False
    assert string_field("s").object_has_key("a") is False


def test_set_nullable_and_extra():
    spec = string_field("name").set_nullable().set_extra(FieldExtra.DROP, True)
    assert spec.nullable is True
    assert spec.extra == {FieldExtra.DROP: True}


@pytest.mark.parametrize(
    "field_type, numeric",
    [
        (FieldType.INT32, True),
        (FieldType.INT64, True),
        (FieldType.DOUBLE, True),
        (FieldType.STRING, False),
        (FieldType.TIMESTAMP, False),
    ],
)
def test_is_numeric(field_type, numeric):
    assert field_type.is_numeric() is numeric


def test_legacy_coordinate_embedded_doc():
    doc = legacy_coordinate_embedded_doc_field("loc").set_coordinate_x("lng").set_coordinate_y("lat")
    assert isinstance(doc, LegacyCoordinateSpec)
    assert doc.type is FieldType.LEGACY_COORDINATE_EMBEDDED_DOC
    assert doc.object == [FieldSpec("lng", FieldType.DOUBLE), FieldSpec("lat", FieldType.DOUBLE)]


def test_legacy_coordinate_x_twice_raises():
    doc = legacy_coordinate_embedded_doc_field("loc").set_coordinate_x("lng")
    with pytest.raises(ValueError, match="x field is already set"):
        doc.set_coordinate_x("other")


def test_legacy_coordinate_y_twice_raises():
    doc = legacy_coordinate_embedded_doc_field("loc").set_coordinate_y("lat")
    with pytest.raises(ValueError, match="y field is already set"):
        doc.set_coordinate_y("other")


def test_legacy_coordinate_duplicate_key_raises():
    doc = legacy_coordinate_embedded_doc_field("loc").set_coordinate_x("v")
    with pytest.raises(ValueError, match="Key v already exists in loc object"):
        doc.set_coordinate_y("v")