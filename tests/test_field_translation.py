from datetime import datetime

import pytest

from mongr8 import fields as f
from mongr8.field_translation import TranslatedField, translate_field
from mongr8.fields import FieldExtra
from mongr8.values import DataType, array, boolean, float64, int32, int64, string


@pytest.mark.parametrize(
    "spec, expected",
    [
        (f.string_field("name"), string("")),
        (f.int32_field("name"), int32(0)),
        (f.int64_field("name"), int64(0)),
        (f.double_field("name"), float64(0.0)),
        (f.boolean_field("name"), boolean(False)),
    ],
)
def test_scalar_fields(spec, expected):
    assert translate_field(spec).object() == {"name": expected}


def test_translate_field_returns_wrapper():
    spec = f.string_field("x")
    translated = translate_field(spec)
    assert isinstance(translated, TranslatedField)
    assert translated.field is spec


def test_array_of_scalar():
    spec = f.array_field("scores", f.int32_field(""))
    assert translate_field(spec).object() == {"scores": [int32(0)]}


def test_array_of_object():
    spec = f.array_field("items", f.object_field("", f.string_field("name"), f.int32_field("score")))
    assert translate_field(spec).object() == {
        "items": [{"name": string(""), "score": int32(0)}]
    }


def test_array_drop_checkpoint_stops_descent():
    spec = f.array_field("scores", f.int32_field("")).set_extra(FieldExtra.DROP, True)
    assert translate_field(spec).object() == {"scores": []}


def test_drop_false_keeps_children():
    spec = f.object_field("obj", f.string_field("a")).set_extra(FieldExtra.DROP, False)
    assert translate_field(spec).object() == {"obj": {"a": string("")}}


def test_drop_must_be_boolean():
    spec = f.array_field("scores", f.int32_field("")).set_extra(FieldExtra.DROP, "yes")
    with pytest.raises(TypeError, match="ExtraDrop must be a boolean"):
        translate_field(spec).object()


def test_object_nested():
    spec = f.object_field("outer", f.object_field("inner", f.boolean_field("flag")))
    assert translate_field(spec).object() == {"outer": {"inner": {"flag": boolean(False)}}}


def test_object_drop_checkpoint():
    spec = f.object_field("outer", f.string_field("a")).set_extra(FieldExtra.DROP, True)
    assert translate_field(spec).object() == {"outer": {}}


def test_timestamp_uses_current_time():
    before = datetime.now()
    result = translate_field(f.timestamp_field("at")).object()["at"]
    after = datetime.now()
    assert result.type is DataType.TIME
    assert before <= result.value <= after


def test_geojson_point():
    result = translate_field(f.geojson_point_field("loc")).object()
    assert result == {"loc": {"type": "Point", "coordinates": array(float64(0.0))}}


def test_geojson_line_string_and_polygon():
    line = translate_field(f.geojson_line_string_field("l")).object()["l"]
    assert line == {"type": "LineString", "coordinates": array(array(float64(0.0)))}
    poly = translate_field(f.geojson_polygon_single_ring_field("p")).object()["p"]
    assert poly["type"] == "Polygon"
    assert poly["coordinates"] == array(array(array(float64(0.0))))


def test_geojson_multiple_ring_polygon():
    result = translate_field(f.geojson_polygon_multiple_ring_field("p")).object()["p"]
    zero = float64(0.0)
    assert result == {
        "type": "Polygon",
        "coordinates": array(array(array(zero)), array(array(zero))),
    }


def test_geojson_multi_types():
    zero = float64(0.0)
    point = translate_field(f.geojson_multi_point_field("m")).object()["m"]
    assert point == {"type": "MultiPoint", "coordinates": array(array(zero, zero))}
    lines = translate_field(f.geojson_multi_line_string_field("m")).object()["m"]
    assert lines["coordinates"] == array(array(array(zero, zero)))
    polygons = translate_field(f.geojson_multi_polygon_field("m")).object()["m"]
    assert polygons["type"] == "MultiPolygon"
    assert polygons["coordinates"] == array(
        array(array(array(zero, zero))),
        array(array(array(zero, zero))),
    )


def test_geometry_collection():
    spec = f.geojson_geometry_collection_field("geo")
    spec.array_fields = [f.geojson_point_field("pt")]
    result = translate_field(spec).object()
    assert result == {
        "geo": {
            "type": "GeometryCollection",
            "geometries": [
                [],
                {"pt": {"type": "Point", "coordinates": array(float64(0.0))}},
            ],
        }
    }


def test_array_forms():
    assert translate_field(f.geojson_point_field("p")).array() == []
    assert translate_field(f.string_field("s")).array() == array()
    assert translate_field(f.object_field("o")).array() == [[]]


def test_legacy_coordinate_types_are_rejected():
    with pytest.raises(ValueError, match="Unsupported field type"):
        translate_field(f.legacy_coordinate_array_field("c"))
    with pytest.raises(ValueError):
        translate_field(f.legacy_coordinate_embedded_doc_field("c"))


def test_translation_does_not_modify_field():
    spec = f.object_field("o", f.string_field("a"))
    translate_field(spec).object()
    assert spec.object == [f.string_field("a")]