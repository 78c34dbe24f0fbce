"""Tests for tile geometries and tile Features."""

import json

import pytest

from common.errors import InvalidQuadkey, MalformedFragment
from common.types import BoundingBox
from geo.geometry import (
    PointSerializer,
    PolygonSerializer,
    build_tile_feature,
    create_serializer,
    tile_feature,
)


class TestSerializers:

    def test_polygon(self):
        box = BoundingBox(west=0.0, south=0.0, east=1.0, north=2.0)
        geometry = json.loads(PolygonSerializer().serialize(box))

        assert geometry["type"] == "Polygon"
        assert geometry["coordinates"] == [box.to_ring()]

    def test_point(self):
        box = BoundingBox(west=0.0, south=0.0, east=1.0, north=2.0)
        geometry = json.loads(PointSerializer().serialize(box))

        assert geometry == {"type": "Point", "coordinates": [0.5, 1.0]}

    def test_create_serializer(self):
        assert isinstance(create_serializer('polygon'), PolygonSerializer)
        assert isinstance(create_serializer('centroid'), PointSerializer)
        with pytest.raises(ValueError):
            create_serializer('hexagon')


class TestTileFeature:

    def test_feature_shape(self, stub_decoder, stub_serializer):
        feature = json.loads(build_tile_feature("0231", stub_decoder, stub_serializer))

        assert list(feature) == ["type", "id", "geometry", "properties"]
        assert feature["type"] == "Feature"
        assert feature["id"] == "0231"
        assert feature["properties"] == {"quadkey": "0231"}
        assert feature["geometry"] == {"type": "Point", "coordinates": [4.0, 4.0]}

    def test_quadkey_trimmed_before_decoding(self, stub_decoder, stub_serializer):
        feature = json.loads(build_tile_feature(" 0231\n", stub_decoder, stub_serializer))

        assert stub_decoder.calls == ["0231"]
        assert feature["properties"]["quadkey"] == "0231"

    def test_without_id(self, stub_decoder, stub_serializer):
        feature = tile_feature("01", stub_decoder, stub_serializer, include_id=False)
        assert "id" not in feature

    def test_extra_properties(self, stub_decoder, stub_serializer):
        feature = tile_feature("01", stub_decoder, stub_serializer, properties={"count": 7})
        assert feature["properties"] == {"quadkey": "01", "count": 7}

    def test_byte_identical(self, mercantile_decoder, polygon_serializer):
        first = build_tile_feature("0231", mercantile_decoder, polygon_serializer)
        second = build_tile_feature("0231", mercantile_decoder, polygon_serializer)

        assert first == second
        assert "\n" not in first

    def test_real_tile_polygon(self, mercantile_decoder, polygon_serializer):
        feature = tile_feature("0", mercantile_decoder, polygon_serializer)
        ring = feature["geometry"]["coordinates"][0]

        assert len(ring) == 5
        assert ring[0] == ring[-1]
        assert ring[0][0] == pytest.approx(-180.0)

    def test_empty_quadkey(self, stub_decoder, stub_serializer):
        with pytest.raises(InvalidQuadkey):
            build_tile_feature("\n", stub_decoder, stub_serializer)
        assert stub_decoder.calls == []

    def test_decoder_rejection_propagates(self, rejecting_decoder, stub_serializer):
        with pytest.raises(InvalidQuadkey, match="rejected by stub"):
            build_tile_feature("3333", rejecting_decoder, stub_serializer)

    def test_serializer_output_must_be_json(self, stub_decoder, broken_serializer):
        with pytest.raises(MalformedFragment):
            build_tile_feature("0231", stub_decoder, broken_serializer)
