"""Pytest configuration and shared fixtures."""

import json

import pytest
from loguru import logger

from common.errors import InvalidQuadkey
from common.types import BoundingBox
from geo.geometry import BaseGeometrySerializer, PolygonSerializer
from geo.tiling import BaseTileDecoder, MercantileDecoder


class StubDecoder(BaseTileDecoder):
    """Deterministic decoder: box width grows with quadkey length."""

    def __init__(self, rejected=()):
        self.rejected = set(rejected)
        self.calls = []

    def decode(self, quadkey):
        self.calls.append(quadkey)
        if quadkey in self.rejected:
            raise InvalidQuadkey(quadkey, "rejected by stub")
        size = float(len(quadkey))
        return BoundingBox(west=0.0, south=0.0, east=size, north=size)


class StubSerializer(BaseGeometrySerializer):
    """Serialize a box as a Point at its north-east corner."""

    def serialize(self, box):
        return json.dumps({"type": "Point", "coordinates": [box.east, box.north]})


class BrokenSerializer(BaseGeometrySerializer):
    def serialize(self, box):
        return "POINT (0 0)"


@pytest.fixture(autouse=True)
def quiet_logging():
    """Drop loguru sinks so tests don't write to stderr."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def stub_decoder():
    return StubDecoder()


@pytest.fixture
def rejecting_decoder():
    """Stub decoder that rejects quadkey 3333."""
    return StubDecoder(rejected={"3333"})


@pytest.fixture
def stub_serializer():
    return StubSerializer()


@pytest.fixture
def broken_serializer():
    return BrokenSerializer()


@pytest.fixture
def mercantile_decoder():
    return MercantileDecoder()


@pytest.fixture
def polygon_serializer():
    return PolygonSerializer()


@pytest.fixture
def sample_features():
    """Three serialized point Features."""
    return [
        json.dumps({
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [i, i]},
            "properties": {"name": f"point-{i}"},
        })
        for i in range(3)
    ]


@pytest.fixture
def sample_config_yaml(tmp_path):
    """Write a YAML config file and return its path."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "project:\n"
        "  name: test\n"
        "pipeline:\n"
        "  workers: 4\n"
        "  executor: process\n"
        "tile:\n"
        "  include_id: false\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    return str(path)
