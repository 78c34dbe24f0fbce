"""
Geospatial module: quadkey decoding, tile geometry, bag parsing, collections.
"""

from .tiling import BaseTileDecoder, MercantileDecoder, normalize_quadkey
from .collection import dump_json, parse_fragment, feature_collection, collect_fragments
from .geometry import (
    BaseGeometrySerializer,
    PolygonSerializer,
    PointSerializer,
    create_serializer,
    tile_feature,
    build_tile_feature,
)
from .bags import parse_bag

__all__ = [
    'BaseTileDecoder',
    'MercantileDecoder',
    'normalize_quadkey',
    'dump_json',
    'parse_fragment',
    'feature_collection',
    'collect_fragments',
    'BaseGeometrySerializer',
    'PolygonSerializer',
    'PointSerializer',
    'create_serializer',
    'tile_feature',
    'build_tile_feature',
    'parse_bag',
]
