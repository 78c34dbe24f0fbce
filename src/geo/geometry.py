"""
Geometry utilities: tile geometries, tile Features.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from common.types import BoundingBox
from geo.collection import dump_json, parse_fragment
from geo.tiling import BaseTileDecoder, normalize_quadkey


class BaseGeometrySerializer(ABC):
    """
    Abstract base class for box -> GeoJSON geometry serializers.

    Implementations:
    - PolygonSerializer: Closed box polygon
    - PointSerializer: Box center point
    """

    @abstractmethod
    def serialize(self, box: BoundingBox) -> str:
        """Serialize a box as GeoJSON geometry text."""
        pass


class PolygonSerializer(BaseGeometrySerializer):
    """Serialize a box as a single-ring Polygon."""

    def serialize(self, box: BoundingBox) -> str:
        return dump_json({
            "type": "Polygon",
            "coordinates": [box.to_ring()],
        })


class PointSerializer(BaseGeometrySerializer):
    """Serialize a box as its center Point."""

    def serialize(self, box: BoundingBox) -> str:
        return dump_json({
            "type": "Point",
            "coordinates": box.center(),
        })


GEOMETRY_SERIALIZERS = {
    'polygon': PolygonSerializer,
    'centroid': PointSerializer,
}


def create_serializer(name: str) -> BaseGeometrySerializer:
    """
    Look up a geometry serializer by config name.

    Args:
        name: 'polygon' or 'centroid'

    Returns:
        Serializer instance
    """
    if name not in GEOMETRY_SERIALIZERS:
        raise ValueError(f"Unknown geometry serializer: {name}")
    return GEOMETRY_SERIALIZERS[name]()


def tile_feature(
    quadkey: str,
    decoder: BaseTileDecoder,
    serializer: BaseGeometrySerializer,
    properties: Optional[Dict[str, Any]] = None,
    include_id: bool = True,
) -> Dict[str, Any]:
    """
    Build the bounding-box Feature of a tile.

    Args:
        quadkey: Tile quadkey (surrounding whitespace is trimmed)
        decoder: Quadkey -> box decoder
        serializer: Box -> geometry serializer
        properties: Extra properties merged after "quadkey"
        include_id: Use the quadkey as the Feature id

    Returns:
        GeoJSON Feature dict

    Raises:
        InvalidQuadkey: If the decoder rejects the quadkey
    """
    quadkey = normalize_quadkey(quadkey)
    box = decoder.decode(quadkey)
    geometry = parse_fragment(serializer.serialize(box))

    feature: Dict[str, Any] = {"type": "Feature"}
    if include_id:
        feature["id"] = quadkey
    feature["geometry"] = geometry
    feature["properties"] = {"quadkey": quadkey, **(properties or {})}
    return feature


def build_tile_feature(
    quadkey: str,
    decoder: BaseTileDecoder,
    serializer: BaseGeometrySerializer,
    properties: Optional[Dict[str, Any]] = None,
    include_id: bool = True,
) -> str:
    """Serialized form of tile_feature(), one compact JSON line."""
    return dump_json(tile_feature(quadkey, decoder, serializer, properties, include_id))
