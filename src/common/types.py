"""
Core data types for tile collection assembly.

Features and collections themselves are plain dicts (they are JSON documents);
the types here are the records that flow into them.
"""

from dataclasses import dataclass
from typing import List

from .errors import MalformedBagSyntax

# Type alias for a quad-tree tile identifier (base-4 digit string)
Quadkey = str


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned geographic bounding box of a tile.

    Attributes:
        west: Minimum longitude (degrees)
        south: Minimum latitude (degrees)
        east: Maximum longitude (degrees)
        north: Maximum latitude (degrees)
    """
    west: float
    south: float
    east: float
    north: float

    def __post_init__(self):
        """Validate bounds ordering."""
        assert self.west <= self.east, f"Invalid box: west {self.west} > east {self.east}"
        assert self.south <= self.north, f"Invalid box: south {self.south} > north {self.north}"

    def to_ring(self) -> List[List[float]]:
        """
        Convert box to a closed polygon ring.

        Returns:
            Ring coordinates (GeoJSON format: [lon, lat]), NW, NE, SE, SW, NW
        """
        return [
            [self.west, self.north],
            [self.east, self.north],
            [self.east, self.south],
            [self.west, self.south],
            [self.west, self.north],  # Close ring
        ]

    def center(self) -> List[float]:
        """Center point as [lon, lat]."""
        return [(self.west + self.east) / 2, (self.south + self.north) / 2]


@dataclass(frozen=True)
class TileRecord:
    """
    One line of dual-collection input: a quadkey and its bag of geometries.

    Attributes:
        quadkey: Containing tile
        raw_bag: Bag literal, e.g. '{({"type":"Point",...}),(...)}'
    """
    quadkey: Quadkey
    raw_bag: str

    @classmethod
    def from_line(cls, line: str) -> "TileRecord":
        """
        Split a 'quadkey<TAB>bag' line.

        Args:
            line: Input line (trailing newline allowed)

        Returns:
            TileRecord

        Raises:
            MalformedBagSyntax: If the line has no tab separator
        """
        quadkey, sep, raw_bag = line.rstrip("\r\n").partition("\t")
        if not sep:
            raise MalformedBagSyntax(f"Expected 'quadkey<TAB>bag', got: {line.strip()[:80]!r}")
        return cls(quadkey=quadkey.strip(), raw_bag=raw_bag.strip())
