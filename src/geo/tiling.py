"""
Quadkey decoding: quadkey -> tile bounding box.

All tile-pyramid math lives behind BaseTileDecoder so that assembly code can
be exercised with a stub decoder.
"""

from abc import ABC, abstractmethod

import mercantile

from common.errors import InvalidQuadkey
from common.types import BoundingBox, Quadkey

QUADKEY_DIGITS = frozenset("0123")


def normalize_quadkey(quadkey: str) -> Quadkey:
    """
    Trim and check a quadkey.

    Args:
        quadkey: Raw quadkey (may carry a trailing newline)

    Returns:
        Trimmed quadkey

    Raises:
        InvalidQuadkey: If empty or not made of digits 0-3
    """
    quadkey = quadkey.strip()
    if not quadkey:
        raise InvalidQuadkey(quadkey, "empty")
    if not set(quadkey) <= QUADKEY_DIGITS:
        raise InvalidQuadkey(quadkey)
    return quadkey


class BaseTileDecoder(ABC):
    """
    Abstract base class for quadkey -> bounding box decoders.

    Implementations:
    - MercantileDecoder: Web Mercator tile pyramid via mercantile
    """

    @abstractmethod
    def decode(self, quadkey: Quadkey) -> BoundingBox:
        """
        Decode a quadkey into its bounding box.

        Raises:
            InvalidQuadkey: If the quadkey is malformed
        """
        pass


class MercantileDecoder(BaseTileDecoder):
    """Decode quadkeys on the spherical Web Mercator tile pyramid."""

    def decode(self, quadkey: Quadkey) -> BoundingBox:
        quadkey = normalize_quadkey(quadkey)
        try:
            tile = mercantile.quadkey_to_tile(quadkey)
        except mercantile.QuadKeyError as e:
            raise InvalidQuadkey(quadkey, str(e)) from e

        west, south, east, north = mercantile.bounds(tile)
        return BoundingBox(west=west, south=south, east=east, north=north)

    def __repr__(self) -> str:
        return "MercantileDecoder()"
