"""
Serialize the bounding boxes of a batch of quadkeys as one FeatureCollection.
"""

from functools import partial
from typing import Iterable, TextIO

from common.logging import get_logger
from geo.collection import dump_json, feature_collection
from geo.geometry import BaseGeometrySerializer, tile_feature
from geo.tiling import BaseTileDecoder
from stages.runner import map_records, non_blank

logger = get_logger(__name__)


def serialize_batch(
    quadkeys: Iterable[str],
    decoder: BaseTileDecoder,
    serializer: BaseGeometrySerializer,
    include_id: bool = True,
    workers: int = 1,
    executor: str = 'thread',
) -> str:
    """
    Build one FeatureCollection holding a tile Feature per quadkey.

    The whole batch is buffered; a bad quadkey aborts it before anything is
    returned.

    Args:
        quadkeys: Quadkeys, one per item (whitespace trimmed, blanks skipped)
        decoder: Quadkey -> box decoder
        serializer: Box -> geometry serializer
        include_id: Use the quadkey as the Feature id
        workers: Pool size for the per-quadkey mapping
        executor: 'thread' or 'process'

    Returns:
        Serialized FeatureCollection
    """
    build = partial(
        tile_feature,
        decoder=decoder,
        serializer=serializer,
        include_id=include_id,
    )
    features = list(map_records(build, non_blank(quadkeys), workers, executor))
    logger.debug(f"Built {len(features)} tile features")
    return dump_json(feature_collection(features))


def run_quadkeys(
    lines: Iterable[str],
    out: TextIO,
    decoder: BaseTileDecoder,
    serializer: BaseGeometrySerializer,
    include_id: bool = True,
    workers: int = 1,
    executor: str = 'thread',
) -> None:
    """Read quadkeys from lines and write one FeatureCollection document."""
    document = serialize_batch(lines, decoder, serializer, include_id, workers, executor)
    out.write(document + "\n")
    logger.info("Wrote quadkey collection")
