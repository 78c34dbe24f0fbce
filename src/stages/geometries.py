"""
Pair each tile's bounding-box Feature with a collection of its geometries.

Input lines:   quadkey<TAB>{(geometry),(geometry),...}
Output lines:  tile Feature<TAB>FeatureCollection of the bag
"""

from functools import partial
from typing import Iterable, TextIO, Tuple

from common.logging import get_logger
from common.types import TileRecord
from geo.bags import parse_bag
from geo.collection import collect_fragments
from geo.geometry import BaseGeometrySerializer, build_tile_feature
from geo.tiling import BaseTileDecoder
from stages.runner import map_records, non_blank

logger = get_logger(__name__)


def assemble_tile_pair(
    line: str,
    decoder: BaseTileDecoder,
    serializer: BaseGeometrySerializer,
    include_id: bool = True,
) -> Tuple[str, str]:
    """
    Build (tile Feature, child FeatureCollection) for one input line.

    Args:
        line: 'quadkey<TAB>bag' record
        decoder: Quadkey -> box decoder
        serializer: Box -> geometry serializer
        include_id: Use the quadkey as the tile Feature id

    Returns:
        Tuple of (serialized tile Feature, serialized FeatureCollection)

    Raises:
        MalformedBagSyntax: If the record or its bag does not parse
        MalformedFragment: If a bag fragment is not valid JSON
        InvalidQuadkey: If the quadkey is rejected
    """
    record = TileRecord.from_line(line)
    collection = collect_fragments(parse_bag(record.raw_bag))
    feature = build_tile_feature(record.quadkey, decoder, serializer, include_id=include_id)
    return feature, collection


def run_geometries(
    lines: Iterable[str],
    out: TextIO,
    decoder: BaseTileDecoder,
    serializer: BaseGeometrySerializer,
    include_id: bool = True,
    workers: int = 1,
    executor: str = 'thread',
) -> int:
    """
    Write one tab-separated pair per non-blank input line, in input order.

    Args:
        lines: Input lines
        out: Output stream
        decoder: Quadkey -> box decoder
        serializer: Box -> geometry serializer
        include_id: Use the quadkey as the tile Feature id
        workers: Pool size for per-line work
        executor: 'thread' or 'process'

    Returns:
        Number of lines written
    """
    assemble = partial(
        assemble_tile_pair,
        decoder=decoder,
        serializer=serializer,
        include_id=include_id,
    )

    count = 0
    for feature, collection in map_records(assemble, non_blank(lines), workers, executor):
        out.write(feature + "\t" + collection + "\n")
        count += 1

    logger.info(f"Assembled {count} tile pairs")
    return count
