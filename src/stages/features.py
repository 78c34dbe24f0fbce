"""
Wrap serialized Feature lines into a single FeatureCollection.
"""

from typing import Iterable, TextIO

from common.logging import get_logger
from geo.collection import collect_fragments
from stages.runner import non_blank

logger = get_logger(__name__)


def run_features(lines: Iterable[str], out: TextIO) -> None:
    """
    Read one Feature per line and write one FeatureCollection document.

    Nothing is written if any line fails to parse.

    Args:
        lines: Input lines (file or stdin)
        out: Output stream
    """
    lines = list(non_blank(lines))
    document = collect_fragments(lines)
    out.write(document + "\n")
    logger.info(f"Collected {len(lines)} features")
