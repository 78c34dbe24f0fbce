"""
FeatureCollection assembly from serialized fragments.
"""

import json
from typing import Any, Dict, Iterable, List

from common.errors import MalformedFragment


def dump_json(obj: Any) -> str:
    """
    Serialize a GeoJSON object to a single compact line.

    Key order follows dict insertion order, so documents built here always
    read "type" first.
    """
    return json.dumps(obj, separators=(',', ':'), ensure_ascii=False)


def parse_fragment(fragment: str) -> Any:
    """
    Parse one serialized fragment.

    Args:
        fragment: JSON text of a Feature (or trusted geometry)

    Returns:
        Parsed JSON value

    Raises:
        MalformedFragment: If the text is not valid JSON
    """
    try:
        return json.loads(fragment)
    except json.JSONDecodeError as e:
        raise MalformedFragment(fragment, e.msg) from e


def feature_collection(features: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Wrap features into a GeoJSON FeatureCollection dict.

    Args:
        features: Features in output order

    Returns:
        GeoJSON FeatureCollection dict
    """
    return {
        "type": "FeatureCollection",
        "features": list(features),
    }


def collect_fragments(fragments: Iterable[str]) -> str:
    """
    Merge serialized Feature fragments into one FeatureCollection document.

    Each fragment is trimmed; blank fragments are skipped. Order is kept.

    Args:
        fragments: Serialized fragments, e.g. lines of a file

    Returns:
        Serialized FeatureCollection

    Raises:
        MalformedFragment: If any fragment is not valid JSON
    """
    features: List[Any] = []
    for fragment in fragments:
        fragment = fragment.strip()
        if fragment:
            features.append(parse_fragment(fragment))
    return dump_json(feature_collection(features))
