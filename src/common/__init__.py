"""
Common utilities: types, errors, config, logging.
"""

from .types import Quadkey, BoundingBox, TileRecord
from .errors import TileCollectError, InvalidQuadkey, MalformedFragment, MalformedBagSyntax
from .config import Config, load_config
from .logging import setup_logging, get_logger

__all__ = [
    'Quadkey',
    'BoundingBox',
    'TileRecord',
    'TileCollectError',
    'InvalidQuadkey',
    'MalformedFragment',
    'MalformedBagSyntax',
    'Config',
    'load_config',
    'setup_logging',
    'get_logger',
]
