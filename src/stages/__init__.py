"""
Pipeline stages: stream transducers over the geo primitives.
"""

from .features import run_features
from .geometries import assemble_tile_pair, run_geometries
from .quadkeys import serialize_batch, run_quadkeys

__all__ = [
    'run_features',
    'assemble_tile_pair',
    'run_geometries',
    'serialize_batch',
    'run_quadkeys',
]
