"""
Command line entry point.

    tilecollect features   [INPUT]   Feature lines -> FeatureCollection
    tilecollect geometries [INPUT]   quadkey<TAB>bag lines -> Feature<TAB>collection lines
    tilecollect quadkeys   [INPUT]   quadkey lines -> FeatureCollection of tile boxes

INPUT defaults to stdin. Output goes to stdout, logs to stderr.
"""

import argparse
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO

from common.config import Config, load_config
from common.errors import TileCollectError
from common.logging import get_logger, setup_logging
from geo.geometry import GEOMETRY_SERIALIZERS, create_serializer
from geo.tiling import MercantileDecoder
from stages.features import run_features
from stages.geometries import run_geometries
from stages.quadkeys import run_quadkeys

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with one subcommand per stage."""
    parser = argparse.ArgumentParser(
        prog="tilecollect",
        description="Assemble GeoJSON FeatureCollections from quadkeys and geometry bags.",
    )
    parser.add_argument('--config', help="YAML config file (defaults built in)")
    parser.add_argument('--log-level', help="Override logging.level")

    commands = parser.add_subparsers(dest='command', required=True)

    features = commands.add_parser('features', help="wrap Feature lines in a FeatureCollection")
    features.add_argument('input', nargs='?', default='-', help="input file ('-' for stdin)")

    for name, help_text in [
        ('geometries', "pair each tile's box Feature with a collection of its bag"),
        ('quadkeys', "serialize quadkey boxes as one FeatureCollection"),
    ]:
        command = commands.add_parser(name, help=help_text)
        command.add_argument('input', nargs='?', default='-', help="input file ('-' for stdin)")
        command.add_argument('--workers', type=int, help="Override pipeline.workers")
        command.add_argument('--executor', choices=['thread', 'process'], help="Override pipeline.executor")
        command.add_argument('--geometry', choices=sorted(GEOMETRY_SERIALIZERS), help="Override tile.geometry")
        command.add_argument('--no-id', action='store_true', help="Omit the Feature id")

    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Fold command line flags into the loaded config."""
    if args.log_level:
        config.logging.level = args.log_level
    if getattr(args, 'workers', None) is not None:
        config.pipeline.workers = args.workers
    if getattr(args, 'executor', None):
        config.pipeline.executor = args.executor
    if getattr(args, 'geometry', None):
        config.tile.geometry = args.geometry
    if getattr(args, 'no_id', False):
        config.tile.include_id = False
    config.validate()
    return config


@contextmanager
def open_input(path: str) -> Iterator[TextIO]:
    """Yield the input stream; stdin is left open."""
    if path == '-':
        yield sys.stdin
    else:
        with open(path, 'r', encoding='utf-8') as f:
            yield f


def run(args: argparse.Namespace, config: Config, lines: TextIO, out: TextIO) -> None:
    """Dispatch the selected command over the input lines."""
    if args.command == 'features':
        run_features(lines, out)
        return

    options = dict(
        decoder=MercantileDecoder(),
        serializer=create_serializer(config.tile.geometry),
        include_id=config.tile.include_id,
        workers=config.pipeline.workers,
        executor=config.pipeline.executor,
    )
    if args.command == 'geometries':
        run_geometries(lines, out, **options)
    else:
        run_quadkeys(lines, out, **options)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run a command, and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    setup_logging(config.logging)

    try:
        with open_input(args.input) as lines:
            run(args, config, lines, sys.stdout)
    except TileCollectError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Unable to read '{args.input}': {e}")
        return 1

    sys.stdout.flush()
    return 0
