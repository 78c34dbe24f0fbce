"""
Logging setup using Loguru.

Logs always go to stderr; stdout carries pipeline output.
"""

import sys
from pathlib import Path
from loguru import logger

from .config import LoggingConfig


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure Loguru logger.

    Args:
        config: Logging configuration
    """
    # Remove default handler
    logger.remove()
    logger.configure(extra={"name": "tilecollect"})

    # Add console handler
    logger.add(
        sys.stderr,
        format=config.format,
        level=config.level.upper(),
        colorize=sys.stderr.isatty(),
    )

    # Add file handler
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=config.format,
            level=config.level.upper(),
            rotation="100 MB",
            retention="7 days",
            compression="zip",
        )

    logger.debug(f"Logging initialized: level={config.level}, file={config.log_file}")


# Convenience function to get logger
def get_logger(name: str):
    """Get a logger with a specific name."""
    return logger.bind(name=name)
