"""
Configuration loader and validator.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, fields


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)


@dataclass
class PipelineConfig:
    """Stream processing parameters."""
    workers: int = 1
    executor: str = "thread"  # thread | process


@dataclass
class TileConfig:
    """Tile feature parameters."""
    include_id: bool = True
    geometry: str = "polygon"  # polygon | centroid


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None


@dataclass
class Config:
    """
    Top-level configuration object.

    Loaded from YAML; every section and key is optional and falls back to the
    dataclass defaults.
    """
    project: Dict[str, Any] = field(default_factory=dict)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    tile: TileConfig = field(default_factory=TileConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> "Config":
        """Configuration with built-in defaults only."""
        return cls()

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML config file

        Returns:
            Config object
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            project=data.get('project') or {},
            pipeline=_section(PipelineConfig, data.get('pipeline')),
            tile=_section(TileConfig, data.get('tile')),
            logging=_section(LoggingConfig, data.get('logging')),
        )

    def validate(self) -> None:
        """
        Validate configuration constraints.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.pipeline.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.pipeline.workers}")

        if self.pipeline.executor not in ['thread', 'process']:
            raise ValueError(f"Invalid executor: {self.pipeline.executor}")

        if self.tile.geometry not in ['polygon', 'centroid']:
            raise ValueError(f"Invalid tile geometry: {self.tile.geometry}")

        if self.logging.level.upper() not in ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']:
            raise ValueError(f"Invalid log level: {self.logging.level}")


def _section(section_cls, data: Optional[Dict[str, Any]]):
    """Build a config section, rejecting unknown keys."""
    data = data or {}
    known = {f.name for f in fields(section_cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown {section_cls.__name__} keys: {sorted(unknown)}")
    return section_cls(**data)


def load_config(yaml_path: Optional[str] = None) -> Config:
    """
    Load and validate configuration.

    Args:
        yaml_path: Path to YAML config file (None for built-in defaults)

    Returns:
        Validated Config object
    """
    config = Config.default() if yaml_path is None else Config.from_yaml(yaml_path)
    config.validate()
    return config
