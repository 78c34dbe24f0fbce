"""Tests for configuration loading."""

from pathlib import Path

import pytest

from common.config import Config, load_config

DEFAULT_YAML = Path(__file__).parent.parent / "config" / "default.yaml"


class TestConfig:

    def test_defaults(self):
        config = load_config()

        assert config.pipeline.workers == 1
        assert config.pipeline.executor == "thread"
        assert config.tile.include_id is True
        assert config.tile.geometry == "polygon"
        assert config.logging.level == "INFO"
        assert config.logging.log_file is None

    def test_shipped_default_yaml_matches_builtin(self):
        config = load_config(str(DEFAULT_YAML))

        assert config.pipeline == Config.default().pipeline
        assert config.tile == Config.default().tile
        assert config.project["name"] == "tilecollect"

    def test_from_yaml(self, sample_config_yaml):
        config = load_config(sample_config_yaml)

        assert config.project == {"name": "test"}
        assert config.pipeline.workers == 4
        assert config.pipeline.executor == "process"
        assert config.tile.include_id is False
        assert config.tile.geometry == "polygon"
        assert config.logging.level == "DEBUG"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == Config.default()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("pipeline:\n  threads: 3\n")
        with pytest.raises(ValueError, match="threads"):
            load_config(str(path))

    @pytest.mark.parametrize("section, key, value", [
        ("pipeline", "workers", 0),
        ("pipeline", "executor", "cluster"),
        ("tile", "geometry", "hexagon"),
        ("logging", "level", "LOUD"),
    ])
    def test_validate(self, section, key, value):
        config = Config.default()
        setattr(getattr(config, section), key, value)
        with pytest.raises(ValueError):
            config.validate()
