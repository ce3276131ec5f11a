"""Tests for configuration and logging setup."""

import logging

import pytest

from shenzhen_solitaire.config import Config, EmptyPilePolicy, LoggingConfig, load_config
from shenzhen_solitaire.utils.logger import setup_logging


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test default configuration."""
        config = load_config()

        assert config.rules.empty_pile_policy == EmptyPilePolicy.RANK_ONE
        assert config.deal.seed is None
        assert config.logging.level == "INFO"
        assert not config.move_log.enabled

    def test_missing_file(self, tmp_path):
        """Test a missing file falls back to defaults."""
        assert load_config(tmp_path / "nope.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test an empty file falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_overrides(self, tmp_path):
        """Test values read from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "rules:\n"
            "  empty_pile_policy: any_rank\n"
            "deal:\n"
            "  seed: 12\n"
            "move_log:\n"
            "  enabled: true\n"
            "  output_path: logs/game.jsonl\n"
        )
        config = load_config(str(path))

        assert config.rules.empty_pile_policy == EmptyPilePolicy.ANY_RANK
        assert config.deal.seed == 12
        assert config.move_log.enabled
        assert config.move_log.output_path == "logs/game.jsonl"
        assert config.logging.level == "INFO"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_unknown_level(self):
        """Test an unknown level name is refused."""
        with pytest.raises(ValueError):
            setup_logging("LOUD")

    def test_accepts_config(self, monkeypatch):
        """Test the level is taken from a LoggingConfig."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

        setup_logging(LoggingConfig(level="debug"))

        assert calls["level"] == logging.DEBUG
