"""Tests for the config module."""

import json

import pytest

from dictmeta import config as cfg


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run config lookups from an empty directory with a fresh cache."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cfg, "_find_config", lambda: None)
    cfg.reset()
    yield tmp_path
    cfg.reset()


class TestConfig:
    """Tests for configuration loading."""

    def test_fallbacks(self, isolated_config):
        """Test fallback defaults when no config.json exists."""
        assert cfg.default_culture() == "en_US"
        assert cfg.property_encoding() == "utf-8"
        assert cfg.encoding_aliases() == {}

    def test_cached(self, isolated_config):
        """Test load() returns the cached config."""
        assert cfg.load() is cfg.load()

    def test_reads_file(self, isolated_config, monkeypatch):
        """Test values come from config.json."""
        path = isolated_config / "config.json"
        path.write_text(json.dumps({"defaults": {"default_culture": "pl_PL"}}))
        monkeypatch.setattr(cfg, "_find_config", lambda: path)

        assert cfg.default_culture() == "pl_PL"
        assert cfg.property_encoding() == "utf-8"

    def test_unreadable_file(self, isolated_config, monkeypatch):
        """Test a broken config.json falls back to defaults."""
        path = isolated_config / "config.json"
        path.write_text("{not json")
        monkeypatch.setattr(cfg, "_find_config", lambda: path)

        assert cfg.default_culture() == "en_US"
