"""Tests for extraction settings."""

import logging

import pytest

from cardforge.config import ExtractionConfig, load_config

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CARDFORGE_RULES_PATH", "CARDFORGE_RULES_TTL", "CARDFORGE_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults(self):
        config = load_config()

        assert config == ExtractionConfig()
        assert config.min_content_length == 10
        assert config.max_section_length == 500
        assert config.max_title_length == 200
        assert config.snippet_length == 500
        assert config.max_tags == 10
        assert config.rules_path is None
        assert config.rules_cache_ttl == 60.0
        assert config.max_workers == 4

    def test_yaml_file(self, write_file):
        path = write_file("cardforge.yaml", "max_section_length: 300\nrules_path: rules.yaml\n")
        config = load_config(path)

        assert config.max_section_length == 300
        assert config.rules_path == "rules.yaml"

    def test_empty_yaml_file(self, write_file):
        assert load_config(write_file("empty.yaml", "")) == ExtractionConfig()

    def test_env_overrides_file(self, write_file, monkeypatch):
        path = write_file("cardforge.yaml", "max_workers: 2\nrules_cache_ttl: 5\n")
        monkeypatch.setenv("CARDFORGE_MAX_WORKERS", "8")
        monkeypatch.setenv("CARDFORGE_RULES_TTL", "0.5")
        monkeypatch.setenv("CARDFORGE_RULES_PATH", "/etc/cardforge/rules.yaml")
        config = load_config(path)

        assert config.max_workers == 8
        assert config.rules_cache_ttl == 0.5
        assert config.rules_path == "/etc/cardforge/rules.yaml"

    def test_unknown_keys_ignored(self, write_file, caplog):
        path = write_file("cardforge.yaml", "max_tags: 5\ncolour: blue\n")
        with caplog.at_level(logging.WARNING, logger="cardforge.config"):
            config = load_config(path)

        assert config.max_tags == 5
        assert "colour" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_non_mapping_file(self, write_file):
        with pytest.raises(ValueError):
            load_config(write_file("list.yaml", "- a\n- b\n"))
