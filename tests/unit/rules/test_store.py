"""Tests for YamlRuleStore."""

import json
import logging

import pytest
import yaml

from cardforge.rules import (
    DEFAULT_RULES,
    RuleSet,
    RuleSetCache,
    RuleSetValidationError,
    YamlRuleStore,
    read_rules_file,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "config" / "rules.yaml"


class TestYamlRuleStore:
    def test_missing_file_loads_none(self, store_path):
        assert YamlRuleStore(store_path).load() is None

    def test_save_and_load(self, store_path, small_rules_dict):
        store = YamlRuleStore(store_path)
        saved = store.save(small_rules_dict)
        loaded = store.load()

        assert saved.version == 1
        assert loaded == saved
        assert loaded.version == 1
        assert not store_path.with_name("rules.yaml.tmp").exists()

    def test_each_save_bumps_version(self, store_path, small_rules_dict):
        store = YamlRuleStore(store_path)
        store.save(small_rules_dict)
        store.save(small_rules_dict)

        assert store.save(small_rules_dict).version == 3
        assert store.load().version == 3

    def test_file_layout(self, store_path, small_rules_dict):
        YamlRuleStore(store_path).save(small_rules_dict)
        data = yaml.safe_load(store_path.read_text(encoding="utf-8"))

        assert data["version"] == 1
        assert list(data["rules"]) == ["cardTypeKeywords", "categoryKeywords", "actionVerbs"]
        assert data["rules"]["actionVerbs"] == ["review", "send", "plan"]

    def test_invalid_save_writes_nothing(self, store_path):
        store = YamlRuleStore(store_path)
        with pytest.raises(RuleSetValidationError):
            store.save({"cardTypeKeywords": {"concept": ["x"]}, "categoryKeywords": {}, "actionVerbs": []})
        assert not store_path.exists()

    def test_invalid_save_keeps_previous_rules(self, store_path, small_rules_dict):
        store = YamlRuleStore(store_path)
        store.save(small_rules_dict)
        with pytest.raises(RuleSetValidationError):
            store.save({"cardTypeKeywords": {"poem": ["x"]}})

        assert store.load().version == 1

    def test_reset_stores_defaults(self, store_path, small_rules_dict):
        store = YamlRuleStore(store_path)
        store.save(small_rules_dict)
        rules = store.reset()

        assert rules.version == 2
        assert rules == RuleSet.from_dict(DEFAULT_RULES)

    def test_invalid_stored_rules_load_none(self, store_path, caplog):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("version: 2\nrules:\n  actionVerbs: []\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="cardforge.rules.store"):
            assert YamlRuleStore(store_path).load() is None
        assert "invalid" in caplog.text

    def test_broken_yaml_loads_none(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("rules: [unclosed", encoding="utf-8")
        assert YamlRuleStore(store_path).load() is None

    def test_save_invalidates_cache(self, store_path, small_rules_dict, default_rules_dict):
        cache = RuleSetCache(ttl=3600)
        store = YamlRuleStore(store_path, cache=cache)
        cache.loader = store.load

        store.save(small_rules_dict)
        assert cache.get().version == 1
        store.save(default_rules_dict)
        assert cache.get().version == 2


def test_read_rules_file_accepts_json(tmp_path, small_rules_dict):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(small_rules_dict), encoding="utf-8")
    assert read_rules_file(path) == small_rules_dict
