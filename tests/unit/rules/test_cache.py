"""Tests for RuleSetCache."""

import logging
import threading

import pytest

from cardforge.rules import RuleSetCache, default_rule_set

pytestmark = pytest.mark.unit


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


class TestRuleSetCache:
    def test_caches_within_ttl(self, small_rules, clock):
        calls = []
        cache = RuleSetCache(lambda: calls.append(1) or small_rules, ttl=60, clock=clock)

        assert cache.get() is small_rules
        clock.now += 30
        assert cache.get() is small_rules
        assert len(calls) == 1
        assert cache.value is small_rules
        assert cache.last_refreshed == 100.0

    def test_reloads_after_ttl(self, small_rules, clock):
        calls = []
        cache = RuleSetCache(lambda: calls.append(1) or small_rules, ttl=60, clock=clock)

        cache.get()
        clock.now += 61
        cache.get()
        assert len(calls) == 2
        assert cache.last_refreshed == 161.0

    def test_invalidate(self, small_rules, clock):
        calls = []
        cache = RuleSetCache(lambda: calls.append(1) or small_rules, ttl=60, clock=clock)

        cache.get()
        cache.invalidate()
        assert cache.value is None
        cache.get()
        assert len(calls) == 2

    def test_no_loader_uses_defaults(self):
        cache = RuleSetCache()
        assert cache.get() is default_rule_set()
        assert cache.value is None

    def test_loader_returning_none_is_not_cached(self, clock):
        calls = []
        cache = RuleSetCache(lambda: calls.append(1), ttl=60, clock=clock)

        assert cache.get() is default_rule_set()
        assert cache.get() is default_rule_set()
        assert len(calls) == 2

    def test_loader_failure_falls_back(self, clock, caplog):
        def broken():
            raise OSError("disk gone")

        cache = RuleSetCache(broken, ttl=60, clock=clock)
        with caplog.at_level(logging.WARNING, logger="cardforge.rules.cache"):
            assert cache.get() is default_rule_set()
        assert "disk gone" in caplog.text
        assert cache.value is None

    def test_custom_fallback(self, small_rules):
        cache = RuleSetCache(lambda: None, fallback=small_rules)
        assert cache.get() is small_rules

    def test_concurrent_readers_see_whole_rule_sets(self, small_rules, default_rules):
        toggle = {"n": 0}

        def loader():
            toggle["n"] += 1
            return small_rules if toggle["n"] % 2 else default_rules

        cache = RuleSetCache(loader, ttl=0)
        seen = []

        def reader():
            for _ in range(50):
                seen.append(cache.get())

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(seen) == 200
        assert all(rules is small_rules or rules is default_rules for rules in seen)
