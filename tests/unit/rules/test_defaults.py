"""Tests for the built-in rule set."""

import pytest

from cardforge.core.types import CardType
from cardforge.rules import DEFAULT_RULES, default_rule_set, validate_rules

pytestmark = pytest.mark.unit


class TestDefaultRules:
    def test_defaults_validate(self):
        result = validate_rules(DEFAULT_RULES)
        assert result.is_valid, result.errors

    def test_default_rule_set_is_cached(self):
        assert default_rule_set() is default_rule_set()

    def test_declares_every_card_type(self, default_rules):
        assert set(default_rules.card_type_keywords) == set(CardType)
        assert default_rules.type_order() == tuple(CardType)

    def test_category_order_preserved(self, default_rules):
        names = list(default_rules.category_keywords)
        assert names[0] == "AI"
        assert names[-1] == "Sales"
        assert len(names) == len(DEFAULT_RULES["categoryKeywords"])

    def test_action_verbs_present(self, default_rules):
        assert "review" in default_rules.action_verbs
        assert "follow up" in default_rules.action_verbs
