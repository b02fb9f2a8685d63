"""Pytest fixtures for cardforge tests (rules, extraction, sources)."""

import copy
from pathlib import Path

import pytest

from cardforge.rules import DEFAULT_RULES, RuleSet, default_rule_set


# ============================================================================
# RULE SET FIXTURES
# ============================================================================

SMALL_RULES = {
    "cardTypeKeywords": {
        "concept": ["definition"],
        "action": ["task"],
        "quote": ["quote"],
        "checklist": ["checklist"],
        "mindmap": ["network"],
    },
    "categoryKeywords": {
        "Finance": ["budget", "cost"],
        "People": ["team", "hire"],
    },
    "actionVerbs": ["review", "send", "plan"],
}


@pytest.fixture
def small_rules_dict() -> dict:
    """Small wire-format rule set with predictable scoring."""
    return copy.deepcopy(SMALL_RULES)


@pytest.fixture
def small_rules(small_rules_dict) -> RuleSet:
    """Validated small rule set."""
    return RuleSet.from_dict(small_rules_dict)


@pytest.fixture
def default_rules() -> RuleSet:
    """Built-in rule set."""
    return default_rule_set()


@pytest.fixture
def default_rules_dict() -> dict:
    return copy.deepcopy(DEFAULT_RULES)


# ============================================================================
# DOCUMENT FIXTURES
# ============================================================================

MEETING_NOTES = """Quarterly planning meeting

Action Items: Review budget by Friday

- Book the venue
- Send invitations
- Order catering

"Culture eats strategy for breakfast" was the quote of the day.

12/25/2023

N/A
"""


@pytest.fixture
def meeting_notes() -> str:
    """Notes with a title line, an action item, a checklist, a quote and noise."""
    return MEETING_NOTES


@pytest.fixture
def people_rows() -> list:
    """Sheet rows: header, a data row, a repeated header and an empty row."""
    return [
        ["Name", "Age"],
        ["Alice", "34"],
        ["Name", "Age"],
        [],
        ["Bob", "41"],
    ]


@pytest.fixture
def write_file(tmp_path):
    """Write text into tmp_path and return the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
