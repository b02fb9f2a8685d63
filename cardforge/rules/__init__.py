"""
Rule sets: the configurable keyword and verb tables behind classification.

- RuleSet: validated, read-only rules
- validate_rules / RuleSetValidator: fail-closed validation and sanitizing
- default_rule_set: built-in rules (validated on first use)
- RuleSetCache: TTL cache with explicit invalidation
- YamlRuleStore: versioned YAML persistence
"""

from .cache import RuleSetCache
from .defaults import DEFAULT_RULES, default_rule_set
from .model import RuleSet
from .store import YamlRuleStore, read_rules_file
from .validator import (
    RuleSetValidationError,
    RuleSetValidationResult,
    RuleSetValidator,
    validate_rules,
)

__all__ = [
    "RuleSet",
    "RuleSetCache",
    "RuleSetValidationError",
    "RuleSetValidationResult",
    "RuleSetValidator",
    "YamlRuleStore",
    "DEFAULT_RULES",
    "default_rule_set",
    "read_rules_file",
    "validate_rules",
]
