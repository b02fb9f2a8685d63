"""
YAML-backed rule set store.

File layout:

    version: 3
    rules:
      cardTypeKeywords: {concept: [...], ...}
      categoryKeywords: {AI: [...], ...}
      actionVerbs: [...]

Every successful save or reset bumps the version. Invalid payloads are
rejected before anything is written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .cache import RuleSetCache
from .defaults import DEFAULT_RULES
from .model import RuleSet
from .validator import RuleSetValidationError, validate_rules

logger = logging.getLogger(__name__)


def read_rules_file(path: Union[str, Path]) -> Any:
    """Read a raw rule set payload from a YAML (or JSON) file."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


class YamlRuleStore:
    """
    Persists the active rule set in a single YAML file.

    Args:
        path: YAML file location (created on first save)
        cache: Optional cache invalidated after every write
    """

    def __init__(self, path: Union[str, Path], cache: Optional[RuleSetCache] = None):
        self.path = Path(path)
        self.cache = cache

    def _read(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            data = read_rules_file(self.path)
        except yaml.YAMLError as e:
            logger.warning("Rule store %s is not valid YAML: %s", self.path, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Rule store %s has unexpected structure", self.path)
            return None
        return data

    def _current_version(self) -> int:
        data = self._read()
        if not data:
            return 0
        try:
            return int(data.get("version", 0))
        except (TypeError, ValueError):
            return 0

    def load(self) -> Optional[RuleSet]:
        """
        Load the stored rule set.

        Returns:
            RuleSet, or None when the file is missing or its rules are invalid
            (callers then fall back to the defaults)
        """
        data = self._read()
        if data is None:
            return None
        try:
            version = int(data.get("version", 1))
        except (TypeError, ValueError):
            version = 1
        try:
            return RuleSet.from_dict(data.get("rules"), version=max(version, 1))
        except RuleSetValidationError as e:
            logger.warning("Stored rule set in %s is invalid: %s", self.path, "; ".join(e.errors))
            return None

    def save(self, raw: Any) -> RuleSet:
        """
        Validate and store a rule set.

        Raises:
            RuleSetValidationError: nothing is written
        """
        result = validate_rules(raw)
        if not result.is_valid:
            raise RuleSetValidationError(result.errors)

        rule_set = result.sanitized.with_version(self._current_version() + 1)
        self._write(rule_set)
        if self.cache is not None:
            self.cache.invalidate()
        logger.info("Stored rule set version %d in %s", rule_set.version, self.path)
        return rule_set

    def reset(self) -> RuleSet:
        """Replace the stored rules with the built-in defaults."""
        return self.save(DEFAULT_RULES)

    def _write(self, rule_set: RuleSet) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"version": rule_set.version, "rules": rule_set.to_dict()}
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(payload, f, sort_keys=False, allow_unicode=True, indent=2)
        tmp_path.replace(self.path)


__all__ = ["YamlRuleStore", "read_rules_file"]
