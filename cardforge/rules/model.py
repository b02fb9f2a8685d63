"""RuleSet: the keyword and verb tables that drive classification."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Tuple

from cardforge.core.types import CardType


@dataclass(frozen=True)
class RuleSet:
    """
    Validated, read-only classification rules.

    Mapping order is significant: it is the tie-break order for card types
    and categories. Build instances through ``RuleSet.from_dict`` (or the
    validator) so the limits below always hold.

    Attributes:
        card_type_keywords: CardType -> keywords (1-10 types)
        category_keywords: category name -> keywords (up to 50 categories)
        action_verbs: verbs used for imperative-sentence detection
        version: incremented on every accepted update
    """

    card_type_keywords: Dict[CardType, Tuple[str, ...]]
    category_keywords: Dict[str, Tuple[str, ...]]
    action_verbs: Tuple[str, ...]
    version: int = field(default=1, compare=False)

    @classmethod
    def from_dict(cls, raw: Any, version: int = 1) -> "RuleSet":
        """
        Validate a wire-format mapping and build a RuleSet.

        Raises:
            RuleSetValidationError: with every violation found
        """
        from .validator import RuleSetValidationError, validate_rules

        result = validate_rules(raw)
        if not result.is_valid:
            raise RuleSetValidationError(result.errors)
        return result.sanitized.with_version(version)

    def with_version(self, version: int) -> "RuleSet":
        return replace(self, version=version)

    def type_order(self) -> Tuple[CardType, ...]:
        """Card types in tie-break order: declared types first, then the rest of the enum."""
        declared = tuple(self.card_type_keywords)
        return declared + tuple(t for t in CardType if t not in self.card_type_keywords)

    def to_dict(self) -> Dict[str, Any]:
        """Wire format (camelCase keys, lists)."""
        return {
            "cardTypeKeywords": {t.value: list(kws) for t, kws in self.card_type_keywords.items()},
            "categoryKeywords": {name: list(kws) for name, kws in self.category_keywords.items()},
            "actionVerbs": list(self.action_verbs),
        }

    def summary(self) -> Mapping[str, int]:
        return {
            "version": self.version,
            "card_types": len(self.card_type_keywords),
            "categories": len(self.category_keywords),
            "action_verbs": len(self.action_verbs),
        }


__all__ = ["RuleSet"]
