"""
Rule set validation and sanitization.

A rule set supplied from outside (YAML file, API payload, database row) must
pass validation before it may drive classification. Validation fails closed:
every violation is reported and nothing is partially applied.

Usage:
    >>> from cardforge.rules.validator import validate_rules
    >>> result = validate_rules(payload)
    >>> if not result.is_valid:
    ...     for error in result.errors:
    ...         print(f"Error: {error}")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from cardforge.core.types import CardForgeError, CardType

from .model import RuleSet

logger = logging.getLogger(__name__)

MAX_CARD_TYPES = 10
MAX_CATEGORIES = 50
MAX_KEYWORDS_PER_TYPE = 100
MAX_KEYWORDS_PER_CATEGORY = 100
MAX_ACTION_VERBS = 100
MAX_KEYWORD_LENGTH = 100
MAX_CATEGORY_NAME_LENGTH = 80

CARD_TYPES_KEY = "cardTypeKeywords"
CATEGORIES_KEY = "categoryKeywords"
ACTION_VERBS_KEY = "actionVerbs"


class RuleSetValidationError(CardForgeError):
    """Raised when a rule set is rejected; carries every violation."""

    def __init__(self, errors: Sequence[str]):
        self.errors = list(errors)
        super().__init__("Rule set validation failed: " + "; ".join(self.errors))


@dataclass
class RuleSetValidationResult:
    """Outcome of validating a raw rule set."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    sanitized: Optional[RuleSet] = None

    @property
    def summary(self) -> str:
        if self.is_valid:
            return "Valid rule set"
        return f"Invalid rule set ({len(self.errors)} errors)"


def _sanitize_keywords(items: Sequence[Any]) -> Tuple[str, ...]:
    """Trim, lower-case and de-duplicate, keeping first-seen order. Non-strings are dropped."""
    cleaned = (item.strip().lower() for item in items if isinstance(item, str))
    return tuple(dict.fromkeys(kw for kw in cleaned if kw))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class RuleSetValidator:
    """
    Validates raw rule set mappings against the limits of the data model.

    Checks:
    - Input is a mapping with cardTypeKeywords, categoryKeywords, actionVerbs
    - Each section is present, non-empty and of the right container type
    - Card types belong to the CardType enumeration
    - Count limits (types, categories, keywords, verbs)
    - Length limits (keywords, category names)
    """

    def validate(self, raw: Any) -> RuleSetValidationResult:
        if not isinstance(raw, Mapping):
            return RuleSetValidationResult(is_valid=False, errors=["Rules must be an object"])

        errors: List[str] = []
        card_types = self._validate_card_types(raw.get(CARD_TYPES_KEY), errors)
        categories = self._validate_categories(raw.get(CATEGORIES_KEY), errors)
        verbs = self._validate_action_verbs(raw.get(ACTION_VERBS_KEY), errors)

        if errors:
            logger.debug("Rule set rejected with %d errors", len(errors))
            return RuleSetValidationResult(is_valid=False, errors=errors)

        return RuleSetValidationResult(
            is_valid=True,
            sanitized=RuleSet(
                card_type_keywords=card_types,
                category_keywords=categories,
                action_verbs=verbs,
            ),
        )

    def _validate_card_types(self, value: Any, errors: List[str]) -> Dict[CardType, Tuple[str, ...]]:
        sanitized: Dict[CardType, Tuple[str, ...]] = {}
        if value is None:
            errors.append(f"{CARD_TYPES_KEY} is required")
            return sanitized
        if not isinstance(value, Mapping):
            errors.append(f"{CARD_TYPES_KEY} must be an object mapping card types to keyword arrays")
            return sanitized
        if not value:
            errors.append(f"{CARD_TYPES_KEY} must have at least one card type")
            return sanitized
        if len(value) > MAX_CARD_TYPES:
            errors.append(f"{CARD_TYPES_KEY} has too many types (max {MAX_CARD_TYPES})")
            return sanitized

        for name, keywords in value.items():
            if name not in CardType.values():
                errors.append(
                    f'Invalid card type "{name}". Must be one of: {", ".join(CardType.values())}'
                )
                continue
            if not _is_sequence(keywords):
                errors.append(f"{CARD_TYPES_KEY}.{name} must be an array of strings")
                continue
            unique = _sanitize_keywords(keywords)
            if not unique:
                errors.append(f"{CARD_TYPES_KEY}.{name} must have at least one keyword")
            elif len(unique) > MAX_KEYWORDS_PER_TYPE:
                errors.append(
                    f"{CARD_TYPES_KEY}.{name} has too many keywords (max {MAX_KEYWORDS_PER_TYPE})"
                )
            elif any(len(kw) > MAX_KEYWORD_LENGTH for kw in unique):
                errors.append(f"Some keywords in {name} exceed {MAX_KEYWORD_LENGTH} characters")
            else:
                sanitized[CardType(name)] = unique
        return sanitized

    def _validate_categories(self, value: Any, errors: List[str]) -> Dict[str, Tuple[str, ...]]:
        sanitized: Dict[str, Tuple[str, ...]] = {}
        if value is None:
            errors.append(f"{CATEGORIES_KEY} is required")
            return sanitized
        if not isinstance(value, Mapping):
            errors.append(f"{CATEGORIES_KEY} must be an object mapping category names to keyword arrays")
            return sanitized
        if not value:
            errors.append(f"{CATEGORIES_KEY} must have at least one category")
            return sanitized
        if len(value) > MAX_CATEGORIES:
            errors.append(f"{CATEGORIES_KEY} has too many categories (max {MAX_CATEGORIES})")
            return sanitized

        for name, keywords in value.items():
            trimmed = name.strip() if isinstance(name, str) else ""
            if not trimmed:
                errors.append("Category names cannot be empty")
                continue
            if len(trimmed) > MAX_CATEGORY_NAME_LENGTH:
                errors.append(
                    f'Category "{trimmed[:30]}..." exceeds {MAX_CATEGORY_NAME_LENGTH} characters'
                )
                continue
            if trimmed in sanitized:
                errors.append(f'Duplicate category "{trimmed}"')
                continue
            if not _is_sequence(keywords):
                errors.append(f"{CATEGORIES_KEY}.{trimmed} must be an array of strings")
                continue
            unique = _sanitize_keywords(keywords)
            if len(unique) > MAX_KEYWORDS_PER_CATEGORY:
                errors.append(
                    f"{CATEGORIES_KEY}.{trimmed} has too many keywords (max {MAX_KEYWORDS_PER_CATEGORY})"
                )
            elif any(len(kw) > MAX_KEYWORD_LENGTH for kw in unique):
                errors.append(
                    f'Some keywords in category "{trimmed}" exceed {MAX_KEYWORD_LENGTH} characters'
                )
            else:
                sanitized[trimmed] = unique
        return sanitized

    def _validate_action_verbs(self, value: Any, errors: List[str]) -> Tuple[str, ...]:
        if value is None:
            errors.append(f"{ACTION_VERBS_KEY} is required")
            return ()
        if not _is_sequence(value):
            errors.append(f"{ACTION_VERBS_KEY} must be an array of strings")
            return ()
        unique = _sanitize_keywords(value)
        if not unique:
            errors.append(f"{ACTION_VERBS_KEY} must have at least one verb")
        elif len(unique) > MAX_ACTION_VERBS:
            errors.append(f"{ACTION_VERBS_KEY} has too many items (max {MAX_ACTION_VERBS})")
        elif any(len(verb) > MAX_KEYWORD_LENGTH for verb in unique):
            errors.append("Some action verbs exceed maximum length")
        else:
            return unique
        return ()


def validate_rules(raw: Any) -> RuleSetValidationResult:
    """Validate a raw rule set mapping (see RuleSetValidator)."""
    return RuleSetValidator().validate(raw)


__all__ = [
    "RuleSetValidationError",
    "RuleSetValidationResult",
    "RuleSetValidator",
    "validate_rules",
    "MAX_CARD_TYPES",
    "MAX_CATEGORIES",
    "MAX_KEYWORDS_PER_TYPE",
    "MAX_KEYWORDS_PER_CATEGORY",
    "MAX_ACTION_VERBS",
    "MAX_KEYWORD_LENGTH",
    "MAX_CATEGORY_NAME_LENGTH",
]
