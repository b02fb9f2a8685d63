"""Category scoring with an ordered contextual fallback."""

from typing import Dict, Optional, Sequence, Tuple

from cardforge.core.types import DEFAULT_CATEGORY
from cardforge.rules.model import RuleSet

from .patterns import CONTEXT_RULES


def score_categories(text: str, rule_set: RuleSet) -> Dict[str, int]:
    """
    Score each rule set category.

    A keyword found in the text earns one point, plus one more for every
    additional occurrence.
    """
    lower = text.lower()
    scores: Dict[str, int] = {}
    for category, keywords in rule_set.category_keywords.items():
        score = 0
        for keyword in keywords:
            # one point for the match, one per repeat
            score += lower.count(keyword)
        scores[category] = score
    return scores


def infer_category_from_context(
    text: str,
    rules: Sequence[Tuple[Tuple[str, ...], str]] = CONTEXT_RULES,
) -> str:
    """First context rule whose indicator words appear in text, else 'General'."""
    lower = text.lower()
    for indicators, category in rules:
        if any(indicator in lower for indicator in indicators):
            return category
    return DEFAULT_CATEGORY


def best_category(scores: Dict[str, int]) -> Optional[str]:
    if not scores:
        return None
    top = max(scores.values())
    if top <= 0:
        return None
    return next(category for category, score in scores.items() if score == top)


def classify_category(text: str, rule_set: RuleSet) -> str:
    """Highest scoring category (earliest wins ties), or the contextual fallback."""
    return best_category(score_categories(text, rule_set)) or infer_category_from_context(text)


__all__ = [
    "score_categories",
    "infer_category_from_context",
    "best_category",
    "classify_category",
]
