"""
Card type scoring.

Each card type collects points from its rule set keywords; checklist, quote
and action additionally score structural signals (bullets, quoted spans,
action labels, imperative lines, numbered steps, action verbs and intent
phrases). The highest total wins.
"""

import re
from functools import lru_cache
from typing import Dict, Optional, Sequence

from cardforge.core.types import CardType
from cardforge.rules.model import RuleSet

from .patterns import (
    ACTION_PHRASES,
    ACTION_PREFIX_PATTERNS,
    ACTION_PREFIX_POINTS,
    BULLET_LINE,
    CHECKLIST_BULLET_POINTS,
    IMPERATIVE_LINE_CAP,
    IMPERATIVE_SPLIT,
    NUMBERED_LINE,
    NUMBERED_LIST_POINTS,
    QUOTE_POINTS,
    QUOTED_SPAN,
    VERB_OCCURRENCE_CAP,
)

_FIRST_WORD_PUNCTUATION = ",;:!?\"'()"


@lru_cache(maxsize=512)
def _verb_pattern(verb: str) -> re.Pattern:
    return re.compile(r"\b" + re.escape(verb) + r"\b", re.IGNORECASE)


def count_imperative_lines(text: str, action_verbs: Sequence[str]) -> int:
    """Lines (split on newline or '.') whose first word is an action verb."""
    verbs = set(action_verbs)
    count = 0
    for line in IMPERATIVE_SPLIT.split(text):
        words = line.split()
        if not words:
            continue
        if words[0].lower().strip(_FIRST_WORD_PUNCTUATION) in verbs:
            count += 1
    return count


def _action_signal_score(text: str, action_verbs: Sequence[str]) -> int:
    score = 0

    for pattern in ACTION_PREFIX_PATTERNS:
        if pattern.search(text):
            score += ACTION_PREFIX_POINTS

    score += min(count_imperative_lines(text, action_verbs), IMPERATIVE_LINE_CAP)

    if NUMBERED_LINE.search(text):
        score += NUMBERED_LIST_POINTS

    for verb in action_verbs:
        occurrences = len(_verb_pattern(verb).findall(text))
        score += min(occurrences, VERB_OCCURRENCE_CAP)

    for phrase in ACTION_PHRASES:
        if phrase.search(text):
            score += 1

    return score


def score_types(text: str, rule_set: RuleSet) -> Dict[CardType, int]:
    """
    Score every card type for a piece of text.

    Args:
        text: Section text (line breaks preserved)
        rule_set: Active rule set

    Returns:
        CardType -> score, in tie-break order
    """
    lower = text.lower()
    scores: Dict[CardType, int] = {}
    for card_type in rule_set.type_order():
        keywords = rule_set.card_type_keywords.get(card_type, ())
        scores[card_type] = sum(1 for keyword in keywords if keyword in lower)

    if BULLET_LINE.search(text):
        scores[CardType.CHECKLIST] += CHECKLIST_BULLET_POINTS

    if QUOTED_SPAN.search(text):
        scores[CardType.QUOTE] += QUOTE_POINTS

    scores[CardType.ACTION] += _action_signal_score(text, rule_set.action_verbs)
    return scores


def best_type(scores: Dict[CardType, int]) -> Optional[CardType]:
    """First type holding the maximum score, None when nothing scored."""
    if not scores:
        return None
    top = max(scores.values())
    if top <= 0:
        return None
    return next(card_type for card_type, score in scores.items() if score == top)


def classify_type(text: str, rule_set: RuleSet) -> CardType:
    """Pick the card type for text; CONCEPT when no signal is found."""
    return best_type(score_types(text, rule_set)) or CardType.CONCEPT


__all__ = ["score_types", "classify_type", "best_type", "count_imperative_lines"]
