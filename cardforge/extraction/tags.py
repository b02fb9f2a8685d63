"""Tag extraction: matched category keywords plus salient words."""

from typing import List

from cardforge.rules.model import RuleSet

from .patterns import MAX_TAGS, MAX_WORD_TAGS, MIN_TAG_WORD_LENGTH, TAG_STOP_WORDS, WORD_TOKEN


def extract_tags(text: str, rule_set: RuleSet, limit: int = MAX_TAGS) -> List[str]:
    """
    Collect tags for text.

    Every category keyword found in the text comes first (rule set order),
    then up to five new words longer than four characters. The result holds
    unique lower-case tags, at most ``limit`` of them.
    """
    lower = text.lower()
    tags: List[str] = []

    for keywords in rule_set.category_keywords.values():
        for keyword in keywords:
            if keyword in lower and keyword not in tags:
                tags.append(keyword)

    added = 0
    for token in WORD_TOKEN.findall(lower):
        if added >= MAX_WORD_TAGS:
            break
        if len(token) < MIN_TAG_WORD_LENGTH or token in TAG_STOP_WORDS or token in tags:
            continue
        tags.append(token)
        added += 1

    return tags[:limit]


__all__ = ["extract_tags"]
