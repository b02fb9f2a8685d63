"""Title synthesis for text cards."""

from typing import List

from cardforge.core.types import CardType

from .patterns import (
    LEADING_BULLET,
    LEADING_QUOTE,
    MAX_TITLE_LINE_LENGTH,
    TITLE_STOP_WORDS,
    TITLE_WORD_COUNT,
    TRAILING_QUOTE,
    WORD_TOKEN,
)


def clean_title_line(line: str) -> str:
    """Strip a leading bullet marker and surrounding quote characters."""
    line = LEADING_BULLET.sub("", line.strip())
    line = LEADING_QUOTE.sub("", line)
    return TRAILING_QUOTE.sub("", line).strip()


def salient_words(text: str, limit: int = TITLE_WORD_COUNT) -> List[str]:
    words: List[str] = []
    for token in WORD_TOKEN.findall(text.lower()):
        if len(token) <= 3 or token in TITLE_STOP_WORDS or token in words:
            continue
        words.append(token)
        if len(words) == limit:
            break
    return words


def synthesize_title(text: str, card_type: CardType) -> str:
    """
    Derive a title from section text.

    Uses the cleaned first line when it is short enough, otherwise the first
    few salient words, otherwise "<Type> Card". Never returns an empty string.
    """
    first_line = clean_title_line(text.split("\n", 1)[0]) if text else ""
    if 0 < len(first_line) < MAX_TITLE_LINE_LENGTH:
        return first_line

    words = salient_words(text or "")
    if words:
        return " ".join(word[:1].upper() + word[1:] for word in words)

    return f"{card_type.label} Card"


__all__ = ["synthesize_title", "clean_title_line", "salient_words"]
