"""
Content quality gate.

Decides whether a piece of text is worth turning into a card: rejects empty
strings, placeholders ("N/A", "none"), bare dates and times, and strings that
are essentially a number.
"""

from typing import Any

from .patterns import (
    DATE_PATTERNS,
    DIGITS_ONLY,
    NOISE_CHARS,
    NUMERIC_RATIO,
    NUMERIC_SEPARATORS,
    PLACEHOLDER_TEXTS,
    TIME_PATTERN,
    TIME_PREFIX_PATTERN,
)

DEFAULT_MIN_LENGTH = 10


def is_date(text: str) -> bool:
    return any(pattern.match(text) for pattern in DATE_PATTERNS)


def is_time(text: str) -> bool:
    return TIME_PATTERN.match(text) is not None


def is_meaningful(text: Any, min_length: int = DEFAULT_MIN_LENGTH) -> bool:
    """
    Check that text carries real content.

    Args:
        text: Candidate content (non-strings are never meaningful)
        min_length: Minimum trimmed length

    Returns:
        False for short text, placeholders, bare dates/times and numbers
    """
    if not isinstance(text, str):
        return False

    trimmed = text.strip()
    if len(trimmed) < min_length:
        return False

    if trimmed.lower() in PLACEHOLDER_TEXTS:
        return False

    # Whitespace, dashes, underscores and dots alone do not count
    if len(NOISE_CHARS.sub("", trimmed)) < min_length / 2:
        return False

    if is_date(trimmed) or is_time(trimmed):
        return False

    digits = NUMERIC_SEPARATORS.sub("", trimmed)
    if len(digits) > len(trimmed) * NUMERIC_RATIO and DIGITS_ONLY.match(digits):
        return False

    words = trimmed.split()
    if len(words) <= 2 and len(trimmed) < 20:
        if is_date(trimmed) or TIME_PREFIX_PATTERN.match(trimmed):
            return False

    return True


__all__ = ["is_meaningful", "is_date", "is_time", "DEFAULT_MIN_LENGTH"]
