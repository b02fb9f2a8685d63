"""
Heuristic pattern tables.

Every regex and word list the extractors rely on lives here, in the order
it is evaluated. Changing an entry changes classification behaviour, so the
table carries a version and tests pin its observable effects.
"""

import re
from typing import List, Pattern, Tuple

PATTERN_TABLE_VERSION = "1.0"

# ---------------------------------------------------------------------------
# Content validation
# ---------------------------------------------------------------------------

PLACEHOLDER_TEXTS = frozenset({"no content", "n/a", "na", "none", "null"})

DATE_PATTERNS: List[Pattern] = [
    re.compile(r"^\d{1,2}/\d{1,2}/\d{2,4}$"),  # MM/DD/YYYY, M/D/YY
    re.compile(r"^\d{4}-\d{2}-\d{2}$"),  # YYYY-MM-DD
    re.compile(r"^[A-Z][a-z]{2}\s+\d{1,2},\s+\d{4}$"),  # Dec 22, 2025
    re.compile(r"^[A-Z][a-z]{2}\s+\d{1,2}\s+\d{4}$"),  # Dec 22 2025
    re.compile(r"^\d{1,2}\s+[A-Z][a-z]{2}\s+\d{4}$"),  # 22 Dec 2025
    re.compile(r"^[A-Z][a-z]+\s+\d{1,2},\s+\d{4}$"),  # December 22, 2025
    re.compile(r"^\d{1,2}\.\d{1,2}\.\d{2,4}$"),  # DD.MM.YYYY
]

TIME_PATTERN = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?(\s*(AM|PM|am|pm))?$")
TIME_PREFIX_PATTERN = re.compile(r"^\d{1,2}:\d{2}")

NOISE_CHARS = re.compile(r"[\s\-_.]")
NUMERIC_SEPARATORS = re.compile(r"[\s.,\-]")
DIGITS_ONLY = re.compile(r"^\d+$")

# Share of the text that digits must exceed to count as "just a number"
NUMERIC_RATIO = 0.7

# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")

# ---------------------------------------------------------------------------
# Card type scoring
# ---------------------------------------------------------------------------

BULLET_LINE = re.compile(r"^\s*[-•*]\s+", re.MULTILINE)
QUOTED_SPAN = re.compile(r"[\"“”][^\"“”\n]*\w[^\"“”\n]*[\"“”]")
NUMBERED_LINE = re.compile(r"^\s*\d+[.)]\s+[A-Z]", re.MULTILINE)
IMPERATIVE_SPLIT = re.compile(r"\n|\.")

_LINE_START = r"(?:^|(?<=[.!?])[ \t]+)\s*"

# Each label contributes once, however often it appears
ACTION_PREFIX_PATTERNS: List[Pattern] = [
    re.compile(_LINE_START + label + r"\s*:", re.IGNORECASE | re.MULTILINE)
    for label in (
        r"(?:action items?|actions?)",
        r"(?:to do|todo|to-do)",
        r"(?:tasks?)",
        r"(?:next steps?)",
        r"(?:follow up|follow-up|followup)",
        r"(?:deliverables?)",
        r"(?:milestones?)",
        r"(?:assign|assignment|owner|responsible)",
        r"(?:deadline|due date|timeline)",
    )
]

ACTION_PHRASES: List[Pattern] = [
    re.compile(r"\bneed to\b", re.IGNORECASE),
    re.compile(r"\bshould\b", re.IGNORECASE),
    re.compile(r"\bmust\b", re.IGNORECASE),
    re.compile(r"\bwill\b", re.IGNORECASE),
    re.compile(r"\bgoing to\b", re.IGNORECASE),
    re.compile(r"\bplan to\b", re.IGNORECASE),
    re.compile(r"\bintend to\b", re.IGNORECASE),
]

CHECKLIST_BULLET_POINTS = 2
QUOTE_POINTS = 3
ACTION_PREFIX_POINTS = 3
IMPERATIVE_LINE_CAP = 3
NUMBERED_LIST_POINTS = 2
VERB_OCCURRENCE_CAP = 2

# ---------------------------------------------------------------------------
# Category fallback, evaluated first match wins
# ---------------------------------------------------------------------------

CONTEXT_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("$", "dollar", "cost", "budget"), "Financial Management"),
    (("meeting", "presentation", "speak"), "Communication"),
    (("goal", "objective", "target"), "Strategic Planning"),
    (("problem", "issue", "challenge"), "Problem Solving"),
    (("learn", "study", "research"), "Learning & Development"),
    (("customer", "client", "user"), "Customer Service"),
    (("employee", "staff", "hire"), "Human Resources"),
    (("sale", "deal", "revenue"), "Sales"),
    (("market", "brand", "promotion"), "Marketing"),
    (("system", "process", "workflow"), "Operations"),
    (("technology", "digital", "software"), "Technology"),
]

# ---------------------------------------------------------------------------
# Titles and tags
# ---------------------------------------------------------------------------

WORD_TOKEN = re.compile(r"[A-Za-z0-9_]+")
LEADING_BULLET = re.compile(r"^[-•*]\s*")
LEADING_QUOTE = re.compile(r"^[\"“”]\s*")
TRAILING_QUOTE = re.compile(r"\s*[\"“”]$")

TITLE_STOP_WORDS = frozenset(
    {"the", "and", "for", "with", "this", "that", "have", "will", "from"}
)
TAG_STOP_WORDS = frozenset(
    {"about", "their", "there", "these", "those", "which", "where", "would", "could", "should"}
)

MAX_TITLE_LINE_LENGTH = 100
TITLE_WORD_COUNT = 3
MAX_TAGS = 10
MAX_WORD_TAGS = 5
MIN_TAG_WORD_LENGTH = 5

# ---------------------------------------------------------------------------
# Tabular rows
# ---------------------------------------------------------------------------

NUMERIC_CELL = re.compile(r"^[\d\s.,\-+%$]+$")
HEADER_NAME_NOISE = re.compile(r"[\s_-]")
WHITESPACE_RUN = re.compile(r"\s+")

__all__ = [name for name in dir() if name.isupper() and not name.startswith("_")]
