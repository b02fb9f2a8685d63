"""
Core data types for card extraction.

Cards are produced from two kinds of input:
- TextSection: a fragment of free text produced by the segmenter
- StructuredRow: one spreadsheet row keyed by its SchemaColumn names

Both paths end in a CardCandidate, which carries no identity or storage
concerns (those belong to whatever persists the cards).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class CardForgeError(Exception):
    """Base class for errors raised by cardforge."""


class CardType(Enum):
    """Closed set of card types a rule set may declare."""

    CONCEPT = "concept"
    ACTION = "action"
    QUOTE = "quote"
    CHECKLIST = "checklist"
    MINDMAP = "mindmap"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @property
    def label(self) -> str:
        """Display form, e.g. 'Checklist'."""
        return self.value[:1].upper() + self.value[1:]


DEFAULT_CATEGORY = "General"
TABULAR_CATEGORY = "Data"
GENERATED_BY = "rule-based"


@dataclass(frozen=True)
class TextSection:
    """Contiguous fragment of a source document (1-based index)."""

    text: str
    index: int
    total: int

    @property
    def location(self) -> str:
        return f"Paragraph {self.index} of {self.total}"


@dataclass(frozen=True)
class SchemaColumn:
    """Spreadsheet column derived from the header row."""

    name: str
    index: int

    @property
    def is_generic(self) -> bool:
        """True when the name was synthesized for a blank header cell."""
        return self.name == generic_column_name(self.index)


def generic_column_name(index: int) -> str:
    return f"Column_{index + 1}"


# Column name -> raw cell value for one data row
StructuredRow = Dict[str, Any]


@dataclass
class Provenance:
    """Where in the source a card came from."""

    location: str
    snippet: str


@dataclass
class CardCandidate:
    """
    Output unit of extraction.

    Attributes:
        title: Human readable title (at most 200 characters)
        content: Whitespace-normalized card body
        type: Card type
        category: Free-form category name
        tags: Unique lower-case tags in first-seen order (at most 10)
        source: Originating file name
        provenance: Location and original snippet
        generated_by: Generator that produced the card
        metadata: Extra data (tabular cards keep sheet/row/schema here)
    """

    title: str
    content: str
    provenance: Provenance
    type: CardType = CardType.CONCEPT
    category: str = DEFAULT_CATEGORY
    tags: List[str] = field(default_factory=list)
    source: str = ""
    generated_by: str = GENERATED_BY
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "title": self.title,
            "content": self.content,
            "type": self.type.value,
            "category": self.category,
            "tags": list(self.tags),
            "source": self.source,
            "generated_by": self.generated_by,
            "provenance": {
                "location": self.provenance.location,
                "snippet": self.provenance.snippet,
            },
        }
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data


def truncate(text: str, limit: int, marker: str = "...") -> str:
    """Cut text to ``limit`` characters including the marker."""
    if len(text) <= limit:
        return text
    return text[: max(0, limit - len(marker))] + marker


__all__ = [
    "CardForgeError",
    "CardType",
    "CardCandidate",
    "Provenance",
    "SchemaColumn",
    "StructuredRow",
    "TextSection",
    "DEFAULT_CATEGORY",
    "TABULAR_CATEGORY",
    "GENERATED_BY",
    "generic_column_name",
    "truncate",
]
