"""
Card extraction.

Components (leaves first):
- validator: meaningfulness gate
- segmenter: text -> sections
- type_classifier / category_classifier: scoring against a RuleSet
- titles / tags: card presentation
- tabular: spreadsheet rows -> cards
- engine: CardExtractor, which ties the above together

Example:
    >>> from cardforge.extraction import CardExtractor
    >>> cards = CardExtractor().extract_text(open("notes.txt").read(), "notes.txt")
"""

from .category_classifier import classify_category, infer_category_from_context, score_categories
from .engine import CardExtractor, CardRejectedError, ExtractionReport, NoCardsError, extract_cards
from .segmenter import Segmenter, segment
from .tabular import TabularRowExtractor, build_schema
from .tags import extract_tags
from .titles import synthesize_title
from .type_classifier import classify_type, score_types
from .validator import is_meaningful

__all__ = [
    "CardExtractor",
    "CardRejectedError",
    "ExtractionReport",
    "NoCardsError",
    "Segmenter",
    "TabularRowExtractor",
    "build_schema",
    "classify_category",
    "classify_type",
    "extract_cards",
    "extract_tags",
    "infer_category_from_context",
    "is_meaningful",
    "score_categories",
    "score_types",
    "segment",
    "synthesize_title",
]
