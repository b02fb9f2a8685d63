"""
Card extraction engine.

Two input paths share one rule set per document:

    text   -> Segmenter -> meaningfulness gate -> type / category / title / tags
    sheets -> TabularRowExtractor (own header detection and titles)

The engine does no I/O. Rule sets come either fixed or from a RuleSetCache,
which is read once per document so a refresh never splits a document
between two rule set versions.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from cardforge.config import ExtractionConfig
from cardforge.core.types import (
    CardCandidate,
    CardForgeError,
    Provenance,
    TextSection,
    truncate,
)
from cardforge.rules.cache import RuleSetCache
from cardforge.rules.defaults import default_rule_set
from cardforge.rules.model import RuleSet
from cardforge.sources import DocumentInput, Sheet

from .category_classifier import classify_category
from .patterns import WHITESPACE_RUN
from .segmenter import Segmenter
from .tabular import TabularRowExtractor
from .tags import extract_tags
from .titles import synthesize_title
from .type_classifier import classify_type
from .validator import is_meaningful

logger = logging.getLogger(__name__)

REGENERATED_SOURCE = "regenerated"


class NoCardsError(CardForgeError):
    """A document produced no cards where at least one was required."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"No cards could be produced from {source}")


class CardRejectedError(CardForgeError):
    """A regeneration snippet did not pass the meaningfulness gate."""


@dataclass
class ExtractionReport:
    """Cards produced from one document plus what was considered/skipped."""

    source: str
    cards: List[CardCandidate] = field(default_factory=list)
    considered: int = 0
    skipped: int = 0

    @property
    def produced(self) -> int:
        return len(self.cards)


def normalize_whitespace(text: str) -> str:
    return WHITESPACE_RUN.sub(" ", text).strip()


class CardExtractor:
    """
    Turns documents into card candidates.

    Example:
        >>> extractor = CardExtractor()
        >>> cards = extractor.extract_text("Action Items: Review budget by Friday", "notes.txt")
        >>> cards[0].type
        <CardType.ACTION: 'action'>

    Args:
        rules: Fixed RuleSet, a RuleSetCache, or None for the built-in defaults
        config: Extraction limits (defaults to ExtractionConfig())
    """

    def __init__(
        self,
        rules: Optional[Union[RuleSet, RuleSetCache]] = None,
        config: Optional[ExtractionConfig] = None,
    ):
        self.rules = rules
        self.config = config or ExtractionConfig()
        self.segmenter = Segmenter(self.config.max_section_length)
        self.tabular = TabularRowExtractor()

    def rule_set(self) -> RuleSet:
        """The rule set to use for the next document."""
        if isinstance(self.rules, RuleSetCache):
            return self.rules.get()
        if self.rules is not None:
            return self.rules
        return default_rule_set()

    # ------------------------------------------------------------------
    # Text path
    # ------------------------------------------------------------------

    def build_card(self, section: TextSection, source: str, rule_set: RuleSet) -> Optional[CardCandidate]:
        """
        Build a card from one section, or None if it fails the gate.

        Classification, title and tags look at the section text with its line
        breaks; the card content is whitespace-normalized.
        """
        text = section.text
        if not is_meaningful(text, self.config.min_content_length):
            logger.debug("Skipping %s of %s: not meaningful", section.location, source)
            return None

        card_type = classify_type(text, rule_set)
        snippet = text
        if len(snippet) > self.config.snippet_length:
            snippet = snippet[: self.config.snippet_length] + "..."

        return CardCandidate(
            title=truncate(synthesize_title(text, card_type), self.config.max_title_length),
            content=normalize_whitespace(text),
            type=card_type,
            category=classify_category(text, rule_set),
            tags=extract_tags(text, rule_set, self.config.max_tags),
            source=source,
            provenance=Provenance(location=section.location, snippet=snippet),
        )

    def _extract_text(self, raw_text: str, source: str, rule_set: RuleSet) -> ExtractionReport:
        report = ExtractionReport(source=source)
        for section in self.segmenter.segment(raw_text or ""):
            report.considered += 1
            card = self.build_card(section, source, rule_set)
            if card is None:
                report.skipped += 1
            else:
                report.cards.append(card)
        return report

    def extract_text(self, raw_text: str, source: str = "text") -> List[CardCandidate]:
        """Cards from free text, in section order."""
        return self._extract_text(raw_text, source, self.rule_set()).cards

    # ------------------------------------------------------------------
    # Tabular path
    # ------------------------------------------------------------------

    def _extract_tables(self, sheets: Iterable[Sheet], source: str) -> ExtractionReport:
        report = ExtractionReport(source=source)
        for sheet_name, rows in sheets:
            data_rows = sum(1 for row in rows[1:] if row) if rows else 0
            cards = self.tabular.extract_sheet(sheet_name, rows, source)
            report.considered += data_rows
            report.skipped += data_rows - len(cards)
            report.cards.extend(cards)
        return report

    def extract_tables(self, sheets: Iterable[Sheet], source: str = "sheet") -> List[CardCandidate]:
        """Cards from (sheet_name, rows) pairs; rows[0] of each sheet is the header."""
        return self._extract_tables(sheets, source).cards

    # ------------------------------------------------------------------
    # Regeneration
    # ------------------------------------------------------------------

    def regenerate(self, snippet: str, source: str = REGENERATED_SOURCE) -> CardCandidate:
        """
        Rebuild exactly one card from a snippet, without segmentation.

        Raises:
            CardRejectedError: If the snippet fails the meaningfulness gate
        """
        section = TextSection(text=(snippet or "").strip(), index=1, total=1)
        card = self.build_card(section, source, self.rule_set())
        if card is None:
            raise CardRejectedError("Snippet does not contain meaningful content")
        return card

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def process(self, document: DocumentInput, require_cards: bool = False) -> ExtractionReport:
        """
        Extract one document.

        Args:
            document: Text or tabular input
            require_cards: Raise NoCardsError when nothing was produced

        Returns:
            ExtractionReport
        """
        if document.is_tabular:
            report = self._extract_tables(document.sheets or [], document.source)
        else:
            report = self._extract_text(document.text or "", document.source, self.rule_set())

        logger.info(
            "%s: %d cards (%d considered, %d skipped)",
            document.source,
            report.produced,
            report.considered,
            report.skipped,
        )

        if require_cards and not report.cards:
            raise NoCardsError(document.source)
        return report

    def extract_many(
        self,
        documents: Sequence[DocumentInput],
        max_workers: Optional[int] = None,
    ) -> List[ExtractionReport]:
        """Process independent documents in parallel; reports keep input order."""
        if not documents:
            return []
        workers = max(1, min(max_workers or self.config.max_workers, len(documents)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.process, documents))


def extract_cards(
    raw_text: str,
    source: str = "text",
    rules: Optional[RuleSet] = None,
) -> List[CardCandidate]:
    return CardExtractor(rules).extract_text(raw_text, source)


__all__ = [
    "CardExtractor",
    "CardRejectedError",
    "ExtractionReport",
    "NoCardsError",
    "extract_cards",
    "normalize_whitespace",
]
