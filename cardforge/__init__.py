"""
cardforge - knowledge card extraction.

Turns plain text and spreadsheet rows into short, classified cards using a
configurable, versioned rule set.
"""

from cardforge.config import ExtractionConfig, load_config
from cardforge.core.types import CardCandidate, CardForgeError, CardType, Provenance, TextSection
from cardforge.extraction import CardExtractor, CardRejectedError, ExtractionReport, NoCardsError
from cardforge.rules import (
    RuleSet,
    RuleSetCache,
    RuleSetValidationError,
    YamlRuleStore,
    default_rule_set,
    validate_rules,
)
from cardforge.sources import DocumentInput, UnsupportedInputError, load_document

__version__ = "0.1.0"

__all__ = [
    "CardCandidate",
    "CardExtractor",
    "CardForgeError",
    "CardRejectedError",
    "CardType",
    "DocumentInput",
    "ExtractionConfig",
    "ExtractionReport",
    "NoCardsError",
    "Provenance",
    "RuleSet",
    "RuleSetCache",
    "RuleSetValidationError",
    "TextSection",
    "UnsupportedInputError",
    "YamlRuleStore",
    "default_rule_set",
    "load_config",
    "load_document",
    "validate_rules",
]
