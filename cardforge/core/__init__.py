"""Core types shared by the rules and extraction packages."""

from .types import (
    DEFAULT_CATEGORY,
    GENERATED_BY,
    TABULAR_CATEGORY,
    CardCandidate,
    CardForgeError,
    CardType,
    Provenance,
    SchemaColumn,
    StructuredRow,
    TextSection,
    generic_column_name,
    truncate,
)

__all__ = [
    "CardCandidate",
    "CardForgeError",
    "CardType",
    "Provenance",
    "SchemaColumn",
    "StructuredRow",
    "TextSection",
    "DEFAULT_CATEGORY",
    "GENERATED_BY",
    "TABULAR_CATEGORY",
    "generic_column_name",
    "truncate",
]
