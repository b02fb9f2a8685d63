"""
Spreadsheet row extraction.

Tabular input bypasses segmentation and classification: each data row
becomes one "Data" card built from "Column: value" pairs. Rows that repeat the
header, are mostly empty or only hold a couple of numbers are dropped.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Optional, Sequence

from cardforge.core.types import (
    TABULAR_CATEGORY,
    CardCandidate,
    CardType,
    Provenance,
    SchemaColumn,
    StructuredRow,
    generic_column_name,
    truncate,
)

from .patterns import HEADER_NAME_NOISE, NUMERIC_CELL, WHITESPACE_RUN
from .validator import is_meaningful

logger = logging.getLogger(__name__)

MAX_ROW_CONTENT_LENGTH = 9500
TRUNCATION_MARKER = "... [Content truncated]"
MAX_FIRST_COLUMN_TITLE = 120
MAX_TITLE_PART = 80
MAX_TITLE_LENGTH = 200
MIN_FILLED_RATIO = 0.2
MIN_ROW_CONTENT_LENGTH = 10
SNIPPET_LENGTH = 500
MAX_ROW_TAGS = 10


def cell_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def build_schema(header_row: Sequence[Any]) -> List[SchemaColumn]:
    """Columns from a header row; blank headers become Column_<n>."""
    return [
        SchemaColumn(name=cell_text(header) or generic_column_name(index), index=index)
        for index, header in enumerate(header_row or [])
    ]


def structure_row(row_cells: Sequence[Any], schema: Sequence[SchemaColumn]) -> StructuredRow:
    """Map column names to raw cell values; missing cells become ''."""
    row: StructuredRow = {}
    for column in schema:
        value = row_cells[column.index] if column.index < len(row_cells) else None
        row[column.name] = "" if value is None else value
    return row


def is_header_like_row(
    row_cells: Sequence[Any],
    schema: Sequence[SchemaColumn],
    header_row: Optional[Sequence[Any]] = None,
) -> bool:
    """
    Detect a data row that repeats the header.

    Every non-empty cell equal to its column name or header cell scores 1
    (for each), and containing a column name longer than two characters
    scores 0.5. The row is header-like once the score reaches
    min(2, number of non-empty cells).
    """
    header_cells = [cell_text(h).lower() for h in (header_row or [])]
    matches = 0.0
    non_empty = 0
    for i in range(min(len(row_cells), len(schema))):
        value = cell_text(row_cells[i]).lower()
        if not value:
            continue
        non_empty += 1
        name = schema[i].name.strip().lower()
        header_cell = header_cells[i] if i < len(header_cells) else ""
        if name and value == name:
            matches += 1
        if header_cell and value == header_cell:
            matches += 1
        if len(name) > 2 and name in value:
            matches += 0.5
    if non_empty == 0:
        return False
    return matches >= min(2, non_empty)


def looks_like_column_header(value: str, schema: Sequence[SchemaColumn]) -> bool:
    """True when value is (ignoring case, spaces, '_' and '-') one of the column names."""
    if not isinstance(value, str):
        return False
    v = value.strip().lower()
    if len(v) < 2 or len(v) > 60:
        return False
    squashed = HEADER_NAME_NOISE.sub("", v)
    for column in schema:
        name = column.name.strip().lower()
        if name and (v == name or squashed == HEADER_NAME_NOISE.sub("", name)):
            return True
    return False


def build_row_content(row: StructuredRow, schema: Sequence[SchemaColumn]) -> str:
    """'Column: value' blocks separated by blank lines; generic columns give the bare value."""
    parts = []
    for column in schema:
        value = cell_text(row.get(column.name))
        if not value:
            continue
        parts.append(value if column.is_generic else f"{column.name}: {value}")
    return "\n\n".join(parts).strip()


def is_meaningful_row(row: StructuredRow, schema: Sequence[SchemaColumn], content: str) -> bool:
    values = [cell_text(v) for v in row.values()]
    values = [v for v in values if v]
    if not values:
        return False
    if len(values) / max(1, len(row)) < MIN_FILLED_RATIO:
        return False
    if not content or len(content) < MIN_ROW_CONTENT_LENGTH:
        return False
    if looks_like_column_header(content, schema):
        return False
    if not is_meaningful(content, MIN_ROW_CONTENT_LENGTH):
        return False
    numeric = [v for v in values if NUMERIC_CELL.match(v)]
    if len(values) <= 2 and len(numeric) == len(values):
        return False
    return True


def row_title(row: StructuredRow, schema: Sequence[SchemaColumn], sheet_name: str, row_number: int) -> str:
    """First usable cell value(s), else "<Sheet> – Row <N>"; at most 200 characters."""
    fallback = truncate(f"{sheet_name} – Row {row_number}", MAX_TITLE_LENGTH)
    if not schema:
        return fallback

    first = cell_text(row.get(schema[0].name))
    if first and len(first) <= MAX_FIRST_COLUMN_TITLE and not looks_like_column_header(first, schema):
        return first

    parts = []
    for column in schema[:2]:
        value = cell_text(row.get(column.name))
        if value and len(value) <= MAX_TITLE_PART and not looks_like_column_header(value, schema):
            parts.append(value)
    return " – ".join(parts) if parts else fallback


def row_tags(schema: Sequence[SchemaColumn], sheet_name: str, row_number: int) -> List[str]:
    tags: List[str] = []
    candidates = [WHITESPACE_RUN.sub("-", c.name.lower()) for c in schema if not c.is_generic]
    candidates += [sheet_name.lower(), f"row-{row_number}"]
    for tag in candidates:
        if tag and tag not in tags:
            tags.append(tag)
    return tags[:MAX_ROW_TAGS]


def row_snippet(row: StructuredRow) -> str:
    serialized = json.dumps(row, ensure_ascii=False, separators=(",", ":"), default=str)
    if len(serialized) > SNIPPET_LENGTH:
        return serialized[:SNIPPET_LENGTH] + "..."
    return serialized


class TabularRowExtractor:
    """
    Converts spreadsheet rows into cards.

    Example:
        >>> extractor = TabularRowExtractor()
        >>> schema = build_schema(["Name", "Age"])
        >>> card = extractor.extract_row(["Alice", "34"], 2, "People", schema, ["Name", "Age"])
        >>> card.title
        'Alice'
    """

    def extract_row(
        self,
        row_cells: Sequence[Any],
        row_number: int,
        sheet_name: str,
        schema: Sequence[SchemaColumn],
        header_row: Optional[Sequence[Any]] = None,
        source: Optional[str] = None,
    ) -> Optional[CardCandidate]:
        """
        Build a card from one data row.

        Args:
            row_cells: Raw cell values
            row_number: 1-based spreadsheet row number
            sheet_name: Sheet the row belongs to
            schema: Columns from build_schema()
            header_row: Original header cells (for duplicate-header detection)
            source: Originating file name

        Returns:
            CardCandidate, or None when the row is rejected
        """
        row = structure_row(row_cells, schema)

        if is_header_like_row(row_cells, schema, header_row):
            logger.debug("%s!Row %d repeats the header, skipping", sheet_name, row_number)
            return None

        content = build_row_content(row, schema)
        if not content:
            return None
        if not is_meaningful_row(row, schema, content):
            logger.debug("%s!Row %d has no meaningful content, skipping", sheet_name, row_number)
            return None

        if len(content) > MAX_ROW_CONTENT_LENGTH:
            content = content[:MAX_ROW_CONTENT_LENGTH] + TRUNCATION_MARKER

        return CardCandidate(
            title=row_title(row, schema, sheet_name, row_number),
            content=content,
            type=CardType.CONCEPT,
            category=TABULAR_CATEGORY,
            tags=row_tags(schema, sheet_name, row_number),
            source=source or sheet_name,
            provenance=Provenance(
                location=f"{sheet_name}!Row {row_number}",
                snippet=row_snippet(row),
            ),
            metadata={
                "sheet": sheet_name,
                "row": row_number,
                "columns": len(schema),
                "schema": [column.name for column in schema],
                "structured_data": row,
            },
        )

    def extract_sheet(
        self,
        sheet_name: str,
        rows: Sequence[Sequence[Any]],
        source: Optional[str] = None,
    ) -> List[CardCandidate]:
        """
        Extract cards from every data row of a sheet (rows[0] is the header).

        A row that raises is logged and skipped; the rest of the sheet is
        still processed.
        """
        if not rows:
            logger.debug("Skipping empty sheet: %s", sheet_name)
            return []

        header_row = list(rows[0] or [])
        schema = build_schema(header_row)
        cards: List[CardCandidate] = []

        for offset, row_cells in enumerate(rows[1:], start=2):
            if not row_cells:
                continue
            try:
                card = self.extract_row(list(row_cells), offset, sheet_name, schema, header_row, source)
            except Exception:
                logger.warning("Failed to extract %s!Row %d, skipping", sheet_name, offset, exc_info=True)
                continue
            if card is not None:
                cards.append(card)

        logger.debug("Sheet %s: %d cards from %d data rows", sheet_name, len(cards), len(rows) - 1)
        return cards

    def extract_sheets(
        self,
        sheets: Iterable[tuple],
        source: Optional[str] = None,
    ) -> List[CardCandidate]:
        cards: List[CardCandidate] = []
        for sheet_name, rows in sheets:
            cards.extend(self.extract_sheet(sheet_name, rows, source))
        return cards


__all__ = [
    "TabularRowExtractor",
    "build_schema",
    "structure_row",
    "is_header_like_row",
    "looks_like_column_header",
    "build_row_content",
    "is_meaningful_row",
    "row_title",
    "row_tags",
    "row_snippet",
]
