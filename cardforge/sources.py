"""
Document sources.

Turns files on disk into the engine's input contract: either one block of
text or a list of (sheet_name, rows) pairs whose first row is the header.
Binary formats (PDF, Word, Excel) need an external decoder and are rejected
here; callers that have one can build a DocumentInput directly.
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

from cardforge.core.types import CardForgeError, generic_column_name

logger = logging.getLogger(__name__)

Sheet = Tuple[str, List[List[Any]]]

TEXT_SUFFIXES = {".txt", ".md"}
JSON_SUFFIXES = {".json"}
CSV_SUFFIXES = {".csv"}
IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg"}
DECODER_SUFFIXES = {
    ".pdf": "a PDF text extractor",
    ".docx": "a Word document converter",
    ".doc": "a Word document converter",
    ".xlsx": "a spreadsheet reader",
    ".xls": "a spreadsheet reader",
}

IMAGE_DESCRIPTION = (
    "This is an image file that may contain visual information, charts, diagrams, "
    "or other visual content that could be relevant for learning and reference purposes."
)


class UnsupportedInputError(CardForgeError):
    """File type cannot be turned into extraction input."""


@dataclass
class DocumentInput:
    """
    One document ready for extraction.

    Exactly one of ``text`` and ``sheets`` is set.
    """

    source: str
    text: Optional[str] = None
    sheets: Optional[List[Sheet]] = None

    @property
    def is_tabular(self) -> bool:
        return self.sheets is not None

    @classmethod
    def from_text(cls, text: str, source: str = "text") -> "DocumentInput":
        return cls(source=source, text=text)

    @classmethod
    def from_sheets(cls, sheets: Sequence[Sheet], source: str = "sheet") -> "DocumentInput":
        return cls(source=source, sheets=[(name, list(rows)) for name, rows in sheets])


def _image_description(path: Path) -> str:
    size_kb = path.stat().st_size / 1024
    return "\n".join(
        [
            f"Image: {path.stem}",
            f"File Type: {path.suffix.lstrip('.').upper()}",
            f"File Size: {size_kb:.2f} KB",
            f"Description: {IMAGE_DESCRIPTION}",
        ]
    )


def _read_csv(path: Path) -> List[List[str]]:
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return [row for row in csv.reader(f)]


def load_document(path: Union[str, Path]) -> DocumentInput:
    """
    Read a file into a DocumentInput.

    Args:
        path: File to read

    Returns:
        DocumentInput with text (txt, md, json, images) or sheets (csv)

    Raises:
        FileNotFoundError: If the file does not exist
        UnsupportedInputError: For binary formats and unknown file types
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    source = path.name

    if suffix in TEXT_SUFFIXES:
        return DocumentInput(source=source, text=path.read_text(encoding="utf-8"))

    if suffix in JSON_SUFFIXES:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return DocumentInput(source=source, text=json.dumps(data, indent=2, ensure_ascii=False))

    if suffix in CSV_SUFFIXES:
        return DocumentInput(source=source, sheets=[(path.stem, _read_csv(path))])

    if suffix in IMAGE_SUFFIXES:
        logger.info("Image input %s: using descriptive placeholder", source)
        return DocumentInput(source=source, text=_image_description(path))

    if suffix in DECODER_SUFFIXES:
        raise UnsupportedInputError(
            f"{source}: {suffix} files need {DECODER_SUFFIXES[suffix]}; "
            "decode the file first and pass the text or rows to the extractor"
        )

    raise UnsupportedInputError(f"Unsupported file type: {suffix or '(none)'}")


def sheets_as_text(sheets: Sequence[Sheet]) -> str:
    """
    Render tabular input as text, one "Column: value | ..." line per row.

    Used by `cardforge extract --as-text` to send a spreadsheet through text
    extraction instead of the row extractor.
    """
    blocks: List[str] = []
    for _, rows in sheets:
        if not rows:
            continue
        header = [str(h).strip() if h is not None else "" for h in rows[0]]
        for row in rows[1:]:
            pairs = []
            for i, value in enumerate(row or []):
                text = "" if value is None else str(value).strip()
                if not text:
                    continue
                name = header[i] if i < len(header) and header[i] else generic_column_name(i)
                pairs.append(f"{name}: {text}")
            if pairs:
                blocks.append(" | ".join(pairs))
    return "\n\n".join(blocks)


__all__ = [
    "DocumentInput",
    "UnsupportedInputError",
    "load_document",
    "sheets_as_text",
]
