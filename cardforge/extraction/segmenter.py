"""Split raw document text into classification units."""

from typing import Iterator, List

from cardforge.core.types import TextSection

from .patterns import PARAGRAPH_BREAK, SENTENCE_BREAK

DEFAULT_MAX_SECTION_LENGTH = 500


class Segmenter:
    """
    Paragraph-first text segmentation.

    Text is split on blank lines; a paragraph longer than
    ``max_section_length`` is split again at sentence ends. Output order
    follows the source.

    Example:
        >>> sections = list(Segmenter().segment("First part.\\n\\nSecond part."))
        >>> [s.location for s in sections]
        ['Paragraph 1 of 2', 'Paragraph 2 of 2']
    """

    def __init__(self, max_section_length: int = DEFAULT_MAX_SECTION_LENGTH):
        self.max_section_length = max_section_length

    def split(self, raw_text: str) -> List[str]:
        """Section texts, trimmed, without empty parts."""
        if not raw_text:
            return []

        text = raw_text.replace("\r\n", "\n").replace("\r", "\n")
        parts: List[str] = []
        for paragraph in PARAGRAPH_BREAK.split(text):
            if len(paragraph) > self.max_section_length:
                parts.extend(SENTENCE_BREAK.split(paragraph))
            else:
                parts.append(paragraph)

        return [part.strip() for part in parts if part.strip()]

    def segment(self, raw_text: str) -> Iterator[TextSection]:
        """Yield TextSections with 1-based index and total count."""
        parts = self.split(raw_text)
        total = len(parts)
        for index, part in enumerate(parts, start=1):
            yield TextSection(text=part, index=index, total=total)


def segment(raw_text: str, max_section_length: int = DEFAULT_MAX_SECTION_LENGTH) -> Iterator[TextSection]:
    return Segmenter(max_section_length).segment(raw_text)


__all__ = ["Segmenter", "segment", "DEFAULT_MAX_SECTION_LENGTH"]
