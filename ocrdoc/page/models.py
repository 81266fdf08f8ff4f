"""
Text structure data models for rendered OCR pages.

Mirrors the markup produced by the OCR renderer: a page section holds
segments, a segment holds words.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class WordInfo:
    """A single recognized word."""

    text: str
    word_index: int
    segment_index: int
    page_index: int


@dataclass
class SegmentInfo:
    """A run of words recognized as one unit (usually a line)."""

    words: List[WordInfo] = field(default_factory=list)
    segment_index: int = 0

    @property
    def text(self) -> str:
        return " ".join(w.text for w in self.words)

    @property
    def word_count(self) -> int:
        return len(self.words)


@dataclass
class PageInfo:
    """One page section of the document."""

    segments: List[SegmentInfo] = field(default_factory=list)
    page_index: int = 0  # 0-based position in the document
    declared_number: Optional[int] = None  # pageNum attribute, when parsable
    anchor_id: Optional[str] = None

    @property
    def page_number(self) -> int:
        """Display number: declared ordinal, else position + 1."""
        if self.declared_number is not None:
            return self.declared_number
        return self.page_index + 1

    @property
    def text(self) -> str:
        return "\n".join(s.text for s in self.segments)

    @property
    def header(self) -> str:
        return f"=== Page {self.page_number} ==="

    @property
    def all_words(self) -> List[WordInfo]:
        words = []
        for segment in self.segments:
            words.extend(segment.words)
        return words

    @property
    def word_count(self) -> int:
        return len(self.all_words)
