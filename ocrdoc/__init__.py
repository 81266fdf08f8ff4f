"""
Document model for rendered OCR output.
Parsing, page-count resolution and structured page text. No UI state.
"""

from .document import (
    parse_document,
    parse_document_string,
    resolve_page_count,
)
from .page import PageInfo, PageModel, SegmentInfo, WordInfo

__all__ = [
    "parse_document",
    "parse_document_string",
    "resolve_page_count",
    "PageModel",
    "PageInfo",
    "SegmentInfo",
    "WordInfo",
]
