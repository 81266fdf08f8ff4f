"""File-level helpers for rendered OCR documents."""

from .xhtml_adapter import XHTMLAdapter, extract_all_pages, get_page_count, open_document

__all__ = [
    "XHTMLAdapter",
    "extract_all_pages",
    "get_page_count",
    "open_document",
]
