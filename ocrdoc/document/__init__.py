"""Document loading and page-count resolution."""

from .xhtml_reader import (
    parse_document,
    parse_document_string,
    resolve_page_count,
)

__all__ = [
    "parse_document",
    "parse_document_string",
    "resolve_page_count",
]
