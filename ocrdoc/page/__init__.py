"""
Page structure for rendered OCR documents.
Node lookups, text models and the lazy page model.
"""

from .markup import (
    anchor_id,
    declared_page_number,
    find_anchor,
    find_page_nodes,
    find_segment_nodes,
    find_word_nodes,
    parse_int,
)
from .models import PageInfo, SegmentInfo, WordInfo
from .page_model import PageModel

__all__ = [
    "PageModel",
    "PageInfo",
    "SegmentInfo",
    "WordInfo",
    "anchor_id",
    "declared_page_number",
    "find_anchor",
    "find_page_nodes",
    "find_segment_nodes",
    "find_word_nodes",
    "parse_int",
]
