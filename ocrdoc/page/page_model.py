"""
Page model for rendered OCR documents.
Wraps a single page container node and provides structured text access.
"""

from typing import List, Optional

from .markup import (
    declared_page_number,
    find_segment_nodes,
    find_word_nodes,
    node_text,
)
from .models import PageInfo, SegmentInfo, WordInfo


class PageModel:
    """
    Lightweight page model over one ``section.win11OneOcrPage`` node.

    The segment/word structure is built lazily on first access, so
    counting or navigating a long document never walks page contents.
    """

    def __init__(self, node, page_index: int):
        self.node = node
        self.page_index = page_index

        # Lazy-loaded text structure
        self._info: Optional[PageInfo] = None

    @property
    def declared_number(self) -> Optional[int]:
        """The page's own ``pageNum`` ordinal, if present and parsable."""
        return declared_page_number(self.node)

    @property
    def page_number(self) -> int:
        """Display number: declared ordinal, else position + 1."""
        declared = self.declared_number
        return declared if declared is not None else self.page_index + 1

    @property
    def anchor_id(self) -> Optional[str]:
        return self.node.get("id")

    @property
    def info(self) -> PageInfo:
        """Get the page text structure, building it if necessary."""
        if self._info is None:
            self._info = self._build_info()
        return self._info

    @property
    def segments(self) -> List[SegmentInfo]:
        return self.info.segments

    @property
    def text(self) -> str:
        return self.info.text

    def _build_info(self) -> PageInfo:
        info = PageInfo(
            page_index=self.page_index,
            declared_number=self.declared_number,
            anchor_id=self.anchor_id,
        )
        for seg_idx, seg_node in enumerate(find_segment_nodes(self.node)):
            segment = SegmentInfo(segment_index=seg_idx)
            for word_idx, word_node in enumerate(find_word_nodes(seg_node)):
                segment.words.append(
                    WordInfo(
                        text=node_text(word_node),
                        word_index=word_idx,
                        segment_index=seg_idx,
                        page_index=self.page_index,
                    )
                )
            info.segments.append(segment)
        return info

    def __repr__(self) -> str:
        return f"PageModel(index={self.page_index}, number={self.page_number})"
