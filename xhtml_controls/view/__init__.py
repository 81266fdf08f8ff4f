"""Control markup and tree-backed view adapters."""

from .builder import (
    CONTROL_BAR_ID,
    COPY_BUTTON_ID,
    build_copy_button,
    build_navigation_controls,
    inject_controls,
    stamp_page_anchors,
)
from .tree import NOTICE_ID, TreeEffectApplier, TreeNoticeRenderer, merge_style

__all__ = [
    "CONTROL_BAR_ID",
    "COPY_BUTTON_ID",
    "NOTICE_ID",
    "TreeEffectApplier",
    "TreeNoticeRenderer",
    "build_copy_button",
    "build_navigation_controls",
    "inject_controls",
    "merge_style",
    "stamp_page_anchors",
]
