"""Whole-document text extraction for the copy-all action."""

from .models import CopyOutcome, ShowNotice, SinkEffect, WriteClipboard
from .text_extractor import (
    NO_TEXT_MESSAGE,
    copied_message,
    extract_all_pages_text,
    extract_pages,
    on_copy_requested,
    page_label,
    serialize_page,
)

__all__ = [
    "CopyOutcome",
    "ShowNotice",
    "SinkEffect",
    "WriteClipboard",
    "NO_TEXT_MESSAGE",
    "copied_message",
    "extract_all_pages_text",
    "extract_pages",
    "on_copy_requested",
    "page_label",
    "serialize_page",
]
