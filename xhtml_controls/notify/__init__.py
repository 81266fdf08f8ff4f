"""Clipboard backends and transient notices."""

from .clipboard import BaseClipboard, ClipboardError, PyperclipClipboard
from .notice import (
    DISPLAY_SECONDS,
    FADE_SECONDS,
    Notice,
    NoticeBoard,
    NoticeRenderer,
    NoticeState,
)
from .sink import ClipboardSink

__all__ = [
    "BaseClipboard",
    "ClipboardError",
    "ClipboardSink",
    "PyperclipClipboard",
    "DISPLAY_SECONDS",
    "FADE_SECONDS",
    "Notice",
    "NoticeBoard",
    "NoticeRenderer",
    "NoticeState",
]
