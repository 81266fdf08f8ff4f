"""
Clipboard/notification sink used by the copy-all action.
"""

import logging
from typing import Iterable, Optional

from xhtml_controls.extraction.models import ShowNotice, SinkEffect, WriteClipboard

from .clipboard import BaseClipboard, ClipboardError
from .notice import Notice, NoticeBoard

logger = logging.getLogger(__name__)


class ClipboardSink:
    """
    Receives serialized text and user notices.

    Clipboard writes are fire-and-forget: a failing backend is logged
    and the caller carries on as if the write had gone through.
    """

    def __init__(
        self,
        clipboard: Optional[BaseClipboard] = None,
        notices: Optional[NoticeBoard] = None,
    ):
        self.clipboard = clipboard
        self.notices = notices or NoticeBoard()

    def write_to_clipboard(self, text: str) -> None:
        """Best-effort copy of *text*; failures are only logged."""
        if self.clipboard is None:
            logger.debug("No clipboard backend configured, %d chars dropped", len(text))
            return
        try:
            self.clipboard.copy(text)
        except ClipboardError as e:
            logger.warning("Failed to copy: %s", e)
            return
        logger.debug(
            "Copied %d chars via %s", len(text), self.clipboard.backend_name
        )

    def show_notice(self, message: str, is_error: bool = False) -> Notice:
        return self.notices.show(message, is_error=is_error)

    def apply(self, effects: Iterable[SinkEffect]) -> None:
        """Carry out copy effects in order."""
        for effect in effects:
            if isinstance(effect, WriteClipboard):
                self.write_to_clipboard(effect.text)
            elif isinstance(effect, ShowNotice):
                self.show_notice(effect.message, effect.is_error)
            else:
                raise TypeError(f"Unsupported sink effect: {effect!r}")
