"""
Interactive controls for a rendered OCR document.

Wires the pieces together:

1. **View**: optionally inject the navigation group and copy-all
   button into the tree, and stamp missing page anchors.
2. **Navigation**: route prev/next clicks and Enter on the page input
   to a :class:`PageNavigator` whose effects land on the tree.
3. **Copy all**: serialize every page, hand the text to the clipboard
   sink and show a transient notice.

Usage::

    from xhtml_controls.controller import OcrControls, ControlsConfig

    controls = OcrControls(root, ControlsConfig(copy_to_clipboard=False))
    controls.handle_click("page-nav-next")
    result = controls.on_copy_requested()
    print(result.summary())
"""

import logging
import sched
import time
from dataclasses import dataclass
from typing import Optional

from ocrdoc.document.xhtml_reader import resolve_page_count
from xhtml_controls.extraction.text_extractor import on_copy_requested
from xhtml_controls.navigation.applier import BaseEffectApplier
from xhtml_controls.navigation.models import (
    NEXT_CONTROL_ID,
    PREV_CONTROL_ID,
    NavigateCommand,
    NavigationState,
)
from xhtml_controls.navigation.navigator import PageNavigator
from xhtml_controls.notify.clipboard import BaseClipboard, PyperclipClipboard
from xhtml_controls.notify.notice import DISPLAY_SECONDS, FADE_SECONDS, NoticeBoard
from xhtml_controls.notify.sink import ClipboardSink
from xhtml_controls.view.builder import COPY_BUTTON_ID, inject_controls
from xhtml_controls.view.tree import TreeEffectApplier, TreeNoticeRenderer

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------


@dataclass
class ControlsConfig:
    """
    Tuneable parameters for the document controls.

    Attributes:
        display_seconds:   How long a notice stays fully visible.
        fade_seconds:      Fade-out duration before the notice is removed.
        copy_to_clipboard: Write to the system clipboard (pyperclip) when
                           no explicit clipboard backend is given.
        inject_view:       Insert the control markup into the tree.
        disable_tqdm:      Suppress progress bars in batch runs.
    """

    display_seconds: float = DISPLAY_SECONDS
    fade_seconds: float = FADE_SECONDS
    copy_to_clipboard: bool = True
    inject_view: bool = True
    disable_tqdm: bool = False


# ------------------------------------------------------------------
# Result
# ------------------------------------------------------------------


@dataclass
class CopyResult:
    """Summary of one copy-all action."""

    text: str = ""
    pages_processed: int = 0
    write_attempted: bool = False
    notice_message: str = ""
    is_error: bool = False
    elapsed_seconds: float = 0.0

    @property
    def char_count(self) -> int:
        return len(self.text)

    def summary(self) -> str:
        """Format a human-readable summary of the copy action."""
        status = "NOTHING TO COPY" if self.is_error else "COPIED"
        return (
            f"{'=' * 60}\n"
            f"{status}\n"
            f"{'=' * 60}\n"
            f"  Pages:      {self.pages_processed}\n"
            f"  Characters: {self.char_count}\n"
            f"  Notice:     {self.notice_message}\n"
            f"  Time:       {self.elapsed_seconds:.3f}s\n"
            f"{'=' * 60}"
        )


# ------------------------------------------------------------------
# Controller
# ------------------------------------------------------------------


class OcrControls:
    """
    Page navigation and copy-all for one document tree.

    All handlers run to completion synchronously.  Notice timers are
    queued on :attr:`notices` and fire when the caller drives its
    scheduler (``notices.run_pending()`` / ``notices.wait()``).
    """

    def __init__(
        self,
        root,
        config: Optional[ControlsConfig] = None,
        clipboard: Optional[BaseClipboard] = None,
        applier: Optional[BaseEffectApplier] = None,
        scheduler: Optional[sched.scheduler] = None,
    ):
        self.root = root
        self.config = config or ControlsConfig()

        if self.config.inject_view:
            inject_controls(root)

        self.applier = applier or TreeEffectApplier(root)

        self.notices = NoticeBoard(
            display_seconds=self.config.display_seconds,
            fade_seconds=self.config.fade_seconds,
            scheduler=scheduler,
        )
        self.notices.add_renderer(TreeNoticeRenderer(root))

        if clipboard is None and self.config.copy_to_clipboard:
            clipboard = PyperclipClipboard()
        self.sink = ClipboardSink(clipboard, self.notices)

        self.navigator = PageNavigator(self.resolve_page_count, self.applier)
        if self.config.inject_view and self.navigator.page_count > 1:
            self.navigator.refresh()

    def resolve_page_count(self) -> int:
        """Shared page-count resolution for navigation and display."""
        return resolve_page_count(self.root)

    @property
    def state(self) -> NavigationState:
        return self.navigator.state

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def on_navigate(self, command: NavigateCommand) -> NavigationState:
        """Run a navigation command and return the resulting state."""
        self.navigator.dispatch(command)
        return self.navigator.state

    def edit_page_field(self, text: str) -> None:
        self.navigator.edit_field(text)

    def handle_key(self, key: str) -> None:
        """Key press on the page-number input."""
        self.navigator.handle_key(key)

    def handle_click(self, control_id: str) -> None:
        """Click on one of the injected controls."""
        if control_id == PREV_CONTROL_ID:
            self.navigator.previous()
        elif control_id == NEXT_CONTROL_ID:
            self.navigator.next()
        elif control_id == COPY_BUTTON_ID:
            self.on_copy_requested()
        else:
            logger.debug("Click on unknown control %s ignored", control_id)

    # ------------------------------------------------------------------
    # Copy all
    # ------------------------------------------------------------------

    def on_copy_requested(self) -> CopyResult:
        """
        Serialize every page and hand the result to the sink.

        The success notice is shown once a write has been attempted;
        clipboard failures are logged by the sink and do not change it.
        """
        t0 = time.perf_counter()
        outcome = on_copy_requested(self.root)
        self.sink.apply(outcome.effects)

        notice = outcome.notice
        result = CopyResult(
            text=outcome.text,
            pages_processed=outcome.pages_processed,
            write_attempted=outcome.has_text,
            notice_message=notice.message,
            is_error=notice.is_error,
            elapsed_seconds=time.perf_counter() - t0,
        )
        logger.debug(
            "Copy request: %d pages, %d chars", result.pages_processed, result.char_count
        )
        return result

    def __repr__(self) -> str:
        return f"OcrControls({self.navigator!r})"
