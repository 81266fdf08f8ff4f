"""
Transient copy notices.

A notice moves through three states::

    VISIBLE --(display_seconds)--> FADING --(fade_seconds)--> REMOVED

There is a single notice slot.  Showing a new notice removes the
current one on the spot.  Both transitions of every notice are queued
on a ``sched.scheduler`` when it is shown and are never cancelled;
each one checks that its notice still exists before acting, so timers
left behind by a replaced notice do nothing when they fire.
"""

import logging
import sched
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

DISPLAY_SECONDS: float = 3.0
FADE_SECONDS: float = 0.3


class NoticeState(Enum):
    VISIBLE = auto()
    FADING = auto()
    REMOVED = auto()


@dataclass
class Notice:
    """One transient notice."""

    message: str
    is_error: bool = False
    state: NoticeState = NoticeState.VISIBLE
    serial: int = 0

    @property
    def is_attached(self) -> bool:
        """Whether the notice is still on screen (visible or fading)."""
        return self.state is not NoticeState.REMOVED

    def __repr__(self) -> str:
        kind = "error" if self.is_error else "success"
        return f"Notice(#{self.serial}, {kind}, {self.state.name}, '{self.message}')"


# Called with the notice after every state change
NoticeRenderer = Callable[[Notice], None]


class NoticeBoard:
    """
    Owns the single notice slot and its timers.

    Usage::

        board = NoticeBoard()
        board.show("Copied text from 3 pages to clipboard")
        board.run_pending()   # fire whatever is due, without blocking
        board.wait()          # or sleep until every timer has fired
    """

    def __init__(
        self,
        display_seconds: float = DISPLAY_SECONDS,
        fade_seconds: float = FADE_SECONDS,
        scheduler: Optional[sched.scheduler] = None,
    ):
        self.display_seconds = display_seconds
        self.fade_seconds = fade_seconds
        self.scheduler = scheduler or sched.scheduler(time.monotonic, time.sleep)
        self._current: Optional[Notice] = None
        self._renderers: List[NoticeRenderer] = []
        self._serial = 0

    def add_renderer(self, renderer: NoticeRenderer) -> None:
        self._renderers.append(renderer)

    @property
    def current(self) -> Optional[Notice]:
        """The notice occupying the slot, if any."""
        return self._current

    def show(self, message: str, is_error: bool = False) -> Notice:
        """
        Display *message*, replacing any notice already on screen.

        Returns:
            The new notice.
        """
        if self._current is not None:
            self._remove(self._current)

        self._serial += 1
        notice = Notice(message=message, is_error=is_error, serial=self._serial)
        self._current = notice
        self._render(notice)

        self.scheduler.enter(self.display_seconds, 0, self._fade, (notice,))
        self.scheduler.enter(
            self.display_seconds + self.fade_seconds, 0, self._expire, (notice,)
        )
        return notice

    def run_pending(self) -> None:
        """Fire every transition that is already due."""
        self.scheduler.run(blocking=False)

    def wait(self) -> None:
        """Block until every queued transition has fired."""
        self.scheduler.run()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _fade(self, notice: Notice) -> None:
        if notice.state is not NoticeState.VISIBLE:
            return
        notice.state = NoticeState.FADING
        self._render(notice)

    def _expire(self, notice: Notice) -> None:
        if not notice.is_attached:
            return
        self._remove(notice)

    def _remove(self, notice: Notice) -> None:
        notice.state = NoticeState.REMOVED
        if self._current is notice:
            self._current = None
        self._render(notice)

    def _render(self, notice: Notice) -> None:
        logger.debug("%r", notice)
        for renderer in self._renderers:
            renderer(notice)
