"""
Page navigation: pure command handling plus a small stateful driver.

``on_navigate`` and friends take the current state and return the next
state together with the effects the view must apply.  ``PageNavigator``
owns the state, resolves the page count for every move and hands the
effects to an applier.
"""

import logging
from typing import Callable, List, Optional, Tuple

from ocrdoc.page.markup import anchor_id

from .applier import BaseEffectApplier
from .models import (
    NEXT_CONTROL_ID,
    PREV_CONTROL_ID,
    Effect,
    NavigateCommand,
    NavigationState,
    ScrollTo,
    SetControlState,
    SetFieldValue,
)

logger = logging.getLogger(__name__)

ENTER_KEY = "Enter"


def clamp_page(target: int, page_count: int) -> int:
    """Saturate *target* into ``[1, page_count]`` (1 when there are no pages)."""
    return max(1, min(target, page_count))


def control_effects(current_page: int, page_count: int) -> List[Effect]:
    """Enable/disable effects for the previous and next controls."""
    return [
        SetControlState(PREV_CONTROL_ID, enabled=current_page > 1),
        SetControlState(NEXT_CONTROL_ID, enabled=current_page < page_count),
    ]


def on_navigate(
    state: NavigationState,
    command: NavigateCommand,
    page_count: int,
) -> Tuple[NavigationState, List[Effect]]:
    """
    Resolve a navigation command against the current state.

    Relative commands move from the page shown in the input field
    (page 1 if the field is unreadable).  The target is always clamped
    into range; out-of-range requests saturate instead of failing.

    Args:
        state:      Current navigation state.
        command:    Absolute page or relative offset.
        page_count: Freshly resolved page count.

    Returns:
        ``(next_state, effects)``.  Effects are ordered: field value,
        scroll to anchor, previous control, next control.
    """
    if command.is_relative:
        target = state.displayed_page + command.page_or_offset
    else:
        target = command.page_or_offset

    target = clamp_page(target, page_count)

    next_state = NavigationState(
        current_page=target,
        page_count=page_count,
        field_text=str(target),
    )
    effects: List[Effect] = [
        SetFieldValue(str(target)),
        ScrollTo(anchor_id(target)),
    ]
    effects.extend(control_effects(target, page_count))
    return next_state, effects


def on_field_edited(state: NavigationState, text: str) -> NavigationState:
    """Record raw typing into the page-number input."""
    return NavigationState(
        current_page=state.current_page,
        page_count=state.page_count,
        field_text=text,
    )


def on_field_submitted(
    state: NavigationState, page_count: int
) -> Tuple[NavigationState, List[Effect]]:
    """
    Handle Enter on the page-number input.

    Unparsable input is ignored: the state is returned unchanged and no
    effects are produced.
    """
    page = state.field_page
    if page is None:
        return state, []
    return on_navigate(state, NavigateCommand.goto(page), page_count)


class PageNavigator:
    """
    Stateful page navigator.

    Usage::

        navigator = PageNavigator(lambda: resolve_page_count(root), applier)
        navigator.next()
        navigator.navigate(7)
        navigator.current_page  # -> 7 (or the last page, if fewer)
    """

    def __init__(
        self,
        page_count_source: Callable[[], int],
        applier: Optional[BaseEffectApplier] = None,
    ):
        self._page_count_source = page_count_source
        self._applier = applier
        self._state = NavigationState(page_count=page_count_source())

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def page_count(self) -> int:
        return self._state.page_count

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def dispatch(self, command: NavigateCommand) -> List[Effect]:
        """Run *command*, apply its effects and return them."""
        page_count = self._page_count_source()
        self._state, effects = on_navigate(self._state, command, page_count)
        logger.debug(
            "Navigated to page %d of %d", self._state.current_page, page_count
        )
        self._apply(effects)
        return effects

    def navigate(self, page_or_offset: int, is_relative: bool = False) -> None:
        """Go to a page (absolute) or move by an offset (relative)."""
        self.dispatch(NavigateCommand(page_or_offset, is_relative))

    def previous(self) -> None:
        self.dispatch(NavigateCommand.previous())

    def next(self) -> None:
        self.dispatch(NavigateCommand.next())

    def edit_field(self, text: str) -> None:
        """
        Record what the user typed into the page-number input.

        The typed text is written back to the input so the view and
        ``field_text`` agree before the edit is committed with Enter.
        """
        self._state = on_field_edited(self._state, text)
        self._apply([SetFieldValue(text)])

    def submit_field(self) -> None:
        """Navigate to the page typed into the input, if it is a number."""
        self._state, effects = on_field_submitted(
            self._state, self._page_count_source()
        )
        if not effects:
            logger.debug("Ignoring page input %r", self._state.field_text)
        self._apply(effects)

    def handle_key(self, key: str) -> None:
        """Key press on the page-number input; only Enter navigates."""
        if key == ENTER_KEY:
            self.submit_field()

    def refresh(self) -> None:
        """Re-apply the control state for the current page without moving."""
        self._state = NavigationState(
            current_page=self._state.current_page,
            page_count=self._page_count_source(),
            field_text=self._state.field_text,
        )
        self._apply(control_effects(self._state.current_page, self._state.page_count))

    def _apply(self, effects: List[Effect]) -> None:
        if self._applier is not None and effects:
            self._applier.apply(effects)

    def __repr__(self) -> str:
        return f"PageNavigator(page={self.current_page}/{self.page_count})"
