"""
Data models for page navigation: state, commands and effects.

Effects are plain descriptions of what the view should do.  The
navigator never touches the view itself; an effect applier does.
"""

from dataclasses import dataclass
from typing import Optional

from ocrdoc.page.markup import parse_int

PREV_CONTROL_ID = "page-nav-prev"
NEXT_CONTROL_ID = "page-nav-next"
PAGE_INPUT_ID = "page-nav-input"


@dataclass(frozen=True)
class NavigationState:
    """
    Current navigation position.

    ``field_text`` is the raw content of the page-number input, which
    can drift from ``current_page`` while the user is typing.
    """

    current_page: int = 1
    page_count: int = 0
    field_text: str = "1"

    @property
    def field_page(self) -> Optional[int]:
        """The page typed into the input, or None if unparsable."""
        return parse_int(self.field_text)

    @property
    def displayed_page(self) -> int:
        """Base for relative moves; an unreadable field counts as page 1."""
        page = self.field_page
        return page if page is not None else 1

    @property
    def can_go_back(self) -> bool:
        return self.current_page > 1

    @property
    def can_go_forward(self) -> bool:
        return self.current_page < self.page_count


@dataclass(frozen=True)
class NavigateCommand:
    """Go to an absolute page, or move by a relative offset."""

    page_or_offset: int
    is_relative: bool = False

    @classmethod
    def goto(cls, page: int) -> "NavigateCommand":
        return cls(page, is_relative=False)

    @classmethod
    def previous(cls) -> "NavigateCommand":
        return cls(-1, is_relative=True)

    @classmethod
    def next(cls) -> "NavigateCommand":
        return cls(1, is_relative=True)


@dataclass(frozen=True)
class Effect:
    """Base class for view side effects."""


@dataclass(frozen=True)
class SetFieldValue(Effect):
    value: str
    control_id: str = PAGE_INPUT_ID


@dataclass(frozen=True)
class ScrollTo(Effect):
    anchor_id: str


@dataclass(frozen=True)
class SetControlState(Effect):
    control_id: str
    enabled: bool
