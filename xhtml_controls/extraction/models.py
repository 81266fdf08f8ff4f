"""
Data models for the copy-all action.

A copy request produces a list of sink effects rather than touching the
clipboard directly, so the caller decides how they are carried out.
"""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class WriteClipboard:
    """Best-effort clipboard write."""

    text: str


@dataclass(frozen=True)
class ShowNotice:
    """Transient user notice; ``is_error`` selects the error styling."""

    message: str
    is_error: bool = False


SinkEffect = Union[WriteClipboard, ShowNotice]


@dataclass
class CopyOutcome:
    """
    Result of serializing the whole document for the clipboard.

    ``pages_processed`` counts the page containers walked, which is
    what the success notice reports (not the character count).
    """

    text: str
    pages_processed: int
    effects: List[SinkEffect] = field(default_factory=list)

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())

    @property
    def notice(self) -> ShowNotice:
        for effect in self.effects:
            if isinstance(effect, ShowNotice):
                return effect
        raise ValueError("Copy outcome carries no notice")
