"""
Abstract base class for effect appliers.

Lets the navigator run against any view: the lxml tree in this
package, or a recording fake in tests.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from .models import Effect, ScrollTo, SetControlState, SetFieldValue

logger = logging.getLogger(__name__)


class BaseEffectApplier(ABC):
    """
    Common interface for everything that can apply navigation effects.

    Subclasses implement the three primitive operations; :meth:`apply`
    dispatches a sequence of effects to them in order.
    """

    @abstractmethod
    def set_field_value(self, control_id: str, value: str) -> None:
        """Write *value* into the input identified by *control_id*."""

    @abstractmethod
    def scroll_into_view(self, anchor_id: str) -> bool:
        """
        Scroll the element with id *anchor_id* into view.

        Returns:
            False when the anchor does not exist (nothing happens).
        """

    @abstractmethod
    def set_control_enabled(self, control_id: str, enabled: bool) -> None:
        """Enable or disable the control identified by *control_id*."""

    def apply(self, effects: Iterable[Effect]) -> None:
        """Apply *effects* in order."""
        for effect in effects:
            if isinstance(effect, SetFieldValue):
                self.set_field_value(effect.control_id, effect.value)
            elif isinstance(effect, ScrollTo):
                if not self.scroll_into_view(effect.anchor_id):
                    logger.debug("Anchor %s not found, scroll skipped", effect.anchor_id)
            elif isinstance(effect, SetControlState):
                self.set_control_enabled(effect.control_id, effect.enabled)
            else:
                raise TypeError(f"Unsupported effect: {effect!r}")
