"""Page navigation: state, commands, effects and the navigator."""

from .applier import BaseEffectApplier
from .models import (
    NEXT_CONTROL_ID,
    PAGE_INPUT_ID,
    PREV_CONTROL_ID,
    Effect,
    NavigateCommand,
    NavigationState,
    ScrollTo,
    SetControlState,
    SetFieldValue,
)
from .navigator import (
    PageNavigator,
    clamp_page,
    control_effects,
    on_field_edited,
    on_field_submitted,
    on_navigate,
)

__all__ = [
    "BaseEffectApplier",
    "Effect",
    "NavigateCommand",
    "NavigationState",
    "PageNavigator",
    "ScrollTo",
    "SetControlState",
    "SetFieldValue",
    "NEXT_CONTROL_ID",
    "PAGE_INPUT_ID",
    "PREV_CONTROL_ID",
    "clamp_page",
    "control_effects",
    "on_field_edited",
    "on_field_submitted",
    "on_navigate",
]
