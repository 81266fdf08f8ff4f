"""
Apply navigation effects and notice changes to an lxml document tree.
"""

import logging
from typing import Dict, List, Optional

from ocrdoc.page.markup import find_body, find_by_id
from xhtml_controls.navigation.applier import BaseEffectApplier
from xhtml_controls.notify.notice import Notice, NoticeState

from .builder import make_element

logger = logging.getLogger(__name__)

NOTICE_ID = "copy-notification"

_DISABLED_STYLE = {"opacity": "0.5", "cursor": "not-allowed"}
_ENABLED_STYLE = {"opacity": "1", "cursor": "pointer"}
_FADING_STYLE = {"opacity": "0", "transform": "translateX(20px)"}


def merge_style(style: Optional[str], updates: Dict[str, str]) -> str:
    """Overwrite individual declarations of an inline ``style`` value."""
    declarations: Dict[str, str] = {}
    for part in (style or "").split(";"):
        name, sep, value = part.partition(":")
        if sep and name.strip():
            declarations[name.strip()] = value.strip()
    declarations.update(updates)
    return "; ".join(f"{k}: {v}" for k, v in declarations.items()) + ";"


class TreeEffectApplier(BaseEffectApplier):
    """
    Navigation effects against the control markup in a document tree.

    A static tree cannot scroll, so scrolling records the anchor it
    would have moved to in ``scrolled_to``.
    """

    def __init__(self, root):
        self.root = root
        self.scrolled_to: Optional[str] = None
        self.scroll_history: List[str] = []

    def set_field_value(self, control_id: str, value: str) -> None:
        field = find_by_id(self.root, control_id)
        if field is None:
            logger.debug("Control %s not present, value not written", control_id)
            return
        field.set("value", value)

    def scroll_into_view(self, anchor_id: str) -> bool:
        if find_by_id(self.root, anchor_id) is None:
            return False
        self.scrolled_to = anchor_id
        self.scroll_history.append(anchor_id)
        return True

    def set_control_enabled(self, control_id: str, enabled: bool) -> None:
        control = find_by_id(self.root, control_id)
        if control is None:
            logger.debug("Control %s not present", control_id)
            return
        if enabled:
            control.attrib.pop("disabled", None)
        else:
            control.set("disabled", "disabled")
        control.set(
            "style",
            merge_style(
                control.get("style"), _ENABLED_STYLE if enabled else _DISABLED_STYLE
            ),
        )


class TreeNoticeRenderer:
    """
    Mirrors notice state into a ``div#copy-notification`` element.

    Register with :meth:`NoticeBoard.add_renderer`.
    """

    def __init__(self, root):
        self.root = root
        self._elements: Dict[int, object] = {}

    def __call__(self, notice: Notice) -> None:
        if notice.state is NoticeState.VISIBLE:
            self._insert(notice)
        elif notice.state is NoticeState.FADING:
            element = self._elements.get(notice.serial)
            if element is not None and element.getparent() is not None:
                element.set("style", merge_style(element.get("style"), _FADING_STYLE))
        else:
            element = self._elements.pop(notice.serial, None)
            if element is not None and element.getparent() is not None:
                element.getparent().remove(element)

    def _insert(self, notice: Notice) -> None:
        stale = find_by_id(self.root, NOTICE_ID)
        if stale is not None and stale.getparent() is not None:
            stale.getparent().remove(stale)

        kind = "error" if notice.is_error else "success"
        element = make_element(
            self.root,
            "div",
            notice.message,
            id=NOTICE_ID,
            class_=f"copy-notification {kind}",
            role="status",
        )
        host = find_body(self.root)
        if host is None:
            host = self.root
        host.append(element)
        self._elements[notice.serial] = element
