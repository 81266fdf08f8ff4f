"""
Control markup for rendered OCR documents.

Builds the page navigation group and the copy-all button and inserts
them into the document tree.  Only structure and ids are produced;
presentation is left to the document's stylesheet.
"""

import logging
from typing import Optional

from lxml import etree

from ocrdoc.document.xhtml_reader import resolve_page_count
from ocrdoc.page.markup import anchor_id, find_anchor, find_body, find_by_id, find_page_nodes
from xhtml_controls.navigation.models import (
    NEXT_CONTROL_ID,
    PAGE_INPUT_ID,
    PREV_CONTROL_ID,
)

logger = logging.getLogger(__name__)

CONTROL_BAR_ID = "top-control-bar"
COPY_BUTTON_ID = "copy-all-pages-btn"
NAV_CONTAINER_CLASS = "page-navigation-controls"


def make_element(root, tag: str, text: Optional[str] = None, **attrs):
    """
    Create an element that matches the document's flavour.

    Namespaced XHTML gets elements in the same namespace, and trees from
    the HTML parser get HTML elements.
    """
    attrib = {k.rstrip("_"): v for k, v in attrs.items()}
    namespace = etree.QName(root).namespace
    if namespace:
        element = root.makeelement(f"{{{namespace}}}{tag}", attrib, nsmap={None: namespace})
    else:
        element = root.makeelement(tag, attrib)
    if text is not None:
        element.text = text
    return element


def build_navigation_controls(root, page_count: int):
    """
    Build the previous / page-input / count / next group.

    Returns:
        The container element, or None for documents with at most one
        page (navigation is pointless there).
    """
    if page_count <= 1:
        return None

    container = make_element(root, "div", class_=NAV_CONTAINER_CLASS)

    prev_button = make_element(
        root, "button", "‹", id=PREV_CONTROL_ID, title="Previous page", type="button"
    )
    page_input = make_element(
        root,
        "input",
        id=PAGE_INPUT_ID,
        type="number",
        min="1",
        max=str(page_count),
        value="1",
        title=f"Go to page (1-{page_count})",
    )
    count_label = make_element(root, "span", f"/ {page_count}")
    next_button = make_element(
        root, "button", "›", id=NEXT_CONTROL_ID, title="Next page", type="button"
    )

    for child in (prev_button, page_input, count_label, next_button):
        container.append(child)
    return container


def build_copy_button(root):
    """
    Build the copy-all button.

    Returns:
        The button element, or None when the document has no pages.
    """
    if not find_page_nodes(root):
        return None
    return make_element(
        root,
        "button",
        "\U0001f4cb Copy All",
        id=COPY_BUTTON_ID,
        title="Copy plain text from all pages",
        type="button",
    )


def stamp_page_anchors(root) -> int:
    """
    Give page containers without an id the ``page-<N>`` anchor id.

    N is the 1-based position, the same numbering navigation uses.
    Containers that already carry an id, and anchors that already exist
    elsewhere, are left alone.

    Returns:
        Number of ids added.
    """
    stamped = 0
    for idx, node in enumerate(find_page_nodes(root)):
        if node.get("id") is not None or find_anchor(root, idx + 1) is not None:
            continue
        node.set("id", anchor_id(idx + 1))
        stamped += 1
    return stamped


def inject_controls(root):
    """
    Insert the control bar at the top of ``<body>``.

    Re-injecting replaces the previous bar.  Missing page anchors are
    stamped so navigation has somewhere to scroll to.

    Returns:
        The inserted control bar element.
    """
    existing = find_by_id(root, CONTROL_BAR_ID)
    if existing is not None and existing.getparent() is not None:
        existing.getparent().remove(existing)

    page_count = resolve_page_count(root)
    bar = make_element(root, "div", id=CONTROL_BAR_ID, class_="control-bar")

    nav = build_navigation_controls(root, page_count)
    if nav is not None:
        bar.append(nav)

    copy_button = build_copy_button(root)
    if copy_button is not None:
        bar.append(copy_button)

    host = find_body(root)
    if host is None:
        host = root
    host.insert(0, bar)

    stamped = stamp_page_anchors(root)
    logger.info(
        "Injected controls (%d pages, navigation %s, %d anchors added)",
        page_count,
        "on" if nav is not None else "off",
        stamped,
    )
    return bar
