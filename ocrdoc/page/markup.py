"""
Node lookups for the OCR renderer's markup.

The renderer emits ``section.win11OneOcrPage`` page containers holding
``segment`` elements, which in turn hold ``w`` word elements.  Lookups
use ``local-name()`` so the same expressions work on namespaced XHTML,
plain XML and trees built by the lenient HTML parser.
"""

import re
from typing import List, Optional

from lxml import etree

PAGE_CLASS = "win11OneOcrPage"
PAGES_COUNT_META = "pagesCount"
ANCHOR_PREFIX = "page-"

# Attribute names for the declared page ordinal.  The HTML parser
# lowercases attribute names, so both spellings are accepted.
PAGE_NUMBER_ATTRS = ("pageNum", "pagenum")

_PAGE_XPATH = etree.XPath(
    "//*[local-name()='section']"
    "[contains(concat(' ', normalize-space(@class), ' '), $cls)]"
)
_SEGMENT_XPATH = etree.XPath(".//*[local-name()='segment']")
_WORD_XPATH = etree.XPath(".//*[local-name()='w']")
_META_XPATH = etree.XPath("//*[local-name()='meta'][@name=$name]")
_ID_XPATH = etree.XPath("//*[@id=$id]")
_BODY_XPATH = etree.XPath("//*[local-name()='body']")

# Decimal integer with optional sign, nothing else
_RE_INTEGER = re.compile(r"[+-]?[0-9]+")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse a strict decimal integer.

    Surrounding whitespace, decimal points, underscores and values
    outside the signed 32-bit range are rejected.

    Returns:
        The parsed integer, or ``None`` when *value* is unparsable.
    """
    if value is None or not _RE_INTEGER.fullmatch(value):
        return None
    number = int(value)
    if number < _INT_MIN or number > _INT_MAX:
        return None
    return number


def find_page_nodes(root) -> List[etree._Element]:
    """Return every page container in document order."""
    return _PAGE_XPATH(root, cls=f" {PAGE_CLASS} ")


def find_segment_nodes(page) -> List[etree._Element]:
    """Return the segments of *page* in document order."""
    return _SEGMENT_XPATH(page)


def find_word_nodes(segment) -> List[etree._Element]:
    """Return the words of *segment* in document order."""
    return _WORD_XPATH(segment)


def find_pages_count_meta(root) -> Optional[etree._Element]:
    """Return the first ``<meta name="pagesCount">`` element, if any."""
    matches = _META_XPATH(root, name=PAGES_COUNT_META)
    return matches[0] if matches else None


def find_by_id(root, element_id: str) -> Optional[etree._Element]:
    """Return the first element carrying ``id=element_id``, if any."""
    matches = _ID_XPATH(root, id=element_id)
    return matches[0] if matches else None


def find_body(root) -> Optional[etree._Element]:
    matches = _BODY_XPATH(root)
    return matches[0] if matches else None


def anchor_id(page_number: int) -> str:
    """Anchor id used to scroll to *page_number*."""
    return f"{ANCHOR_PREFIX}{page_number}"


def find_anchor(root, page_number: int) -> Optional[etree._Element]:
    return find_by_id(root, anchor_id(page_number))


def node_text(node) -> str:
    """Concatenated descendant text of *node*, comments excluded."""
    return str(node.xpath("string()"))


def declared_page_number(page) -> Optional[int]:
    """Parsed ``pageNum`` attribute of a page container, if usable."""
    for attr in PAGE_NUMBER_ATTRS:
        value = page.get(attr)
        if value is not None:
            return parse_int(value)
    return None
